from enum import Enum


class PriceRule(str, Enum):
    """
    Policy for combining several pizza flavor prices into one base price.

    HIGHER: the most expensive flavor sets the price
    AVERAGE: arithmetic mean of the flavor prices
    """
    HIGHER = "higher"
    AVERAGE = "average"

    @classmethod
    def from_string(cls, value: str | None) -> 'PriceRule':
        """
        Convert catalog value to PriceRule.

        Missing or unknown values map to HIGHER, so a misconfigured
        product is never priced below its most expensive flavor.

        Examples:
            >>> PriceRule.from_string("average")
            PriceRule.AVERAGE
            >>> PriceRule.from_string("cheapest")
            PriceRule.HIGHER
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.HIGHER

        normalized = str(value).strip().lower()
        for rule in cls:
            if rule.value == normalized:
                return rule
        return cls.HIGHER
