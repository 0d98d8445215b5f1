from enum import Enum


class AddonSelectionMode(str, Enum):
    """
    Selection policy of an addon group.

    SINGLE: radio, one addon per group
    MULTI: checkbox, independent toggles
    """
    SINGLE = "single"
    MULTI = "multi"

    @classmethod
    def from_string(cls, value: str) -> 'AddonSelectionMode':
        """
        Convert catalog value to AddonSelectionMode.

        The catalog service stores multi-select groups as "multiple".

        Raises:
            ValueError: If value is not a known selection mode
        """
        if isinstance(value, cls):
            return value
        if not value or not str(value).strip():
            raise ValueError("Addon selection mode cannot be empty")

        normalized = str(value).strip().lower()
        if normalized == "multiple":
            return cls.MULTI
        for mode in cls:
            if mode.value == normalized:
                return mode

        valid_modes = [m.value for m in cls]
        raise ValueError(
            f"Invalid addon selection mode '{value}'. Valid modes: {', '.join(valid_modes)}"
        )
