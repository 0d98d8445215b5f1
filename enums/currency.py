from enum import Enum


class Currency(str, Enum):
    BRL = "BRL"
    EUR = "EUR"
    USD = "USD"

    def get_symbol(self) -> str:
        match self:
            case Currency.BRL:
                return "R$"
            case Currency.EUR:
                return "€"
            case Currency.USD:
                return "$"
