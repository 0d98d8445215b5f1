import config


def format_price(amount: float) -> str:
    """
    Format an amount with the configured currency symbol.

    Examples (CURRENCY=BRL, PRICE_DECIMALS=2):
        35.5 → "R$ 35.50"
        0 → "R$ 0.00"
    """
    return f"{config.CURRENCY.get_symbol()} {amount:.{config.PRICE_DECIMALS}f}"
