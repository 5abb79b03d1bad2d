"""Value formatters for display."""

from datetime import date
from decimal import Decimal


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Convert to Brazilian format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_percentage(value: Decimal | int, decimals: int = 0) -> str:
    """
    Format a value already expressed in percent.

    Args:
        value: Percentage (e.g., 67 for 67%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "67%" or "15,5%"
    """
    formatted = f"{value:.{decimals}f}".replace(".", ",")
    return f"{formatted}%"


def format_rate(rate: Decimal) -> str:
    """Format a bracket rate fraction (0.075) as "7,5%"."""
    text = f"{(rate * 100).normalize():f}"
    return f"{text.replace('.', ',')}%"


def format_lote(mes: int | str, ano: int) -> str:
    """Format a reference period as MM/AAAA."""
    return f"{str(mes).zfill(2)}/{ano}"


def format_date(value: date | None) -> str:
    """Format a date as DD/MM/AAAA (empty string for None)."""
    if value is None:
        return ""
    return value.strftime("%d/%m/%Y")
