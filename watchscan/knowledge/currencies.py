"""Static exchange rates used to present valuations in other currencies."""

from __future__ import annotations

# Units of each currency per 1 USD.
EXCHANGE_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 149.50,
    "CHF": 0.88,
    "AUD": 1.52,
    "CAD": 1.36,
    "CNY": 7.24,
    "HKD": 7.83,
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CHF": "CHF",
    "AUD": "A$",
    "CAD": "C$",
    "CNY": "¥",
    "HKD": "HK$",
}


def _rate(currency: str) -> float:
    try:
        return EXCHANGE_RATES[currency.upper()]
    except KeyError:
        raise ValueError(f"Unsupported currency: {currency!r}") from None


def convert_currency(amount: float, from_currency: str, to_currency: str) -> int:
    """Convert ``amount`` between currencies, rounded to whole units."""
    amount_in_usd = amount / _rate(from_currency)
    return round(amount_in_usd * _rate(to_currency))


def format_currency(amount: float, currency: str) -> str:
    """Render an amount with its currency symbol and thousands separators."""
    code = currency.upper()
    _rate(code)
    return f"{CURRENCY_SYMBOLS[code]}{round(amount):,}"


__all__ = [
    "CURRENCY_SYMBOLS",
    "EXCHANGE_RATES",
    "convert_currency",
    "format_currency",
]
