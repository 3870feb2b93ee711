"""
Currency catalogue and split types shared across the application.
"""
import enum
import re


class SplitType(str, enum.Enum):
    """How an expense is divided among its participants."""
    EQUAL = "EQUAL"
    CUSTOM = "CUSTOM"


CURRENCY_SYMBOLS = {
    "CLP": "$",
    "JPY": "¥",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "KRW": "₩",
    "CNY": "¥",
    "THB": "฿",
}

CURRENCY_NAMES = {
    "CLP": "Chilean Peso",
    "JPY": "Japanese Yen",
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "Pound Sterling",
    "KRW": "South Korean Won",
    "CNY": "Chinese Yuan",
    "THB": "Thai Baht",
}

SUPPORTED_CURRENCIES = list(CURRENCY_SYMBOLS.keys())

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


def currency_symbol(currency: str) -> str:
    """Return the display symbol for a currency code, or '' if unknown."""
    return CURRENCY_SYMBOLS.get(currency.upper(), "")


def normalize_currency(value: str) -> str:
    """Upper-case a currency code and check it looks like ISO-4217."""
    code = value.strip().upper()
    if not _CURRENCY_RE.match(code):
        raise ValueError(f"Invalid currency code: {value!r}")
    return code
