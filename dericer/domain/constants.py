"""Domain constants for ledger accounting."""

MAX_SAFE_INTEGER = 2**53 - 1

MAX_AMOUNT_DIGITS = 15

MIN_CURRENCY_DECIMALS = 0
MAX_CURRENCY_DECIMALS = 6
DEFAULT_CURRENCY_DECIMALS = 2

POSITIVE_KINDS = ("income", "receivable")
NEGATIVE_KINDS = ("expense", "debt")


__all__ = [
    "MAX_SAFE_INTEGER",
    "MAX_AMOUNT_DIGITS",
    "MIN_CURRENCY_DECIMALS",
    "MAX_CURRENCY_DECIMALS",
    "DEFAULT_CURRENCY_DECIMALS",
    "POSITIVE_KINDS",
    "NEGATIVE_KINDS",
]
