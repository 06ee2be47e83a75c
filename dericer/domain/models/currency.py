"""Domain models for currencies and money values."""

from dataclasses import dataclass

from dericer.domain.models.ids import CurrencyCode


@dataclass(frozen=True)
class CurrencyConfig:
    """Display settings for a currency.

    Attributes:
        currency: Currency code.
        decimals: Number of decimal places (0 to 6).
        zero_minor_value: Totals whose absolute value is strictly below this
            threshold are treated as zero for display.
    """

    currency: CurrencyCode
    decimals: int
    zero_minor_value: int


@dataclass(frozen=True)
class Money:
    """Amount in integer minor units for a currency."""

    currency: CurrencyCode
    minor_units: int


__all__ = ["CurrencyConfig", "Money"]
