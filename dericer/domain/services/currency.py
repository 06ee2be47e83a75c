"""Domain services for currency configuration and minor-unit money."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from dericer.domain.constants import (
    DEFAULT_CURRENCY_DECIMALS,
    MAX_AMOUNT_DIGITS,
    MAX_CURRENCY_DECIMALS,
    MAX_SAFE_INTEGER,
    MIN_CURRENCY_DECIMALS,
)
from dericer.domain.errors import ValidationError
from dericer.domain.models.currency import CurrencyConfig, Money
from dericer.domain.models.ids import CurrencyCode
from dericer.utils.decimal_utils import coerce_decimal


def create_currency_config(
    currency: CurrencyCode,
    decimals: int | None = None,
    zero_minor_value: int | None = None,
) -> CurrencyConfig:
    """Build a validated currency configuration.

    Args:
        currency: Currency code.
        decimals: Decimal places, defaults to 2.
        zero_minor_value: Display threshold in minor units, defaults to 0.

    Returns:
        CurrencyConfig: Validated configuration.

    Raises:
        ValidationError: If decimals fall outside 0..6 or the threshold is
            negative.
    """
    resolved_decimals = (
        DEFAULT_CURRENCY_DECIMALS if decimals is None else decimals
    )
    if not (
        MIN_CURRENCY_DECIMALS <= resolved_decimals <= MAX_CURRENCY_DECIMALS
    ):
        raise ValidationError(
            f"Currency decimals must be between {MIN_CURRENCY_DECIMALS} "
            f"and {MAX_CURRENCY_DECIMALS}."
        )
    resolved_zero = 0 if zero_minor_value is None else zero_minor_value
    if resolved_zero < 0:
        raise ValidationError("zero_minor_value cannot be negative.")
    return CurrencyConfig(
        currency=currency,
        decimals=resolved_decimals,
        zero_minor_value=resolved_zero,
    )


def get_currency_config_or_raise(
    configs: Iterable[CurrencyConfig],
    currency: CurrencyCode,
) -> CurrencyConfig:
    """Return the configuration registered for ``currency``.

    Raises:
        ValidationError: If no configuration exists for the currency.
    """
    for config in configs:
        if config.currency == currency:
            return config
    raise ValidationError(
        f'No currency configuration found for currency "{currency}".'
    )


def is_effectively_zero(minor_units: int, config: CurrencyConfig) -> bool:
    """Return True when ``minor_units`` is strictly below the threshold."""
    return abs(minor_units) < config.zero_minor_value


def is_safe_integer(value) -> bool:
    """Return True for ints (not bools) within the safe integer range."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return abs(value) <= MAX_SAFE_INTEGER


def to_minor_units(amount, decimals: int) -> int:
    """Convert a major-unit amount to integer minor units.

    Half values round away from zero.

    Raises:
        ValidationError: If the amount is not a finite number or does not fit
            the safe integer range.
    """
    try:
        numeric = coerce_decimal(amount)
    except (InvalidOperation, ValueError):
        raise ValidationError(f'Invalid amount: "{amount}"') from None
    if not numeric.is_finite():
        raise ValidationError(f'Invalid amount: "{amount}"')
    scaled = (numeric * (Decimal(10) ** decimals)).quantize(
        Decimal("1"),
        rounding=ROUND_HALF_UP,
    )
    minor_units = int(scaled)
    if not is_safe_integer(minor_units):
        raise ValidationError(
            "Amount is too large for safe integer representation: "
            f'"{amount}"'
        )
    return minor_units


def from_minor_units(minor_units: int, decimals: int) -> Decimal:
    """Convert integer minor units back to a major-unit Decimal."""
    return Decimal(minor_units).scaleb(-decimals)


def create_money(
    currency: CurrencyCode,
    amount,
    decimals: int = DEFAULT_CURRENCY_DECIMALS,
) -> Money:
    """Build a Money value from a major-unit amount.

    Raises:
        ValidationError: If the amount is invalid or has more than
            ``MAX_AMOUNT_DIGITS`` digits including decimals.
    """
    minor_units = to_minor_units(amount, decimals)
    _validate_amount_digits(minor_units, decimals)
    return Money(currency=currency, minor_units=minor_units)


def _validate_amount_digits(minor_units: int, decimals: int) -> None:
    whole, fraction = divmod(abs(minor_units), 10**decimals)
    digits = str(whole) + (str(fraction).zfill(decimals) if decimals else "")
    if len(digits) > MAX_AMOUNT_DIGITS:
        raise ValidationError(
            f"Amount exceeds maximum allowed {MAX_AMOUNT_DIGITS} digits "
            "(including decimals)."
        )


__all__ = [
    "create_currency_config",
    "get_currency_config_or_raise",
    "is_effectively_zero",
    "is_safe_integer",
    "to_minor_units",
    "from_minor_units",
    "create_money",
]
