"""Helpers for reading user-supplied amounts as Decimal."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Read a major-unit amount as Decimal.

    Strings are stripped and may use ``,`` as the decimal separator. Floats
    go through ``str`` so ``1.1`` stays ``Decimal("1.1")``.

    Args:
        value: Amount given as int, float, Decimal or string.

    Returns:
        Decimal: Parsed amount; ``None`` reads as zero.

    Raises:
        decimal.InvalidOperation: If a string is not a number.
        ValueError: If the value is a bool.
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not an amount.")
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return Decimal(value.strip().replace(",", "."))
    return Decimal(str(value))


__all__ = ["coerce_decimal"]
