"""Three-state field patches for partial updates.

A patch is one of ``UNCHANGED`` (keep the stored value), ``CLEAR`` (drop an
optional value) or ``SetTo(value)``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from dericer.domain.errors import ValidationError

T = TypeVar("T")


class Unchanged:
    """Patch keeping the current value."""

    def __repr__(self) -> str:
        return "UNCHANGED"


class Clear:
    """Patch removing the current value."""

    def __repr__(self) -> str:
        return "CLEAR"


@dataclass(frozen=True)
class SetTo(Generic[T]):
    """Patch replacing the current value."""

    value: T


UNCHANGED = Unchanged()
CLEAR = Clear()

FieldPatch = Union[Unchanged, Clear, SetTo[T]]


def apply_patch(patch: FieldPatch, current):
    """Return the value resulting from applying a patch to ``current``."""
    if isinstance(patch, Unchanged):
        return current
    if isinstance(patch, Clear):
        return None
    if isinstance(patch, SetTo):
        return patch.value
    raise TypeError(f"Unsupported field patch: {patch!r}")


def apply_required_patch(patch: FieldPatch, current, field_name: str):
    """Apply a patch to a field that cannot be cleared.

    Raises:
        ValidationError: If the patch is ``CLEAR``.
    """
    if isinstance(patch, Clear):
        raise ValidationError(f"Field {field_name} cannot be cleared.")
    return apply_patch(patch, current)


def patch_from_mapping(
    changes: Mapping[str, Any],
    key: str,
    *,
    none_clears: bool = False,
) -> FieldPatch:
    """Build a patch from a plain change mapping.

    An absent key yields ``UNCHANGED``. An explicit ``None`` yields ``CLEAR``
    when ``none_clears`` is set and ``UNCHANGED`` otherwise.
    """
    if key not in changes:
        return UNCHANGED
    value = changes[key]
    if value is None:
        return CLEAR if none_clears else UNCHANGED
    return SetTo(value)


__all__ = [
    "Unchanged",
    "Clear",
    "SetTo",
    "UNCHANGED",
    "CLEAR",
    "FieldPatch",
    "apply_patch",
    "apply_required_patch",
    "patch_from_mapping",
]
