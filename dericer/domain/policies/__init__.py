"""Domain policies package."""

from .visibility import exclude_deleted, is_active

__all__ = ["exclude_deleted", "is_active"]
