"""Nominal identifier types for ledger entities."""

from typing import NewType
from uuid import uuid4

AccountId = NewType("AccountId", str)
TransactionId = NewType("TransactionId", str)
CategoryId = NewType("CategoryId", str)
BudgetId = NewType("BudgetId", str)
GoalId = NewType("GoalId", str)
TransferGroupId = NewType("TransferGroupId", str)

CurrencyCode = str
ISODateString = str
ISODateTimeString = str


def generate_id() -> str:
    """Return a new random UUID4 string."""
    return str(uuid4())


__all__ = [
    "AccountId",
    "TransactionId",
    "CategoryId",
    "BudgetId",
    "GoalId",
    "TransferGroupId",
    "CurrencyCode",
    "ISODateString",
    "ISODateTimeString",
    "generate_id",
]
