"""Serialization of transaction DTOs to JSON and CSV text."""

import json
from collections.abc import Iterable

from .dto import TransactionDTO, TransactionQueryResultDTO, dto_to_dict

CSV_HEADER = (
    "id",
    "accountId",
    "kind",
    "amountMinor",
    "currency",
    "date",
    "note",
    "categoryId",
    "tags",
    "counterpartyName",
    "transferGroupId",
    "createdAt",
    "updatedAt",
    "isDeleted",
)

_CSV_SPECIAL_CHARS = (",", '"', "\n")


def transactions_to_json(transactions: Iterable[TransactionDTO]) -> str:
    """Return the transactions as a pretty-printed JSON array."""
    return json.dumps(dto_to_dict(list(transactions)), indent=2)


def query_result_to_json(result: TransactionQueryResultDTO) -> str:
    """Return a query result with ``transactions``, ``totalCount`` and
    ``totalAmountMinor`` keys as pretty-printed JSON."""
    return json.dumps(dto_to_dict(result), indent=2)


def _csv_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (tuple, list)):
        value = " ".join(value)
    text = str(value)
    if any(char in text for char in _CSV_SPECIAL_CHARS):
        return '"' + text.replace('"', '""') + '"'
    return text


def transactions_to_csv(transactions: Iterable[TransactionDTO]) -> str:
    """Return the transactions as CSV text with a fixed header row.

    Tags are joined with spaces. Values are quoted only when they contain a
    comma, a quote or a newline; inner quotes are doubled.
    """
    rows = [",".join(CSV_HEADER)]
    for transaction in transactions:
        record = dto_to_dict(transaction)
        rows.append(",".join(_csv_value(record[key]) for key in CSV_HEADER))
    return "\n".join(rows)


__all__ = [
    "CSV_HEADER",
    "transactions_to_json",
    "query_result_to_json",
    "transactions_to_csv",
]
