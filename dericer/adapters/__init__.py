"""Adapters exposing the ledger core."""
