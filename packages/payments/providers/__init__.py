"""Payments providers - abstracted external platform integrations."""

from packages.payments.providers.transaction.factory import get_transaction_provider

__all__ = [
    "get_transaction_provider",
]
