"""Payments API routes."""

from packages.payments.routes import webhooks

__all__ = ["webhooks"]
