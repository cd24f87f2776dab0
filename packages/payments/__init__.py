"""
Payments package - relays payment provider notifications into entitlements.

This package integrates with:
- Mercado Pago: webhook notifications and the payments lookup API

A notification is normalized, optionally authenticated with a shared secret,
confirmed against the provider, and handed to the users package to grant
premium access.
"""
