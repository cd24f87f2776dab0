"""Domain models for users."""

from packages.users.models.domain.user_entitlement import (
    EntitlementGrant,
    PremiumGrantUpdate,
)

__all__ = [
    "EntitlementGrant",
    "PremiumGrantUpdate",
]
