"""Shared-secret check for inbound webhooks."""

import hmac
from typing import Mapping, Optional

# Checked in order; the first header carrying a value is compared
SECRET_HEADER_NAMES = ("x-signature", "x-hook-secret", "x-webhook-secret")


def extract_secret(headers: Mapping[str, str]) -> Optional[str]:
    """Return the secret presented by the caller, if any."""
    lowered = {name.lower(): value for name, value in headers.items()}
    for name in SECRET_HEADER_NAMES:
        value = lowered.get(name)
        if value:
            return value
    return None


def is_authentic(shared_secret: Optional[str], headers: Mapping[str, str]) -> bool:
    """
    Decide whether a webhook call may proceed.

    With no shared secret configured every call is admitted. Otherwise the
    presented value must match the secret exactly (constant-time compare).
    """
    if not shared_secret:
        return True

    presented = extract_secret(headers)
    if presented is None:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), shared_secret.encode("utf-8"))
