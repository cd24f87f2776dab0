"""
Normalizes the webhook shapes Mercado Pago sends into one Notification.

Shapes seen in the wild:
- webhooks:   body {"type": "payment", "data": {"id": "123"}}, query ?data.id=123&type=payment
- IPN:        query ?topic=payment&id=123
- legacy IPN: body {"topic": "payment", "resource": "123"} (resource may be a URL)

Each field is resolved from an ordered list of candidate locations; the
first non-empty value wins.
"""

from typing import Any, Mapping, Optional

from packages.payments.models.domain.notification import Notification


def _scalar(value: Any) -> Optional[str]:
    """Stringify a candidate value, or None when it is empty or not a scalar."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return None
    text = str(value).strip()
    return text or None


def _first(*candidates: Any) -> Optional[str]:
    for candidate in candidates:
        value = _scalar(candidate)
        if value is not None:
            return value
    return None


def _resource_id(resource: Any) -> Optional[str]:
    """Legacy `resource` is either the bare id or a URL ending in it."""
    text = _scalar(resource)
    if text is None:
        return None
    return text.rstrip("/").rsplit("/", 1)[-1] or None


def normalize_notification(
    body: Any, query: Optional[Mapping[str, Any]] = None
) -> Notification:
    """
    Extract the event type and transaction id from a webhook call.

    Pure function of its inputs; never raises. A body that is not a JSON
    object is treated as empty.

    Args:
        body: Decoded JSON body
        query: Query-string parameters

    Returns:
        Notification with event_type and transaction_id set where found
    """
    fields = body if isinstance(body, Mapping) else {}
    params = query or {}

    data = fields.get("data")
    data_id = data.get("id") if isinstance(data, Mapping) else None

    event_type = _first(
        fields.get("type"),
        fields.get("topic"),
        params.get("type"),
        params.get("topic"),
    )
    transaction_id = _first(
        data_id,
        params.get("id"),
        params.get("data.id"),
        _resource_id(fields.get("resource")),
        fields.get("id"),
    )

    return Notification(
        event_type=event_type,
        transaction_id=transaction_id,
        body=body,
        query=dict(params),
    )
