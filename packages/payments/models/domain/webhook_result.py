"""
Outcomes of handling a payment webhook and the HTTP response for each.

Policy: 500 when a redelivery by the provider could succeed, 200 when the
outcome is final. 401 is reserved for shared-secret failures.
"""

from enum import Enum


class WebhookResult(Enum):
    """Terminal outcome of one webhook call."""

    IGNORED = (200, "ignored")
    UNAUTHORIZED = (401, "unauthorized")
    MISSING_ACCESS_TOKEN = (500, "missing access token")
    FETCH_FAILED = (500, "transaction fetch fail")
    NOT_APPROVED = (200, "pending/not-approved")
    MISSING_EMAIL = (200, "no payer email")
    GRANTED = (200, "ok")
    ERROR = (500, "error")

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
