"""
Mercado Pago webhook handler.

Mercado Pago retries a notification until it gets a 2xx answer, so the
status code of every response decides whether the call is redelivered.
"""

import json
from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse

from common.core.telemetry import get_logger
from packages.payments.models.domain.webhook_result import WebhookResult
from packages.payments.services.webhook_service import PaymentWebhookService

logger = get_logger(__name__)


async def _read_json_body(request: Request) -> Any:
    """Decode the request body, treating an empty or invalid body as {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raw_text = raw[:1000].decode("utf-8", errors="replace")
        logger.warning(
            f"Webhook body is not valid JSON: {raw_text!r}",
            extra={"raw_body": raw_text},
        )
        return {}


async def handle_mercadopago_webhook(request: Request) -> PlainTextResponse:
    """
    Handle incoming notification from Mercado Pago.

    Accepts the webhook body format, the IPN query-string format and the
    legacy resource body format.
    """
    try:
        body = await _read_json_body(request)
        service = PaymentWebhookService()
    except Exception:
        logger.exception(
            f"Failed to prepare payment webhook for {request.url.path}?{request.url.query}"
        )
        result = WebhookResult.ERROR
    else:
        result = await service.handle(
            body=body,
            query=dict(request.query_params),
            headers=request.headers,
        )

    return PlainTextResponse(result.body, status_code=result.status_code)
