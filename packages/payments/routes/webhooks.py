"""
Webhook endpoints for payment notifications.

Public endpoints (no auth required); an optional shared secret is checked
internally.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from packages.payments.webhooks.mercadopago_webhook import handle_mercadopago_webhook

router = APIRouter()


@router.post("/mp-webhook", response_class=PlainTextResponse)
async def mercadopago_webhook(request: Request) -> PlainTextResponse:
    """
    Receive payment notifications from Mercado Pago.

    Register this URL in the Mercado Pago panel, e.g.
    https://<host>/api/mp-webhook
    """
    return await handle_mercadopago_webhook(request)
