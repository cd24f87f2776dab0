from fastapi import APIRouter

from api.routes import health
from packages.payments.routes import webhooks

api_router = APIRouter()

# Liveness (no auth required)
api_router.include_router(health.router, tags=["health"])

# Webhooks (no auth - shared secret checked internally)
api_router.include_router(webhooks.router, prefix="/api", tags=["webhooks"])
