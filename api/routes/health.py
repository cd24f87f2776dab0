from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def liveness():
    # No rate limiting or logging - uptime probes hit this constantly
    return "Webhook backend online"
