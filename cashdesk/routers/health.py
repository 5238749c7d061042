from fastapi import APIRouter

from cashdesk.core.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
async def health():
    return {"status": "ok", "version": get_settings().version}
