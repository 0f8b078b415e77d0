"""
Status routes.
"""
from fastapi import APIRouter, HTTPException

from ..deps import get_shared, get_emitter
from ...models import TalkerStatus
from ...services.talker_service import get_talker_status_service

router = APIRouter(tags=["status"])


@router.get("/status", response_model=TalkerStatus)
def status():
    """Current chatter text, rate and emit counters."""
    emitter = get_emitter()
    if emitter is None:
        raise HTTPException(status_code=503, detail="emitter not running")
    return get_talker_status_service(get_shared(), emitter)
