"""
HTTP twin of the modifyTalkerMessage ROS service.
"""
from fastapi import APIRouter

from ..deps import get_shared
from ... import config as C
from ...models import ModifyTalkerRequest, ModifyTalkerResponse
from ...services.talker_service import modify_talker_message_service

router = APIRouter(tags=["talker"])


@router.post(f"/{C.SERVICE_NAME}", response_model=ModifyTalkerResponse)
def modify_talker_message(req: ModifyTalkerRequest):
    return modify_talker_message_service(get_shared(), req)
