"""
Request/response contract for modifyTalkerMessage.
Field names match the ROS service definition.
"""
from __future__ import annotations

from pydantic import BaseModel


class ModifyTalkerRequest(BaseModel):
    inputStr: str


class ModifyTalkerResponse(BaseModel):
    modifiedStr: str
