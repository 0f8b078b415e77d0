from __future__ import annotations

import logging

from ..core import SharedState
from ..models import ModifyTalkerRequest, ModifyTalkerResponse, TalkerStatus

_log = logging.getLogger(__name__)


def modify_talker_message_service(
    state: SharedState, req: ModifyTalkerRequest, logger=None
) -> ModifyTalkerResponse:
    """
    Commit req.inputStr as the new chatter text and echo it back.
    Total over all strings, the empty string included.
    """
    state.write(req.inputStr)
    (logger or _log).info(f"Default message by talker changed to: {req.inputStr}")
    return ModifyTalkerResponse(modifiedStr=req.inputStr)


def get_talker_status_service(state: SharedState, emitter) -> TalkerStatus:
    stats = emitter.stats()
    return TalkerStatus(
        text=state.read(),
        frequency_hz=emitter.rate.frequency_hz,
        last_sequence=stats["last_sequence"],
        emitted=stats["emitted"],
        failed=stats["failed"],
    )
