import logging

from talker.models import ModifyTalkerRequest, ModifyTalkerResponse
from talker.services.talker_service import (
    get_talker_status_service,
    modify_talker_message_service,
)
from talker.core import RateConfig
from talker.emitter import Emitter


def test_modify_echoes_and_commits(shared):
    res = modify_talker_message_service(shared, ModifyTalkerRequest(inputStr="hello"))
    assert isinstance(res, ModifyTalkerResponse)
    assert res.modifiedStr == "hello"
    assert shared.read() == "hello"


def test_modify_accepts_empty_string(shared):
    res = modify_talker_message_service(shared, ModifyTalkerRequest(inputStr=""))
    assert res.modifiedStr == ""
    assert shared.read() == ""


def test_modify_logs_new_value(shared, caplog):
    caplog.set_level(logging.INFO, logger="talker.services.talker_service")
    modify_talker_message_service(shared, ModifyTalkerRequest(inputStr="über"))
    assert "changed to: über" in caplog.text


def test_status_reflects_state_and_counters(shared, transport):
    em = Emitter(shared, transport, RateConfig(25))
    st = get_talker_status_service(shared, em)
    assert st.last_sequence is None
    assert st.frequency_hz == 25

    em.tick()
    em.tick()
    shared.write("now")
    st = get_talker_status_service(shared, em)
    assert (st.text, st.last_sequence, st.emitted, st.failed) == ("now", 1, 2, 0)
