# talker/models/__init__.py
from .status import StatusRecord, TalkerStatus
from .transform import TransformSnapshot, make_transform_snapshot, quaternion_from_rpy
from .talker import ModifyTalkerRequest, ModifyTalkerResponse
