"""
Pydantic model for the per-tick world -> talk transform.
"""
from __future__ import annotations

import math
import time
from typing import Optional, Tuple

import numpy as np
from pydantic import BaseModel

from .. import config as C


def quaternion_from_rpy(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """
    Fixed-axis roll/pitch/yaw to a unit quaternion (x, y, z, w),
    same convention as tf's setRPY.
    """
    cr, sr = math.cos(roll / 2), math.sin(roll / 2)
    cp, sp = math.cos(pitch / 2), math.sin(pitch / 2)
    cy, sy = math.cos(yaw / 2), math.sin(yaw / 2)
    q = np.array([
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
        cr * cp * cy + sr * sp * sy,
    ], dtype=np.float64)
    return q / np.linalg.norm(q)


# Constant for the life of the process; only the stamp changes per tick.
_ROTATION: Tuple[float, float, float, float] = tuple(
    float(v) for v in quaternion_from_rpy(*C.ROTATION_RPY)
)


class TransformSnapshot(BaseModel):
    """
    Pose of child_frame in parent_frame at `stamp` (wall-clock seconds).
    rotation is (x, y, z, w).
    """
    parent_frame: str
    child_frame: str
    translation: Tuple[float, float, float]
    rotation: Tuple[float, float, float, float]
    stamp: float


def make_transform_snapshot(stamp: Optional[float] = None) -> TransformSnapshot:
    """Build the talker's constant transform stamped with `stamp` (default: now)."""
    return TransformSnapshot(
        parent_frame=C.PARENT_FRAME,
        child_frame=C.CHILD_FRAME,
        translation=C.TRANSLATION,
        rotation=_ROTATION,
        stamp=time.time() if stamp is None else stamp,
    )
