"""
Fixed world -> talk transform, re-stamped and sent on every tick.
"""

import math
from dataclasses import dataclass
from typing import Tuple

PARENT_FRAME = 'world'
CHILD_FRAME = 'talk'

TRANSLATION = (0.0, 2.0, 0.0)
ROLL, PITCH, YAW = 0.0, 0.0, 1.0


def quaternion_from_euler(roll: float, pitch: float, yaw: float) -> Tuple[float, float, float, float]:
    """Fixed-axis roll/pitch/yaw to an (x, y, z, w) quaternion."""
    cr, sr = math.cos(roll / 2.0), math.sin(roll / 2.0)
    cp, sp = math.cos(pitch / 2.0), math.sin(pitch / 2.0)
    cy, sy = math.cos(yaw / 2.0), math.sin(yaw / 2.0)

    x = sr * cp * cy - cr * sp * sy
    y = cr * sp * cy + sr * cp * sy
    z = cr * cp * sy - sr * sp * cy
    w = cr * cp * cy + sr * sp * sy
    return (x, y, z, w)


ROTATION = quaternion_from_euler(ROLL, PITCH, YAW)


@dataclass(frozen=True)
class TransformSample:
    translation: Tuple[float, float, float]
    rotation: Tuple[float, float, float, float]
    timestamp: float
    parent_frame: str = PARENT_FRAME
    child_frame: str = CHILD_FRAME


class TransformBroadcaster:
    """
    Builds the constant world -> talk sample for a timestamp and hands it
    to `send` (tf2 broadcaster adapter or the simulator bus).
    """

    def __init__(self, send):
        self.send = send

    def broadcast(self, timestamp: float) -> TransformSample:
        sample = TransformSample(TRANSLATION, ROTATION, timestamp)
        self.send(sample)
        return sample
