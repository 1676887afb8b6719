"""
Message Definitions (Stub for ROS 2 interfaces)

Simplified Python classes mirroring the structure of:
- std_msgs/String
- geometry_msgs/TransformStamped
- beginner_tutorials_interfaces/ModifyTalkerString
"""

from dataclasses import dataclass, field

# === Primitives ===

@dataclass
class Time:
    sec: int = 0
    nanosec: int = 0

    @staticmethod
    def from_float(timestamp: float):
        t = Time()
        t.sec = int(timestamp)
        t.nanosec = int((timestamp - int(timestamp)) * 1e9)
        return t

    def to_float(self) -> float:
        return self.sec + self.nanosec * 1e-9

@dataclass
class Header:
    stamp: Time = field(default_factory=Time)
    frame_id: str = ""

@dataclass
class String:
    data: str = ""

# === Geometry Messages ===

@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

@dataclass
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

@dataclass
class Transform:
    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)

@dataclass
class TransformStamped:
    header: Header = field(default_factory=Header)
    child_frame_id: str = ""
    transform: Transform = field(default_factory=Transform)

# === Services (beginner_tutorials_interfaces) ===

class ModifyTalkerString:
    @dataclass
    class Request:
        input_str: str = ""

    @dataclass
    class Response:
        modified_str: str = ""
