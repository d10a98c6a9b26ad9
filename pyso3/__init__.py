"""SO(3) rotations in interchangeable representations

Rotation matrices, axis-angle, quaternions and rotation vectors share one
set of group operations. Conversions are routed through the canonical
rotation matrix representation.
"""
from .lie.so3 import exp, log, vee, wedge
from .so3.group import SO3
from .so3.rep import (
    CANONICAL,
    AngleAxis,
    AxisAngle,
    Dcm,
    Euler,
    Quat,
    RotationVector,
    traits,
)
from .so3.operations import convert, conversion_path

__version__ = "0.1.0"
