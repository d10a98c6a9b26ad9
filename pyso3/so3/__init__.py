"""
This package contains a set of representations for SO(3). The 3D rotation Lie Group.

dcm: 9 parameters, no singularities, the canonical representation
axis_angle: 4 parameters, axis undefined at zero angle
quat: 4 parameters, no singularities, q and -q are the same rotation
rotation_vector: 3 parameters, exponential coordinates, no product of its own

Conversions between two representations go through the canonical one
unless a direct shortcut is registered in operations.
"""
