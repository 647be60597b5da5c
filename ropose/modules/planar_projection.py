from dataclasses import dataclass

import numpy as np
import tf_transformations

HEADING_MODES = ('angle', 'yaw')


@dataclass(frozen=True)
class PlanarPose:
    x: float
    y: float
    heading: float


def rotation_angle(q):
    """
    Total rotation angle of a unit quaternion (x, y, z, w), in [0, 2*pi].

    This is the magnitude of the axis-angle form of the full orientation,
    so any roll or pitch of the body shows up in it.
    """
    w = np.clip(q[3], -1.0, 1.0)
    return float(2.0 * np.arccos(w))


def yaw(q):
    """Rotation about z from the static xyz Euler decomposition."""
    return float(tf_transformations.euler_from_quaternion(list(q))[2])


def project(transform, heading_mode='angle'):
    """
    Collapse a RigidTransform into a PlanarPose.

    x and y are copied from the translation and z is dropped. The heading is
    the quaternion rotation angle ('angle'), or the yaw component ('yaw').
    """
    if heading_mode == 'angle':
        heading = rotation_angle(transform.rotation)
    elif heading_mode == 'yaw':
        heading = yaw(transform.rotation)
    else:
        raise ValueError(f"Unknown heading mode '{heading_mode}', expected one of {HEADING_MODES}")

    return PlanarPose(x=float(transform.translation[0]),
                      y=float(transform.translation[1]),
                      heading=heading)
