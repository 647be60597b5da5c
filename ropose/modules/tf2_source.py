from rclpy.time import Time
from tf2_ros import TransformException

from .transform_sampler import RigidTransform, TransformLookupError


class Tf2TransformSource:
    """Latest-transform queries against a tf2 Buffer."""

    def __init__(self, tf_buffer):
        self.tf_buffer = tf_buffer

    def lookup_latest(self, reference_frame, body_frame):
        try:
            # Time() asks for the latest available transform
            trans = self.tf_buffer.lookup_transform(reference_frame, body_frame, Time())
        except TransformException as e:
            raise TransformLookupError(str(e)) from e

        return to_rigid_transform(trans)


def to_rigid_transform(trans):
    """geometry_msgs/TransformStamped -> RigidTransform"""
    t = trans.transform.translation
    q = trans.transform.rotation
    stamp = trans.header.stamp.sec + trans.header.stamp.nanosec * 1e-9
    return RigidTransform(translation=(t.x, t.y, t.z),
                          rotation=(q.x, q.y, q.z, q.w),
                          reference_frame=trans.header.frame_id,
                          body_frame=trans.child_frame_id,
                          stamp=stamp)
