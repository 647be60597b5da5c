from dataclasses import dataclass
from typing import Tuple, Union

'''
Latest-transform sampling between a reference frame and a body frame.
A missing transform is an expected outcome, returned as a value.
'''


class TransformLookupError(Exception):
    """Raised by a transform source when the two frames are not connected."""


@dataclass(frozen=True)
class RigidTransform:
    translation: Tuple[float, float, float]
    rotation: Tuple[float, float, float, float]  # x, y, z, w
    reference_frame: str
    body_frame: str
    stamp: float = 0.0


@dataclass(frozen=True)
class TransformUnavailable:
    reference_frame: str
    body_frame: str
    reason: str = ''


class TransformSampler:
    def __init__(self, source, reference_frame='odom', body_frame='base_link'):
        """
        :param source: object with lookup_latest(reference_frame, body_frame)
                       returning a RigidTransform or raising TransformLookupError.
        :param reference_frame: fixed frame the pose is expressed in.
        :param body_frame: moving frame whose pose is sampled.
        """
        self.source = source
        self.reference_frame = reference_frame
        self.body_frame = body_frame

    def sample(self) -> Union[RigidTransform, TransformUnavailable]:
        try:
            return self.source.lookup_latest(self.reference_frame, self.body_frame)
        except TransformLookupError as e:
            return TransformUnavailable(self.reference_frame, self.body_frame, str(e))
