import logging

from .transform_sampler import TransformUnavailable
from .planar_projection import project

'''
Sample -> project -> publish -> pace.
A missing transform skips the publish for that cycle and nothing else.
'''


class PoseBridge:
    def __init__(self, sampler, publish, pacer, heading_mode='angle', logger=None):
        """
        :param sampler: TransformSampler (or anything with sample()).
        :param publish: callable taking a PlanarPose. Fire-and-forget.
        :param pacer: FixedRatePacer owning the loop period.
        :param heading_mode: 'angle' or 'yaw', see planar_projection.project.
        :param logger: rclpy or logging logger; only debug/info are used.
        """
        self.sampler = sampler
        self.publish = publish
        self.pacer = pacer
        self.heading_mode = heading_mode
        self.logger = logger or logging.getLogger(__name__)

    def step(self):
        """Run one iteration without pacing. Returns the published pose or None."""
        sample = self.sampler.sample()

        if isinstance(sample, TransformUnavailable):
            self.logger.debug(f'No transform {sample.reference_frame} -> {sample.body_frame}: {sample.reason}')
            return None

        pose = project(sample, self.heading_mode)
        self.publish(pose)
        return pose

    def run(self, ok=lambda: True):
        """Loop until ok() turns false. ok() is checked once per iteration, before sampling."""
        self.pacer.reset()
        while ok():
            self.step()
            self.pacer.sleep()
