from .planar_projection import HEADING_MODES

# reference behavior: odom -> base_link, Pose2D on /ropose, depth 1, 10 Hz
DEFAULTS = {
    'reference_frame': 'odom',
    'body_frame': 'base_link',
    'topic': '/ropose',
    'queue_depth': '1',
    'rate': '10.0',
    'heading_mode': 'angle',
}


def load_config_params(self, config):
    # frames
    self.reference_frame = config.get('reference_frame', DEFAULTS['reference_frame'])
    self.body_frame = config.get('body_frame', DEFAULTS['body_frame'])

    # publisher
    self.topic = config.get('topic', DEFAULTS['topic'])
    self.queue_depth = int(config.get('queue_depth', DEFAULTS['queue_depth']))
    if self.queue_depth < 1:
        raise ValueError(f"queue_depth must be at least 1, got {self.queue_depth}")

    # pacing
    self.rate = float(config.get('rate', DEFAULTS['rate']))  # Hz
    if self.rate <= 0.0:
        raise ValueError(f"rate must be positive, got {self.rate}")

    self.heading_mode = config.get('heading_mode', DEFAULTS['heading_mode'])
    if self.heading_mode not in HEADING_MODES:
        raise ValueError(f"heading_mode must be one of {HEADING_MODES}, got '{self.heading_mode}'")
