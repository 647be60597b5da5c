import pytest

from ropose.modules.transform_sampler import (RigidTransform, TransformLookupError,
                                              TransformSampler, TransformUnavailable)


class FakeSource:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.queries = []

    def lookup_latest(self, reference_frame, body_frame):
        self.queries.append((reference_frame, body_frame))
        if self.error is not None:
            raise self.error
        return self.result


TRANSFORM = RigidTransform(translation=(1.0, 2.0, 0.0),
                           rotation=(0.0, 0.0, 0.0, 1.0),
                           reference_frame='odom',
                           body_frame='base_link',
                           stamp=12.5)


def test_sample_returns_transform():
    source = FakeSource(result=TRANSFORM)
    assert TransformSampler(source).sample() == TRANSFORM
    assert source.queries == [('odom', 'base_link')]


def test_sample_uses_configured_frames():
    source = FakeSource(result=TRANSFORM)
    TransformSampler(source, 'map', 'chassis').sample()
    assert source.queries == [('map', 'chassis')]


def test_lookup_error_becomes_outcome():
    source = FakeSource(error=TransformLookupError('"odom" passed to lookupTransform does not exist'))
    outcome = TransformSampler(source).sample()
    assert isinstance(outcome, TransformUnavailable)
    assert outcome.reference_frame == 'odom'
    assert outcome.body_frame == 'base_link'
    assert 'does not exist' in outcome.reason


def test_other_errors_propagate():
    source = FakeSource(error=RuntimeError('broken buffer'))
    with pytest.raises(RuntimeError):
        TransformSampler(source).sample()
