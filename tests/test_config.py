import pytest

from epath.bezier import QuadBezier
from epath.config import CurveConfig, get_curve_config, set_curve_config
from epath.segments import Segment
from epath.subpath import SubPath


@pytest.fixture
def restore_config():
    saved = get_curve_config()
    try:
        yield
    finally:
        set_curve_config(saved)


def _almost_closed() -> SubPath:
    return SubPath(
        [
            Segment.move((0, 0)),
            Segment.line((100, 0)),
            Segment.line((100, 100)),
            Segment.line((0.5, 0)),
            Segment.close(),
        ]
    )


def test_defaults():
    config = get_curve_config()
    assert config == CurveConfig(steps=20, tolerance=0.5, closing_tolerance=1.0, min_curve_turn=0.17)


def test_get_returns_a_copy(restore_config):
    config = get_curve_config()
    config.steps = 3
    assert get_curve_config().steps == 20


def test_closing_tolerance_is_used_by_subpaths(restore_config):
    assert len(_almost_closed()) == 5

    set_curve_config(CurveConfig(closing_tolerance=0.1))

    assert len(_almost_closed()) == 6


def test_steps_default_feeds_arc_length(restore_config):
    curve = QuadBezier((0.0, 0.0), (50.0, 100.0), (100.0, 0.0))
    fine = curve.arc_length(1.0)

    set_curve_config(CurveConfig(steps=2))

    assert curve.arc_length(1.0) < fine


@pytest.mark.parametrize("config", [CurveConfig(steps=0), CurveConfig(tolerance=0.0)])
def test_invalid_config_is_rejected(config, restore_config):
    with pytest.raises(ValueError):
        set_curve_config(config)
    assert get_curve_config() == CurveConfig()
