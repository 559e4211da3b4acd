import dataclasses

import pytest

from epath.geometry import Line
from epath.segments import Segment
from epath.subpath import SubPath


def _square_without_closing_line() -> SubPath:
    return SubPath(
        [
            Segment.move((0, 0)),
            Segment.line((0, 100)),
            Segment.line((100, 100)),
            Segment.line((100, 0)),
            Segment.close(),
        ]
    )


def _mixed() -> SubPath:
    return SubPath(
        [
            Segment.move((0, 0)),
            Segment.quad((50, -20), (100, 0)),
            Segment.line((100, 100)),
            Segment.cubic((60, 120), (40, 120), (0, 100)),
            Segment.close(),
        ]
    )


def test_closing_gap_is_bridged_with_line():
    subpath = _square_without_closing_line()
    assert len(subpath) == 6
    assert subpath[-2] == Segment.line((0, 0))
    assert subpath[-1] == Segment.close()


def test_small_closing_gap_is_kept():
    subpath = SubPath(
        [
            Segment.move((0, 0)),
            Segment.line((100, 0)),
            Segment.line((100, 100)),
            Segment.line((0.5, 0.5)),
            Segment.close(),
        ]
    )
    assert len(subpath) == 5
    assert subpath[-2] == Segment.line((0.5, 0.5))


def test_open_subpath_is_not_normalized():
    segments = [Segment.move((0, 0)), Segment.line((10, 0)), Segment.line((10, 10))]
    assert SubPath(segments).segments == tuple(segments)


def test_destination_of_close_wraps_to_start():
    subpath = _square_without_closing_line()
    assert subpath.destination_point(5) == (0.0, 0.0)
    assert subpath.start_point(0) == (0.0, 0.0)
    assert subpath.start_point(2) == (0.0, 100.0)


def test_destination_of_close_followed_by_move():
    subpath = SubPath(
        [
            Segment.move((0, 0)),
            Segment.line((10, 0)),
            Segment.line((10, 10)),
            Segment.close(),
            Segment.move((50, 50)),
        ]
    )
    assert subpath.destination_point(3) == (50.0, 50.0)


def test_chords_for_each_kind():
    subpath = _mixed()
    assert [s.kind for s in subpath] == ["move", "quad", "line", "cubic", "line", "close"]

    assert subpath.start_chord(1) == Line((0, 0), (50, -20))
    assert subpath.destination_chord(1) == Line((50, -20), (100, 0))

    assert subpath.start_chord(2) == Line((100, 0), (100, 100))
    assert subpath.destination_chord(2) == Line((100, 100), (100, 0))
    assert subpath.destination_vector(2) == (0.0, 100.0)

    assert subpath.start_chord(3) == Line((100, 100), (60, 120))
    assert subpath.destination_chord(3) == Line((40, 120), (0, 100))
    assert subpath.start_vector(3) == (-40.0, 20.0)
    assert subpath.destination_vector(3) == (-40.0, -20.0)


def test_move_and_close_chords_are_degenerate_here():
    subpath = _mixed()
    assert subpath.start_chord(0) == Line((0, 0), (0, 0))
    assert subpath.start_vector(0) == (0.0, 0.0)
    # the close follows an explicit line back to the start
    assert subpath.start_chord(5) == Line((0, 0), (0, 0))


def test_close_chord_spans_implicit_closing_edge():
    subpath = SubPath(
        [
            Segment.move((0, 0)),
            Segment.line((100, 0)),
            Segment.line((100, 100)),
            Segment.line((0.6, 0.0)),
            Segment.close(),
        ]
    )
    assert subpath.start_chord(4) == Line((0.6, 0.0), (0.0, 0.0))
    assert subpath.destination_vector(4) == pytest.approx((-0.6, 0.0))
    assert subpath.chord_length(4) == pytest.approx(0.6)


def test_chord_length():
    subpath = _square_without_closing_line()
    assert subpath.chord_length(1) == 100.0
    assert subpath.chord_length(5) == 0.0


def test_well_formed():
    assert _mixed().is_well_formed
    assert not SubPath([Segment.line((0, 0)), Segment.line((1, 1)), Segment.close()]).is_well_formed
    assert not SubPath([Segment.move((0, 0)), Segment.close()]).is_well_formed


def test_subpath_is_immutable():
    subpath = _mixed()
    with pytest.raises(dataclasses.FrozenInstanceError):
        subpath.segments = ()


def test_string_lists_segments():
    text = str(_square_without_closing_line())
    assert text.splitlines()[0] == "0: move to (0.00, 0.00)"
    assert text.splitlines()[-1] == "5: close subpath"
