"""Thinning: merge runs of short segments into one.

Traced outlines carry many tiny segments. Rounding works on the junction of
two segments, so those runs are collapsed first: the first segment of a run is
stretched to where its arriving chord meets the leaving chord of the next long
segment, which keeps the directions into and out of the run.
"""

from __future__ import annotations

import logging
from typing import List

from .logging_utils import apply_debug_logging
from .segments import Segment
from .subpath import SubPath

logger = logging.getLogger(__name__)


def _next_long_segment(subpath: SubPath, start: int, min_length: float) -> int:
    """Index of the first segment from ``start`` whose chord is not short.

    Returns ``start`` when every remaining segment is short.
    """

    if start - 1 < 0:
        return start
    for idx in range(start, len(subpath)):
        if subpath.chord_length(idx) >= min_length:
            return idx
    return start


def _thin_once(subpath: SubPath, min_length: float) -> SubPath:
    out: List[Segment] = [subpath[0]]
    count = len(subpath)
    merged = 0

    i = 1
    while i < count - 1:
        j = _next_long_segment(subpath, i + 1, min_length)
        if j == i + 1:
            out.append(subpath[i])
            i += 1
            continue

        crossing = subpath.destination_chord(i).intersection(subpath.start_chord(j))
        if crossing is None:
            logger.debug("Chords around segments %d..%d are parallel; keeping %d", i, j, i)
            out.append(subpath[i])
        else:
            out.append(subpath[i].with_destination(crossing))
        merged += j - i - 1
        i = j

    out.append(Segment.close())
    if merged:
        logger.debug("Thinning dropped %d segment(s) below %.3f", merged, min_length)
    return SubPath(out)


def thin_subpath(subpath: SubPath, min_length: float = 1.0) -> SubPath:
    """Return ``subpath`` with segments shorter than ``min_length`` merged.

    Merging moves the start of the next long segment, which can leave a new
    short one behind, so passes repeat until the segment count is stable.
    Sub-paths that are not well formed are returned unchanged.

    A short run directly before ``close`` is kept: the closing chord is at
    most the closing tolerance, so the run never finds a long segment to
    merge into.
    """

    if min_length < 0:
        raise ValueError(f"min_length must be non-negative, got {min_length}")
    if not subpath.is_well_formed:
        logger.debug("Sub-path with %d segment(s) is not well formed; not thinned", len(subpath))
        return subpath

    current = subpath
    while True:
        thinned = _thin_once(current, min_length)
        if len(thinned) >= len(current):
            return thinned
        current = thinned


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "thin_subpath",
]
