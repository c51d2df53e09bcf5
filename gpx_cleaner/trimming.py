"""Trim leading/trailing points from every track segment."""
from __future__ import annotations

import logging

from .document import TrackDocument, TrackSegment, retain_points
from .numeric import parse_int

logger = logging.getLogger(__name__)


def coerce_count(value) -> int:
    """Turn a user supplied count into a non-negative int (bad input -> 0)."""
    count = parse_int(value)
    if count is None or count < 0:
        return 0
    return count


def kept_slice(length: int, start_count: int, end_count: int) -> slice:
    """Indices of a segment of ``length`` points that survive trimming."""
    if start_count + end_count >= length:
        return slice(0, 0)
    return slice(start_count, length - end_count)


def trim(doc: TrackDocument, start_count=0, end_count=0) -> TrackDocument:
    """Drop ``start_count``/``end_count`` points from each segment of ``doc``.

    Each segment is trimmed on its own. A segment with no more points than
    ``start_count + end_count`` is emptied but kept. Extensions are removed
    from every remaining point. Returns a new document; ``doc`` is unchanged.
    """
    start = coerce_count(start_count)
    end = coerce_count(end_count)

    def select(segment: TrackSegment) -> slice:
        sl = kept_slice(len(segment), start, end)
        logger.debug(
            "Segment of %d points: keeping %d", len(segment), sl.stop - sl.start
        )
        return sl

    trimmed = retain_points(doc, select, strip_extensions=True)
    logger.debug(
        "Trimmed %d/%d points per segment: %d -> %d points",
        start,
        end,
        doc.point_count,
        trimmed.point_count,
    )
    return trimmed


__all__ = ["coerce_count", "kept_slice", "trim"]
