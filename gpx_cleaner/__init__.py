"""Trim GPX track segments and strip point extensions."""

from .coordinates import CoordinateSeries, extract, track_bounds
from .document import ParseError, TrackDocument, TrackPoint, TrackSegment, parse, serialize
from .formatting import GPX_MIME_TYPE, cleaned_filename, format_document, format_xml
from .session import CleaningSession, ProcessingSummary, load_session, process_session
from .trimming import coerce_count, trim

__all__ = [
    "CoordinateSeries",
    "extract",
    "track_bounds",
    "ParseError",
    "TrackDocument",
    "TrackPoint",
    "TrackSegment",
    "parse",
    "serialize",
    "GPX_MIME_TYPE",
    "cleaned_filename",
    "format_document",
    "format_xml",
    "CleaningSession",
    "ProcessingSummary",
    "load_session",
    "process_session",
    "coerce_count",
    "trim",
]
