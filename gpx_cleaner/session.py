"""State of one cleaning run, passed around as an immutable value."""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .coordinates import CoordinateSeries, extract
from .document import TrackDocument, parse
from .formatting import cleaned_filename, format_document
from .trimming import coerce_count, trim

logger = logging.getLogger(__name__)

EXTENSION_WARNING = "File does not have .gpx extension"


@dataclass(frozen=True)
class ProcessingSummary:
    original_points: int
    cleaned_points: int

    @property
    def removed_points(self) -> int:
        return self.original_points - self.cleaned_points

    def message(self) -> str:
        return (
            f"Processed successfully! Removed {self.removed_points} points. "
            f"{self.cleaned_points} track points remaining."
        )

    def as_dict(self) -> dict:
        return {
            "original_points": self.original_points,
            "cleaned_points": self.cleaned_points,
            "removed_points": self.removed_points,
        }


@dataclass(frozen=True, eq=False)
class CleaningSession:
    """A loaded document and, once processed, its cleaned copy."""

    file_name: str
    original: TrackDocument
    original_coords: CoordinateSeries
    cleaned: Optional[TrackDocument] = None
    cleaned_coords: Optional[CoordinateSeries] = None
    start_points: int = 0
    end_points: int = 0
    warnings: Tuple[str, ...] = ()

    @property
    def processed(self) -> bool:
        return self.cleaned is not None

    def load_message(self) -> str:
        return f"Loaded GPX file with {len(self.original_coords)} track points"

    def summary(self) -> ProcessingSummary:
        if self.cleaned_coords is None:
            raise ValueError("session has not been processed yet")
        return ProcessingSummary(len(self.original_coords), len(self.cleaned_coords))

    def output_text(self) -> str:
        if self.cleaned is None:
            raise ValueError("session has not been processed yet")
        return format_document(self.cleaned)

    def output_name(self) -> str:
        return cleaned_filename(self.file_name)


def load_session(data: Union[bytes, str], file_name: str = "") -> CleaningSession:
    """Parse ``data`` and start a session. Raises ``ParseError`` on bad input."""
    warnings = []
    if not file_name.lower().endswith(".gpx"):
        warnings.append(EXTENSION_WARNING)
        logger.warning("%s: %s", file_name or "<input>", EXTENSION_WARNING)
    doc = parse(data)
    coords = extract(doc)
    logger.info("Loaded %s with %d track points", file_name or "<input>", len(coords))
    return CleaningSession(
        file_name=file_name,
        original=doc,
        original_coords=coords,
        warnings=tuple(warnings),
    )


def process_session(session: CleaningSession, start_points=0, end_points=0) -> CleaningSession:
    """Return ``session`` with a freshly trimmed copy of the original."""
    start = coerce_count(start_points)
    end = coerce_count(end_points)
    cleaned = trim(session.original, start, end)
    result = dataclasses.replace(
        session,
        cleaned=cleaned,
        cleaned_coords=extract(cleaned),
        start_points=start,
        end_points=end,
    )
    logger.info(result.summary().message())
    return result


__all__ = [
    "EXTENSION_WARNING",
    "ProcessingSummary",
    "CleaningSession",
    "load_session",
    "process_session",
]
