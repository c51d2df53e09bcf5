"""Upload decoding and session helpers for the Dash application."""

from __future__ import annotations

import base64
import binascii

from gpx_cleaner.document import ParseError
from gpx_cleaner.session import CleaningSession, load_session, process_session


def decode_upload(contents: str) -> bytes:
    """Return the raw bytes of a ``dcc.Upload`` data URL."""
    if not contents:
        raise ParseError("No file contents")
    _, _, payload = contents.partition(",")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ParseError(f"Could not decode upload: {exc}") from exc


def session_from_upload(contents: str, filename: str | None) -> CleaningSession:
    """Build a session from an upload. Raises ``ParseError`` on bad input."""
    return load_session(decode_upload(contents), filename or "")


def processed_session(stored: dict, start_points, end_points) -> CleaningSession:
    """Rebuild the stored upload and trim it."""
    session = session_from_upload(stored["contents"], stored.get("filename"))
    return process_session(session, start_points, end_points)
