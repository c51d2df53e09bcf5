"""Text output for cleaned documents."""
from __future__ import annotations

import os
import re

from .document import TrackDocument, serialize

GPX_MIME_TYPE = "application/gpx+xml"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
PADDING = "  "
NEWLINE = "\r\n"

# Any character except line terminators, like ``.`` in a browser regex.
_CHAR = r"[^\n\r\u2028\u2029]"

_DECLARATION = re.compile(r"\A<\?xml[^>]*\?>\s*")
_TAG_BOUNDARY = re.compile(r"(>)(<)(/*)")
_CLOSED_INLINE = re.compile(_CHAR + r"+</\w[^>]*>\Z", re.ASCII)
_CLOSING = re.compile(r"</\w", re.ASCII)
_OPENING = re.compile(r"<\w[^>]*[^/]>" + _CHAR + r"*\Z", re.ASCII)


def format_xml(xml: str) -> str:
    """Indent ``xml`` line by line at tag boundaries.

    Every ``><`` pair is broken onto a new line, then each line is indented
    from a running depth: an opening tag bumps the depth for the following
    lines, a leading closing tag drops it before its own line, and a line
    that already closes what it opens leaves it alone. Whitespace already in
    the text is kept as is.
    """
    xml = _TAG_BOUNDARY.sub(lambda m: m.group(1) + NEWLINE + m.group(2) + m.group(3), xml)
    pad = 0
    lines = []
    for node in xml.split(NEWLINE):
        indent = 0
        if _CLOSED_INLINE.search(node):
            indent = 0
        elif _CLOSING.match(node) and pad > 0:
            pad -= 1
        elif _OPENING.match(node):
            indent = 1
        pad += indent
        lines.append(PADDING * (pad - indent) + node)
    return NEWLINE.join(lines)


def format_document(doc: TrackDocument) -> str:
    """Serialize ``doc`` for download with a UTF-8 declaration on top."""
    body = _DECLARATION.sub("", serialize(doc), count=1)
    return XML_DECLARATION + "\n" + format_xml(body)


def cleaned_filename(name: str) -> str:
    """``ride.gpx`` -> ``ride_cleaned.gpx``; a missing extension stays missing."""
    base = os.path.basename(name or "") or "track.gpx"
    stem, ext = os.path.splitext(base)
    return f"{stem}_cleaned{ext}"


__all__ = [
    "GPX_MIME_TYPE",
    "XML_DECLARATION",
    "format_xml",
    "format_document",
    "cleaned_filename",
]
