"""GPX document model backed by an lxml tree.

The rest of the package works with :class:`TrackDocument`,
:class:`TrackSegment` and :class:`TrackPoint` and never touches the markup
directly. Elements are matched by local name so GPX 1.0, GPX 1.1 and
un-namespaced files are all handled.
"""
from __future__ import annotations

import copy
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Tuple, Union

from lxml import etree

from .numeric import parse_float

logger = logging.getLogger(__name__)

SEGMENT_TAG = "{*}trkseg"
POINT_TAG = "{*}trkpt"
EXTENSIONS = "extensions"


class ParseError(ValueError):
    """Raised when input cannot be read as a track document."""


@dataclass(frozen=True)
class TrackPoint:
    """One ``trkpt``; coordinates are ``None`` when missing or non-numeric."""

    latitude: Optional[float]
    longitude: Optional[float]
    lat_text: Optional[str] = None
    lon_text: Optional[str] = None
    has_extensions: bool = False

    @property
    def is_valid(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class TrackSegment:
    """Ordered points of one ``trkseg``."""

    points: Tuple[TrackPoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TrackPoint]:
        return iter(self.points)


@dataclass(frozen=True, eq=False)
class TrackDocument:
    """A parsed recording.

    ``segments`` lists every ``trkseg`` in document order; ``points`` lists
    every ``trkpt`` in the document, including any that sit outside a
    segment. ``tree`` is owned by the document and must not be edited;
    transformations go through :func:`retain_points`, which works on a copy.
    """

    tree: etree._ElementTree = field(repr=False)
    segments: Tuple[TrackSegment, ...] = ()
    points: Tuple[TrackPoint, ...] = ()

    @property
    def point_count(self) -> int:
        """Number of points held by segments."""
        return sum(len(seg) for seg in self.segments)

    def copy(self) -> "TrackDocument":
        return _build(copy.deepcopy(self.tree))


def _children(element, local_name) -> list:
    return [
        child
        for child in element
        if isinstance(child.tag, str) and etree.QName(child).localname == local_name
    ]


def _coordinate(text: Optional[str]) -> Optional[float]:
    value = parse_float(text)
    return None if math.isnan(value) else value


def _read_point(element) -> TrackPoint:
    lat = element.get("lat")
    lon = element.get("lon")
    return TrackPoint(
        latitude=_coordinate(lat),
        longitude=_coordinate(lon),
        lat_text=lat,
        lon_text=lon,
        has_extensions=bool(_children(element, EXTENSIONS)),
    )


def _segment_elements(tree) -> list:
    return list(tree.getroot().iter(SEGMENT_TAG))


def _build(tree) -> TrackDocument:
    segments = tuple(
        TrackSegment(tuple(_read_point(pt) for pt in seg.iter(POINT_TAG)))
        for seg in _segment_elements(tree)
    )
    points = tuple(_read_point(pt) for pt in tree.getroot().iter(POINT_TAG))
    return TrackDocument(tree=tree, segments=segments, points=points)


def _parser(encoding: Optional[str] = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_blank_text=False,
    )


def parse(data: Union[bytes, str], require_points: bool = True) -> TrackDocument:
    """Parse GPX ``data`` into a :class:`TrackDocument`.

    Parameters
    ----------
    data:
        Raw file contents. Bytes are decoded according to the XML
        declaration; text is taken as already decoded.
    require_points:
        Fail when the document contains no ``trkpt`` element at all.

    Raises
    ------
    ParseError
        If ``data`` is not well-formed XML, or holds no track points while
        ``require_points`` is set.
    """
    try:
        if isinstance(data, str):
            root = etree.fromstring(data.encode("utf-8"), parser=_parser("utf-8"))
        else:
            root = etree.fromstring(bytes(data), parser=_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise ParseError(f"Invalid XML format: {exc}") from exc

    doc = _build(root.getroottree())
    if require_points and not doc.points:
        raise ParseError("No track points found")
    logger.debug(
        "Parsed %d segments, %d track points", len(doc.segments), len(doc.points)
    )
    return doc


def serialize(doc: TrackDocument) -> str:
    """Serialize the whole tree without any declaration or reformatting."""
    return etree.tostring(doc.tree, encoding="unicode")


def _detach(node) -> None:
    """Remove ``node`` but leave the text that followed it in place."""
    parent = node.getparent()
    if node.tail:
        prev = node.getprevious()
        if prev is not None:
            prev.tail = (prev.tail or "") + node.tail
        else:
            parent.text = (parent.text or "") + node.tail
    parent.remove(node)


def retain_points(
    doc: TrackDocument,
    select: Callable[[TrackSegment], slice],
    strip_extensions: bool = True,
) -> TrackDocument:
    """Return a copy of ``doc`` keeping only selected points per segment.

    ``select`` receives each segment and returns the slice of point indices
    to keep. Segment elements are always kept, even when emptied. With
    ``strip_extensions`` every kept point loses its ``extensions`` children.
    The input document is left untouched.
    """
    tree = copy.deepcopy(doc.tree)
    for seg_el, segment in zip(_segment_elements(tree), doc.segments):
        point_els = list(seg_el.iter(POINT_TAG))
        keep = set(range(len(point_els))[select(segment)])
        for idx, pt in enumerate(point_els):
            if idx not in keep:
                _detach(pt)
            elif strip_extensions:
                for ext in _children(pt, EXTENSIONS):
                    _detach(ext)
    return _build(tree)


__all__ = [
    "ParseError",
    "TrackPoint",
    "TrackSegment",
    "TrackDocument",
    "parse",
    "serialize",
    "retain_points",
]
