"""Coordinate series extracted from a track document."""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from .document import TrackDocument


def _frozen(values) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class CoordinateSeries:
    """Flattened latitudes and longitudes of every valid point."""

    latitudes: np.ndarray
    longitudes: np.ndarray

    def __post_init__(self):
        lat = _frozen(self.latitudes)
        lon = _frozen(self.longitudes)
        if lat.shape != lon.shape:
            raise ValueError("latitudes and longitudes must have the same length")
        object.__setattr__(self, "latitudes", lat)
        object.__setattr__(self, "longitudes", lon)

    def __len__(self) -> int:
        return len(self.latitudes)

    def finite(self) -> "CoordinateSeries":
        """Series without points whose latitude or longitude is infinite."""
        mask = np.isfinite(self.latitudes) & np.isfinite(self.longitudes)
        return CoordinateSeries(self.latitudes[mask], self.longitudes[mask])

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoordinateSeries):
            return NotImplemented
        return np.array_equal(self.latitudes, other.latitudes) and np.array_equal(
            self.longitudes, other.longitudes
        )

    __hash__ = None


class Bounds(NamedTuple):
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


def extract(doc: TrackDocument) -> CoordinateSeries:
    """Collect coordinates of all track points in document order.

    Segment boundaries are not kept: segments are concatenated in order.
    Points with a missing or non-numeric ``lat``/``lon`` are skipped.
    """
    lats = []
    lons = []
    for point in doc.points:
        if point.is_valid:
            lats.append(point.latitude)
            lons.append(point.longitude)
    return CoordinateSeries(lats, lons)


def track_bounds(series: CoordinateSeries, padding: float = 0.1) -> Optional[Bounds]:
    """Bounding box of ``series`` grown by ``padding`` of its span per axis.

    Infinite coordinates are left out. Returns ``None`` when no finite
    point remains.
    """
    series = series.finite()
    if len(series) == 0:
        return None
    min_lat = float(np.min(series.latitudes))
    max_lat = float(np.max(series.latitudes))
    min_lon = float(np.min(series.longitudes))
    max_lon = float(np.max(series.longitudes))
    lat_pad = (max_lat - min_lat) * padding
    lon_pad = (max_lon - min_lon) * padding
    return Bounds(
        min_lat - lat_pad,
        max_lat + lat_pad,
        min_lon - lon_pad,
        max_lon + lon_pad,
    )


__all__ = ["Bounds", "CoordinateSeries", "extract", "track_bounds"]
