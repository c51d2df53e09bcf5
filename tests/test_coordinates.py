import math

import numpy as np
import pytest

from gpx_cleaner.coordinates import CoordinateSeries, extract, track_bounds
from gpx_cleaner.document import parse
from gpx_cleaner.numeric import parse_float, parse_int


def test_extract_flattens_segments_in_order(make_gpx):
    coords = extract(parse(make_gpx(2, 3)))
    assert coords.latitudes.tolist() == pytest.approx([0.0, 0.0001, 1.0, 1.0001, 1.0002])
    assert coords.longitudes.tolist() == [10.0, 11.0, 10.0, 11.0, 12.0]
    assert coords.latitudes.dtype == np.float64


def test_extract_skips_malformed_points():
    doc = parse(
        "<gpx><trk><trkseg>"
        '<trkpt lat="1" lon="2"/><trkpt lat="abc" lon="3"/><trkpt lat="4"/>'
        '<trkpt lat="5.5xyz" lon=" 6"/>'
        "</trkseg></trk></gpx>"
    )
    coords = extract(doc)
    assert len(coords.latitudes) == len(coords.longitudes) == 2
    assert coords.latitudes.tolist() == [1.0, 5.5]
    assert coords.longitudes.tolist() == [2.0, 6.0]


def test_series_is_read_only(make_gpx):
    coords = extract(parse(make_gpx(2)))
    with pytest.raises(ValueError):
        coords.latitudes[0] = 99.0


def test_series_requires_equal_lengths():
    with pytest.raises(ValueError):
        CoordinateSeries([1.0, 2.0], [3.0])


def test_track_bounds_pads_each_axis():
    bounds = track_bounds(CoordinateSeries([0.0, 10.0], [100.0, 120.0]))
    assert bounds.min_lat == pytest.approx(-1.0)
    assert bounds.max_lat == pytest.approx(11.0)
    assert bounds.min_lon == pytest.approx(98.0)
    assert bounds.max_lon == pytest.approx(122.0)


def test_track_bounds_empty():
    assert track_bounds(CoordinateSeries([], [])) is None


def test_track_bounds_ignore_infinite_points():
    bounds = track_bounds(CoordinateSeries([0.0, math.inf, 10.0], [100.0, 0.0, 120.0]))
    assert bounds == pytest.approx((-1.0, 11.0, 98.0, 122.0))
    assert track_bounds(CoordinateSeries([-math.inf], [1.0])) is None


def test_finite_series():
    coords = CoordinateSeries([1.0, math.inf, 3.0], [4.0, 5.0, -math.inf])
    assert coords.finite() == CoordinateSeries([1.0], [4.0])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12.5", 12.5),
        ("12.5abc", 12.5),
        ("  -3", -3.0),
        ("1e3", 1000.0),
        ("1e", 1.0),
        (".5", 0.5),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_float_prefix(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", [None, "", "abc", "-", "."])
def test_parse_float_nan(text):
    assert math.isnan(parse_float(text))


@pytest.mark.parametrize(
    "value, expected",
    [("4", 4), ("3.7", 3), (" 5px", 5), ("-2", -2), (2.9, 2), (7, 7), ("abc", None), (None, None), (True, None),
     ("0x10", 16), ("-0x1A", -26), ("0x", None), ("0xg", None), (1e21, 1), (1.5e21, 1), (5e-7, 5),
     (10**22, 1), (math.inf, None)],
)
def test_parse_int(value, expected):
    assert parse_int(value) == expected
