import pytest

from gpx_cleaner.document import ParseError, parse, serialize


def test_parse_segments_and_points(make_gpx):
    doc = parse(make_gpx(3, 2))
    assert [len(seg) for seg in doc.segments] == [3, 2]
    assert doc.point_count == 5
    first = doc.segments[0].points[0]
    assert first.latitude == pytest.approx(0.0)
    assert first.longitude == pytest.approx(10.0)
    assert first.has_extensions


def test_parse_accepts_bytes_with_declared_encoding():
    text = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        '<gpx><trk><name>Café</name><trkseg><trkpt lat="1" lon="2"/></trkseg></trk></gpx>'
    )
    doc = parse(text.encode("latin-1"))
    assert "Café" in serialize(doc)


def test_parse_text_with_declaration(make_gpx):
    doc = parse(make_gpx(2))
    assert len(doc.points) == 2


@pytest.mark.parametrize("data", [b"", "", "<gpx><trk>", "not xml at all", b"<gpx><trkpt lat='1' lon='2'></gpx>"])
def test_malformed_input_raises(data):
    with pytest.raises(ParseError, match="Invalid XML format"):
        parse(data)


def test_document_without_points_raises():
    with pytest.raises(ParseError, match="No track points found"):
        parse("<gpx><metadata/></gpx>")


def test_document_without_points_allowed_when_not_required():
    doc = parse("<gpx><trk><trkseg/></trk></gpx>", require_points=False)
    assert len(doc.segments) == 1
    assert doc.point_count == 0


def test_non_numeric_coordinates_are_kept_as_points():
    doc = parse('<gpx><trk><trkseg><trkpt lat="abc" lon="2"/><trkpt lon="3"/></trkseg></trk></gpx>')
    points = doc.segments[0].points
    assert len(points) == 2
    assert points[0].latitude is None
    assert points[0].lat_text == "abc"
    assert points[1].latitude is None
    assert not any(p.is_valid for p in points)


def test_points_outside_segments_are_listed():
    doc = parse('<gpx><trk><trkseg><trkpt lat="1" lon="1"/></trkseg></trk><trkpt lat="2" lon="2"/></gpx>')
    assert doc.point_count == 1
    assert len(doc.points) == 2


def test_serialize_keeps_unrelated_structure(make_gpx):
    out = serialize(parse(make_gpx(1)))
    assert not out.startswith("<?xml")
    assert 'xmlns="http://www.topografix.com/GPX/1/1"' in out
    assert "xmlns:gpxtpx=" in out
    assert "<metadata><name>Morning Ride</name></metadata>" in out
    assert "<gpxtpx:hr>120</gpxtpx:hr>" in out


def test_serialize_keeps_whitespace_and_comments():
    text = "<!-- recorded -->\n<gpx>\n  <trk>\n    <trkseg><trkpt lat=\"1\" lon=\"2\"/></trkseg>\n  </trk>\n</gpx>"
    assert serialize(parse(text)) == text


def test_copy_is_independent(make_gpx):
    doc = parse(make_gpx(2))
    clone = doc.copy()
    clone.tree.getroot().clear()
    assert doc.point_count == 2
    assert "<trkpt" in serialize(doc)
