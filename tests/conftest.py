from pathlib import Path
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

sys.path.append(str(Path(__file__).resolve().parents[1]))

GPX_NS = "http://www.topografix.com/GPX/1/1"
TPX_NS = "http://www.garmin.com/xmlschemas/TrackPointExtension/v1"


def _point(lat, lon, ext=True):
    body = f"<ele>{lat}</ele>"
    if ext:
        body += (
            "<extensions><gpxtpx:TrackPointExtension>"
            "<gpxtpx:hr>120</gpxtpx:hr>"
            "</gpxtpx:TrackPointExtension></extensions>"
        )
    return f'<trkpt lat="{lat}" lon="{lon}">{body}</trkpt>'


def build_gpx(*segment_lengths, ext=True):
    """Compact GPX 1.1 text; point ``j`` of segment ``i`` sits at ``(i, j)``."""
    segs = []
    for i, n in enumerate(segment_lengths):
        pts = "".join(_point(f"{i}.{j:04d}", f"{10 + j}", ext) for j in range(n))
        segs.append(f"<trkseg>{pts}</trkseg>")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<gpx xmlns="{GPX_NS}" xmlns:gpxtpx="{TPX_NS}" version="1.1" creator="test">'
        "<metadata><name>Morning Ride</name></metadata>"
        f"<trk><name>Ride</name>{''.join(segs)}</trk>"
        "</gpx>"
    )


@pytest.fixture
def make_gpx():
    return build_gpx


@pytest.fixture
def gpx_file(tmp_path):
    path = tmp_path / "ride.gpx"
    path.write_text(build_gpx(5, 6), encoding="utf-8")
    return path
