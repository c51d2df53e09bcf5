import math

import matplotlib.pyplot as plt

from gpx_cleaner.coordinates import CoordinateSeries
from gpx_cleaner.plotting import draw_track, plot_comparison


def test_plot_comparison_writes_file(tmp_path):
    out = tmp_path / "compare.png"
    plot_comparison(
        CoordinateSeries([1.0, 2.0, 3.0], [4.0, 5.0, 7.0]),
        CoordinateSeries([], []),
        str(out),
    )
    assert out.exists() and out.stat().st_size > 0


def test_draw_track_markers():
    fig, ax = plt.subplots()
    draw_track(ax, CoordinateSeries([0.0, 10.0], [0.0, 20.0]), "t")
    assert len(ax.lines) == 1
    assert len(ax.collections) == 2
    assert ax.get_xlim() == (-2.0, 22.0)
    plt.close(fig)


def test_draw_track_single_point_and_empty():
    fig, (a1, a2) = plt.subplots(1, 2)
    draw_track(a1, CoordinateSeries([1.0], [1.0]), "one")
    assert len(a1.collections) == 1
    draw_track(a2, CoordinateSeries([], []), "none")
    assert a2.texts[0].get_text() == "No track points"
    plt.close(fig)


def test_plot_comparison_with_infinite_coordinates(tmp_path):
    out = tmp_path / "compare.png"
    plot_comparison(
        CoordinateSeries([1.0, math.inf, 2.0], [2.0, 3.0, 4.0]),
        CoordinateSeries([math.inf], [3.0]),
        str(out),
    )
    assert out.stat().st_size > 0


def test_draw_track_skips_infinite_points():
    fig, ax = plt.subplots()
    draw_track(ax, CoordinateSeries([0.0, math.inf, 10.0], [0.0, 5.0, 20.0]), "t")
    assert list(ax.lines[0].get_ydata()) == [0.0, 10.0]
    assert ax.get_xlim() == (-2.0, 22.0)
    plt.close(fig)
