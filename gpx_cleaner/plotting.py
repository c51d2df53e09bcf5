import matplotlib.pyplot as plt

from gpx_cleaner.coordinates import track_bounds

TRACK_COLOR = "#2196f3"
START_COLOR = "#4caf50"
END_COLOR = "#f44336"
EMPTY_COLOR = "#666"


def draw_track(ax, coords, title):
    """Draw one coordinate series with green start and red end markers."""
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    if len(coords) == 0:
        ax.text(
            0.5,
            0.5,
            "No track points",
            transform=ax.transAxes,
            ha="center",
            va="center",
            color=EMPTY_COLOR,
            fontsize=12,
        )
        return

    # infinite coordinates cannot be placed on the axes
    finite = coords.finite()
    lats = finite.latitudes
    lons = finite.longitudes
    if len(lats) == 0:
        return

    ax.plot(lons, lats, color=TRACK_COLOR, linewidth=2)
    ax.scatter(lons[0], lats[0], s=60, color=START_COLOR, zorder=10)
    if len(lats) > 1:
        ax.scatter(lons[-1], lats[-1], s=60, color=END_COLOR, zorder=10)

    bounds = track_bounds(finite)
    # a single point or a straight line has no extent on one axis
    if bounds.max_lon > bounds.min_lon:
        ax.set_xlim(bounds.min_lon, bounds.max_lon)
    if bounds.max_lat > bounds.min_lat:
        ax.set_ylim(bounds.min_lat, bounds.max_lat)


def plot_comparison(original, cleaned, out_path, full_size=False):
    """Save the original and cleaned tracks side by side."""
    fig, (ax_orig, ax_clean) = plt.subplots(
        1, 2, figsize=(16, 8) if full_size else (10, 5)
    )
    draw_track(ax_orig, original, f"Original Track ({len(original)} points)")
    draw_track(ax_clean, cleaned, f"Cleaned Track ({len(cleaned)} points)")
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)
