"""Figure creation utilities for the Dash application."""

from __future__ import annotations

import plotly.graph_objects as go

from gpx_cleaner.coordinates import CoordinateSeries, track_bounds

TRACK_COLOR = "#2196f3"
START_COLOR = "#4caf50"
END_COLOR = "#f44336"


def make_track_figure(coords: CoordinateSeries | None, title: str) -> go.Figure:
    """Create a longitude/latitude line plot with start and end markers."""
    fig = go.Figure()
    fig.update_layout(
        title=title,
        showlegend=False,
        margin=dict(l=20, r=20, b=20, t=40),
        plot_bgcolor="white",
    )
    fig.update_xaxes(showticklabels=False, showgrid=False, zeroline=False)
    fig.update_yaxes(showticklabels=False, showgrid=False, zeroline=False)

    if coords is None or len(coords) == 0:
        fig.add_annotation(
            text="No track points",
            x=0.5,
            y=0.5,
            xref="paper",
            yref="paper",
            showarrow=False,
            font=dict(size=16, color="#666"),
        )
        return fig

    finite = coords.finite()
    lats = finite.latitudes
    lons = finite.longitudes
    if len(lats) == 0:
        return fig

    fig.add_trace(
        go.Scatter(
            x=lons,
            y=lats,
            mode="lines",
            line=dict(color=TRACK_COLOR, width=2),
            name="track",
            hovertemplate="Lat %{y:.6f}<br>Lon %{x:.6f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[lons[0]],
            y=[lats[0]],
            mode="markers",
            marker=dict(color=START_COLOR, size=12),
            name="start",
        )
    )
    if len(lats) > 1:
        fig.add_trace(
            go.Scatter(
                x=[lons[-1]],
                y=[lats[-1]],
                mode="markers",
                marker=dict(color=END_COLOR, size=12),
                name="end",
            )
        )

    bounds = track_bounds(finite)
    if bounds.max_lon > bounds.min_lon:
        fig.update_xaxes(range=[bounds.min_lon, bounds.max_lon])
    if bounds.max_lat > bounds.min_lat:
        fig.update_yaxes(range=[bounds.min_lat, bounds.max_lat])
    return fig


def make_comparison_figures(session) -> tuple[go.Figure, go.Figure]:
    """Original and cleaned figures for a processed session."""
    original = session.original_coords
    cleaned = session.cleaned_coords
    fig_orig = make_track_figure(original, f"Original Track ({len(original)} points)")
    fig_clean = make_track_figure(
        cleaned,
        f"Cleaned Track ({0 if cleaned is None else len(cleaned)} points)",
    )
    return fig_orig, fig_clean
