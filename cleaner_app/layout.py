"""Application layout for the Dash GPX cleaner."""
from __future__ import annotations

from dash import dcc, html

from .figures import make_track_figure

HIDDEN = {"display": "none"}
ROW = {
    "display": "flex",
    "gap": "10px",
    "flexWrap": "wrap",
    "alignItems": "center",
    "margin": "10px 0",
}
GRAPHS = {"display": "flex", "gap": "20px", "flexWrap": "wrap"}
BLOCK = {"display": "block", "margin": "10px 0"}


def build_layout(cfg) -> html.Div:
    """Return the full application layout."""
    start_default = cfg.get("trim", "start_points", default=0)
    end_default = cfg.get("trim", "end_points", default=0)

    return html.Div(
        [
            html.H2("GPX Cleaner"),
            dcc.Upload(
                id="upload",
                children=html.Div(["Drag and drop or ", html.A("select a GPX file")]),
                multiple=False,
                style={
                    "borderWidth": "2px",
                    "borderStyle": "dashed",
                    "borderRadius": "8px",
                    "padding": "30px",
                    "textAlign": "center",
                },
            ),
            html.Div(id="file-name", style={"marginTop": "6px"}),
            html.Div(id="file-messages"),
            html.Div(
                [
                    html.Label("Points to remove from start"),
                    dcc.Input(id="start-points", type="number", min=0, step=1, value=start_default),
                    html.Label("Points to remove from end"),
                    dcc.Input(id="end-points", type="number", min=0, step=1, value=end_default),
                    html.Button("Process GPX", id="process-btn", n_clicks=0, disabled=True),
                ],
                id="controls",
                style=HIDDEN,
            ),
            html.Div(id="messages"),
            html.Div(
                [
                    html.Div(id="summary", style={"fontWeight": "bold"}),
                    html.Button("Download cleaned GPX", id="download-btn", n_clicks=0, disabled=True),
                    dcc.Download(id="download"),
                ],
                id="results",
                style=HIDDEN,
            ),
            html.Div(
                [
                    dcc.Graph(
                        id="original-graph",
                        figure=make_track_figure(None, "Original Track"),
                        style={"flex": "1", "height": "400px"},
                    ),
                    dcc.Graph(
                        id="cleaned-graph",
                        figure=make_track_figure(None, "Cleaned Track"),
                        style={"flex": "1", "height": "400px"},
                    ),
                ],
                id="visualization",
                style=HIDDEN,
            ),
            dcc.Store(id="gpx-store"),
            dcc.Store(id="processed-store"),
        ],
        style={"fontFamily": "sans-serif", "maxWidth": "1100px", "margin": "0 auto"},
    )
