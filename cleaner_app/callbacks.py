"""Callback definitions for the Dash GPX cleaner."""
from __future__ import annotations

import logging

from dash import Input, Output, State, dcc, html, no_update
from dash.exceptions import PreventUpdate

from gpx_cleaner.document import ParseError
from gpx_cleaner.formatting import GPX_MIME_TYPE

from .data_utils import processed_session, session_from_upload
from .figures import make_comparison_figures
from .layout import BLOCK, GRAPHS, HIDDEN, ROW

logger = logging.getLogger("gpx_cleaner.app")


def message(text: str, kind: str = "info") -> html.Div:
    return html.Div(text, className=kind)


def handle_upload(contents, filename):
    """Return the upload outputs.

    ``(store, processed, file_name, file_messages, process_disabled,
    controls_style, download_disabled, results_style, vis_style)``. Any
    earlier processing result is dropped, so the previous file can no
    longer be downloaded.
    """
    if contents is None:
        raise PreventUpdate
    label = f"Selected: {filename}" if filename else ""
    try:
        session = session_from_upload(contents, filename)
    except ParseError as exc:
        logger.warning("Rejected upload %s: %s", filename, exc)
        msgs = [message(f"Error parsing GPX file: {exc}", "error")]
        return None, None, label, msgs, True, HIDDEN, True, HIDDEN, HIDDEN

    msgs = [message(w, "warning") for w in session.warnings]
    msgs.append(message(session.load_message()))
    store = {"contents": contents, "filename": filename}
    return store, None, label, msgs, False, ROW, True, HIDDEN, HIDDEN


def handle_process(n_clicks, stored, start_points, end_points):
    """Return the process outputs.

    ``(processed, messages, summary, results_style, fig_orig, fig_clean,
    vis_style, download_disabled)``. ``processed`` records the upload
    together with the counts actually applied.
    """
    if not n_clicks or not stored:
        raise PreventUpdate
    try:
        session = processed_session(stored, start_points, end_points)
    except ParseError as exc:
        msgs = [message(f"Error processing GPX: {exc}", "error")]
        return None, msgs, "", HIDDEN, no_update, no_update, HIDDEN, True

    processed = dict(
        stored,
        start_points=session.start_points,
        end_points=session.end_points,
    )
    fig_orig, fig_clean = make_comparison_figures(session)
    summary = session.summary().message()
    return processed, [], summary, BLOCK, fig_orig, fig_clean, GRAPHS, False


def handle_download(n_clicks, processed):
    """Return the ``dcc.Download`` payload of the last processed file."""
    if not n_clicks or not processed:
        raise PreventUpdate
    session = processed_session(
        processed, processed["start_points"], processed["end_points"]
    )
    logger.info("Sending %s", session.output_name())
    return dcc.send_string(session.output_text(), session.output_name(), type=GPX_MIME_TYPE)


def register_callbacks(app) -> None:
    """Attach all callbacks to *app*."""

    app.callback(
        Output("gpx-store", "data"),
        Output("processed-store", "data", allow_duplicate=True),
        Output("file-name", "children"),
        Output("file-messages", "children"),
        Output("process-btn", "disabled"),
        Output("controls", "style"),
        Output("download-btn", "disabled", allow_duplicate=True),
        Output("results", "style", allow_duplicate=True),
        Output("visualization", "style", allow_duplicate=True),
        Input("upload", "contents"),
        State("upload", "filename"),
        prevent_initial_call=True,
    )(handle_upload)

    app.callback(
        Output("processed-store", "data"),
        Output("messages", "children"),
        Output("summary", "children"),
        Output("results", "style"),
        Output("original-graph", "figure"),
        Output("cleaned-graph", "figure"),
        Output("visualization", "style"),
        Output("download-btn", "disabled"),
        Input("process-btn", "n_clicks"),
        State("gpx-store", "data"),
        State("start-points", "value"),
        State("end-points", "value"),
        prevent_initial_call=True,
    )(handle_process)

    app.callback(
        Output("download", "data"),
        Input("download-btn", "n_clicks"),
        State("processed-store", "data"),
        prevent_initial_call=True,
    )(handle_download)
