"""Reading GPX files from disk and writing cleaned copies next to them."""
import logging
import os

from gpx_cleaner.session import load_session, process_session

logger = logging.getLogger(__name__)


def read_track_file(in_path):
    """Load a GPX file from disk into a new session."""
    with open(in_path, "rb") as fin:
        data = fin.read()
    return load_session(data, os.path.basename(in_path))


def write_summary(session, summary_path):
    """Write a short text summary of a processed session."""
    summary = session.summary()
    summary_lines = [
        f"Input: {session.file_name}",
        f"Output: {session.output_name()}",
        f"Start points removed per segment: {session.start_points}",
        f"End points removed per segment: {session.end_points}",
        f"Segments: {len(session.cleaned.segments)}",
        f"Original points: {summary.original_points}",
        f"Cleaned points: {summary.cleaned_points}",
        f"Removed points: {summary.removed_points}",
    ] + [f"Warning: {w}" for w in session.warnings]

    with open(summary_path, "w", encoding="utf-8") as fout:
        fout.write("\n".join(summary_lines) + "\n")


def clean_file(in_path, out_path=None, start_points=0, end_points=0, summary_path=None):
    """Trim a GPX file and write the cleaned copy.

    ``out_path`` may be a file or a directory; by default the cleaned copy is
    written as ``<name>_cleaned.gpx`` next to the input.
    Returns the processed session.
    """
    session = process_session(read_track_file(in_path), start_points, end_points)
    if out_path is None:
        out_path = os.path.dirname(in_path) or "."
    if os.path.isdir(out_path):
        out_path = os.path.join(out_path, session.output_name())

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    # newline="" keeps the CRLF line breaks of the formatted text
    with open(out_path, "w", encoding="utf-8", newline="") as fout:
        fout.write(session.output_text())
    logger.info("Wrote %s", out_path)

    if summary_path:
        write_summary(session, summary_path)
    return session
