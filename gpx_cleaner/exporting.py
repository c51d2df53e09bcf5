"""Export utilities for coordinate series."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping

import pandas as pd

from gpx_cleaner.config import Config
from gpx_cleaner.coordinates import CoordinateSeries


def series_frame(coords: CoordinateSeries) -> pd.DataFrame:
    """Tabulate ``coords`` with a running point index."""
    return pd.DataFrame(
        {
            "index": range(len(coords)),
            "latitude": coords.latitudes,
            "longitude": coords.longitudes,
        }
    )


def export_coordinates(
    series: Mapping[str, CoordinateSeries],
    out_dir: str | Path = "results",
    fmt: str = "csv",
) -> Dict[str, str]:
    """Write each coordinate series to its own file.

    Parameters
    ----------
    series:
        Mapping of names (e.g. ``"original"``, ``"cleaned"``) to series as
        returned by :func:`gpx_cleaner.coordinates.extract`.
    out_dir:
        Directory where the exported files will be stored. Created if missing.
    fmt:
        Output format: ``"csv"`` or ``"json"``.

    Returns
    -------
    Dict[str, str]
        Mapping of names to the written file paths.
    """
    fmt = fmt.lower()
    if fmt not in {"csv", "json"}:
        raise ValueError("fmt must be 'csv' or 'json'")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths: Dict[str, str] = {}

    for name, coords in series.items():
        df = series_frame(coords)
        out_path = out_dir / f"{name}_coordinates.{fmt}"
        if fmt == "csv":
            df.to_csv(out_path, index=False, float_format="%.8f")
        else:
            df.to_json(out_path, orient="records", indent=2)
        paths[name] = str(out_path)

    return paths


def export_coordinates_cfg(
    series: Mapping[str, CoordinateSeries], cfg: Config, out_dir: str | Path | None = None
) -> Dict[str, str]:
    """Export coordinates based on configuration options.

    Reads ``output.export_coordinates`` from ``cfg``. The sub-keys are:

    ``enable`` (bool): whether exporting is enabled.
    ``format`` (str): ``"csv"`` or ``"json"``.
    """
    exp_cfg = cfg.get("output", "export_coordinates", default={}) or {}
    if not exp_cfg.get("enable", False):
        return {}

    fmt: str = exp_cfg.get("format", "csv")
    if out_dir is None:
        out_dir = cfg.get("output", "output_dir", default="results")
    return export_coordinates(series, out_dir=out_dir, fmt=fmt)


__all__ = ["series_frame", "export_coordinates", "export_coordinates_cfg"]
