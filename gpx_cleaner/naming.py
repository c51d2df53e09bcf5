from __future__ import annotations

import os
from datetime import datetime

from gpx_cleaner.config import Config


def slugify(value: str) -> str:
    """Return a filesystem-friendly version of ``value``."""
    return "".join(c if c.isalnum() or c in "-_" else "-" for c in str(value))


def build_info_suffix(cfg: Config) -> str:
    """Compose a short suffix describing the trim settings."""
    parts = []
    input_file = cfg.get("input_file")
    if input_file:
        parts.append(os.path.splitext(os.path.basename(input_file))[0])
    start = cfg.get("trim", "start_points")
    if start not in (None, 0):
        parts.append(f"s{start}")
    end = cfg.get("trim", "end_points")
    if end not in (None, 0):
        parts.append(f"e{end}")
    return "_".join(slugify(p) for p in parts)


def build_run_dir(cfg: Config, base_out: str, prefix: str = "") -> str:
    """Return a run-specific output directory under ``base_out``."""
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    suffix = build_info_suffix(cfg)
    name = "_".join(n for n in [prefix, ts, suffix] if n)
    return os.path.join(base_out, name)
