"""Dash-based interactive GPX cleaner."""
from __future__ import annotations

import argparse
import os

from dash import Dash

from gpx_cleaner.config import Config
from gpx_cleaner.logging_utils import setup_logging
from .layout import build_layout
from .callbacks import register_callbacks


def create_app(cfg: Config) -> Dash:
    """Create Dash application."""
    app = Dash(__name__, title="GPX Cleaner")
    app.layout = build_layout(cfg)
    register_callbacks(app)
    return app


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive GPX cleaner")
    parser.add_argument(
        "-c",
        "--config",
        default="config.yaml",
        help="Path to YAML configuration file",
    )
    args = parser.parse_args()
    cfg = Config(args.config) if os.path.exists(args.config) else Config.from_dict({})
    setup_logging(level=cfg.get("logging", "level", default="INFO"))
    port = cfg.get("webapp", "port", default=3010)
    app = create_app(cfg)
    app.run(debug=False, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
