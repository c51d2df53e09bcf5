import copy
import os

import yaml

DEFAULTS = {
    "input_file": None,
    "trim": {
        "start_points": 0,
        "end_points": 0,
    },
    "output": {
        "output_dir": "./results",
        "plot": True,
        "full_size_plots": False,
        "export_coordinates": {"enable": False, "format": "csv"},
    },
    "logging": {"level": "INFO"},
    "webapp": {"port": 3010},
}


def _merge(base, override):
    """Recursively overlay ``override`` onto a copy of ``base``."""
    out = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


class Config:
    """Loads and provides access to YAML configuration."""

    def __init__(self, path="config.yaml"):
        if path is None:
            self._cfg = {}
        else:
            with open(path, "r") as f:
                self._cfg = yaml.safe_load(f)
        self._normalize()

    @classmethod
    def from_dict(cls, data):
        cfg = cls(None)
        cfg._cfg = data
        cfg._normalize()
        return cfg

    def _normalize(self):
        """Fill defaults and normalize fields after loading."""
        if self._cfg is None:
            self._cfg = {}
        if not isinstance(self._cfg, dict):
            raise ValueError("configuration must be a mapping")
        self._cfg = _merge(DEFAULTS, self._cfg)

        fmt = self._cfg["output"]["export_coordinates"].get("format", "csv")
        if str(fmt).lower() not in {"csv", "json"}:
            raise ValueError("output.export_coordinates.format must be 'csv' or 'json'")

        # Make output_dir absolute
        out = self._cfg["output"].get("output_dir") or "./results"
        self._cfg["output"]["output_dir"] = os.path.abspath(out)

    def as_yaml(self) -> str:
        """Return the configuration as a YAML string."""
        return yaml.dump(self._cfg, sort_keys=False)

    def update_from_yaml(self, text: str) -> None:
        """Replace current config with the contents of the given YAML string."""
        self._cfg = yaml.safe_load(text) or {}
        self._normalize()

    def get(self, *keys, default=None):
        """Retrieve nested config values: cfg.get('trim','start_points')"""
        node = self._cfg
        for key in keys:
            if isinstance(node, dict) and key in node:
                node = node[key]
            else:
                return default
        return node if node is not None else default
