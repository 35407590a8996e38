"""Configuration loading utilities for sigdepth simulations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sigdepth.core.types import SimulationConfig


def load_json_config(path: str | Path) -> dict[str, Any]:
    """Read a JSON config file into a dict; value checks live in ``SimulationConfig``."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    if config_path.suffix.lower() != ".json":
        raise ValueError(
            f"Unsupported config format for '{config_path}'. Use a .json config file."
        )

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ValueError(
            f"Invalid JSON in config '{config_path}' at line {exc.lineno}, "
            f"column {exc.colno}: {exc.msg}"
        ) from exc

    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid config root in '{config_path}': expected JSON object, got {type(data).__name__}."
        )
    return data


def load_simulation_config(
    path: str | Path | None = None, **overrides: Any
) -> SimulationConfig:
    """Build a ``SimulationConfig`` from defaults, an optional JSON file and overrides.

    Overrides whose value is ``None`` are ignored so CLI flags can be passed
    through unconditionally.
    """
    data: dict[str, Any] = load_json_config(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return SimulationConfig.from_dict(data)
