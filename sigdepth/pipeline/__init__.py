"""Simulation pipeline driver and I/O helpers."""

from sigdepth.pipeline.io import setup_logger, write_json, write_table
from sigdepth.pipeline.simulation import (
    run_simulation,
    run_variant,
    simulate_inputs,
    write_outputs,
)

__all__ = [
    "setup_logger",
    "write_json",
    "write_table",
    "run_simulation",
    "run_variant",
    "simulate_inputs",
    "write_outputs",
]
