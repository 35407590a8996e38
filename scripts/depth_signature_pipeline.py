#!/usr/bin/env python3
"""Run the sigdepth depth/normalization simulation."""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from sigdepth.config import load_simulation_config
from sigdepth.pipeline.io import setup_logger
from sigdepth.pipeline.simulation import run_simulation


def main() -> int:
    """Main CLI entry point for the simulation script.

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(description="sigdepth depth/normalization simulation")
    parser.add_argument(
        "--config",
        default="configs/sigdepth_default.json",
        help="Path to simulation config",
    )
    parser.add_argument("--outdir", default="outputs/sigdepth", help="Output directory")
    args = parser.parse_args()

    config = load_simulation_config(args.config)
    outdir = Path(args.outdir)
    logger = setup_logger(outdir / "logs" / "run.log", "sigdepth")
    run_simulation(config, outdir, logger=logger)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
