"""Command-line interface for sigdepth simulations."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

from sigdepth.config import load_simulation_config
from sigdepth.core.types import NORMALIZATION_MODES, SCORING_METHODS


def run_main(argv: Iterable[str] | None = None) -> int:
    """Run the full simulation and write outputs.

    Args:
        argv: Command-line arguments (if None, uses sys.argv).

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(description="sigdepth depth/normalization simulation")
    parser.add_argument("--outdir", required=True, help="Output directory root")
    parser.add_argument("--config", default=None, help="Optional JSON config path")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--n_jobs", type=int, default=None, help="Thread hint for GSVA scoring"
    )
    parser.add_argument(
        "--modes",
        nargs="+",
        choices=list(NORMALIZATION_MODES),
        default=None,
        help="Normalization modes to run",
    )
    parser.add_argument(
        "--methods",
        nargs="+",
        choices=list(SCORING_METHODS),
        default=None,
        help="Signature scoring methods to run",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    import matplotlib

    matplotlib.use("Agg")

    from sigdepth.pipeline.io import setup_logger
    from sigdepth.pipeline.simulation import run_simulation

    config = load_simulation_config(
        args.config,
        seed=args.seed,
        n_jobs=args.n_jobs,
        normalization_modes=args.modes,
        scoring_methods=args.methods,
    )
    outdir = Path(args.outdir)
    logger = setup_logger(outdir / "logs" / "run.log", "sigdepth")
    results = run_simulation(config, outdir, logger=logger)

    for label, result in results.items():
        for row in result.concordance.itertuples(index=False):
            print(
                f"variant={label} pair={row.high_sample}/{row.low_sample} "
                f"pearson_r={row.pearson_r:.4f} rmsd={row.rmsd:.4f}"
            )
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (if None, uses sys.argv).

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(description="sigdepth CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("run", help="Run the depth/normalization simulation")

    # "run" is the only subcommand; argparse rejects anything else.
    _, remainder = parser.parse_known_args(list(argv) if argv is not None else None)
    return run_main(remainder)


if __name__ == "__main__":
    raise SystemExit(main())
