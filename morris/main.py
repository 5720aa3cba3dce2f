"""Application entry point."""

from __future__ import annotations

import argparse

from morris.infra.config import load_default_env_files
from morris.infra.logging import setup_logging
from morris.ui.console import run_console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Nine Men's Morris in the terminal")
    parser.add_argument(
        "--no-legend",
        action="store_true",
        help="Do not print the point number legend at start.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one console game."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    setup_logging()
    engine = run_console(legend=not args.no_legend)
    winner = engine.state.winner
    if winner is not None:
        print(f"Game over! {winner.label} wins!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
