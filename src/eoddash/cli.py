"""Command-line interface: load a symbol and print its trends report."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from eoddash.config import DashboardConfig, ProviderType
from eoddash.dashboard import Dashboard
from eoddash.errors import DashboardError
from eoddash.report import render_report


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="End-of-day stock trends dashboard")
    parser.add_argument("symbol", nargs="?", help="Ticker symbol (default: EODDASH_SYMBOL or AAPL)")
    parser.add_argument("--limit", type=int, help="Number of most recent daily bars")
    parser.add_argument("--window", type=int, help="Moving average window in days")
    parser.add_argument(
        "--provider",
        choices=[p.value for p in ProviderType],
        help="Price data source",
    )
    parser.add_argument("--csv", type=str, help="Write chart data to this CSV path")
    parser.add_argument("--search", type=str, help="Search the ticker list instead of loading")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level")
    return parser


def apply_cli_overrides(config: DashboardConfig, args: argparse.Namespace) -> DashboardConfig:
    """Apply CLI values onto environment-derived config."""
    if args.limit is not None:
        if args.limit < 1:
            raise ValueError("--limit must be >= 1")
        config.limit = args.limit
    if args.window is not None:
        if args.window < 1:
            raise ValueError("--window must be >= 1")
        config.window_size = args.window
    if args.provider:
        config.provider = ProviderType(args.provider)
    return config


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = apply_cli_overrides(DashboardConfig.from_env(), args)
        dashboard = Dashboard(config)
    except (ValueError, DashboardError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    with dashboard:
        if args.search:
            try:
                matches = dashboard.search(args.search)
            except DashboardError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1
            for listing in matches:
                print(f"{listing.symbol:<8} {listing.name}")
            return 0

        result = dashboard.load(args.symbol)
        print(render_report(result))
        if result.error is not None:
            return 1
        if args.csv:
            result.to_frame().to_csv(args.csv, index=False)
        return 0


if __name__ == "__main__":
    sys.exit(main())
