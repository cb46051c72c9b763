"""Laurel CLI entry points.
This module exposes the yearly update and snapshot inspection commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import LaurelConfig, parse_data_year
from core.constants import (
    ADVISORHUB_PUBLICATION,
    BARRONS_PUBLICATION,
    FORBES_PUBLICATION,
    INVESTMENTNEWS_PUBLICATION,
    PUBLICATION_ORDER,
)
from core.errors import LaurelConfigError, LaurelNoDataError
from core.types import RunOptions, RunReport
from store.rankings_sdk import LaurelClient

_PUBLICATION_FLAGS = (
    ("forbes", FORBES_PUBLICATION),
    ("barrons", BARRONS_PUBLICATION),
    ("advisorhub", ADVISORHUB_PUBLICATION),
    ("investmentnews", INVESTMENTNEWS_PUBLICATION),
)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="laurel", description="Advisor ranking data updater")
    parser.add_argument("--output-dir", help="Override LAUREL_OUTPUT_DIR for this command")
    parser.add_argument("--cache-dir", help="Override LAUREL_CACHE_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_update_command(subparsers)
    _add_inspect_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Laurel CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = _build_client(args.output_dir, args.cache_dir)
    if args.command == "update":
        return _run_update_command(client, args)
    if args.command == "inspect":
        return _run_inspect_command(client)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def selected_publications(args: argparse.Namespace) -> frozenset[str]:
    """Return publishers chosen by flags; no flags selects all."""
    chosen = {publication for flag, publication in _PUBLICATION_FLAGS if getattr(args, flag)}
    if not chosen:
        return frozenset(PUBLICATION_ORDER)
    return frozenset(chosen)


def _build_client(output_dir: str | None, cache_dir: str | None) -> LaurelClient:
    """Build SDK client with optional directory overrides."""
    config = LaurelConfig.from_env()
    if output_dir:
        config = replace(config, output_dir=Path(output_dir).expanduser().resolve())
    if cache_dir:
        config = replace(config, cache_dir=Path(cache_dir).expanduser().resolve())
    return LaurelClient(config)


def _run_update_command(client: LaurelClient, args: argparse.Namespace) -> int:
    """Handle update command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        year = parse_data_year(args.year) if args.year else client.config.data_year
    except LaurelConfigError as error:
        print(str(error))
        return 2
    options = RunOptions(
        year=year,
        refetch=selected_publications(args),
        dry_run=args.dry_run,
    )
    try:
        report = client.update(options)
    except LaurelNoDataError as error:
        print(str(error))
        return 1
    _print_report(report)
    return 0


def _run_inspect_command(client: LaurelClient) -> int:
    """Handle inspect command."""
    counts = client.publication_counts()
    if not counts:
        print("No snapshot found.")
        return 1
    for publication, (record_count, new_count) in counts.items():
        print(f"{publication}\t{record_count}\t{new_count}")
    years = client.archived_years()
    print(f"years={','.join(str(year) for year in years) or '-'}")
    return 0


def _print_report(report: RunReport) -> None:
    print(f"year={report.year}")
    print(f"publications={report.publications}")
    print(f"lists={report.lists}")
    print(f"firms={report.firms}")
    print(f"states={report.states}")
    print(f"cities={report.cities}")
    print(f"records={report.record_count}")
    print(f"new_entrants={report.new_entrants}")
    print(f"size_mb={report.payload_bytes / 1024 / 1024:.2f}")
    for summary in report.summaries:
        print(
            f"{summary.publication}\tcurrent={summary.current_count}\t"
            f"previous={summary.previous_count}\tnew={summary.new_count}"
        )
    print(f"output_path={report.output_path or '-'}")


def _add_update_command(subparsers: Any) -> None:
    """Register update subcommand."""
    parser = subparsers.add_parser("update", help="Fetch rankings and rebuild the snapshot")
    for flag, publication in _PUBLICATION_FLAGS:
        parser.add_argument(
            f"--{flag}",
            action="store_true",
            help=f"Fetch {publication} (default: all publications)",
        )
    parser.add_argument("--year", help="Target year, overrides LAUREL_DATA_YEAR")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Fetch and parse but do not write output files",
    )


def _add_inspect_command(subparsers: Any) -> None:
    """Register inspect subcommand."""
    subparsers.add_parser("inspect", help="Show per-publication counts of the current snapshot")
