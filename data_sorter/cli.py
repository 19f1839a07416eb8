# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Text-mode presentation shell around the core. Fetches the
#   dataset (or reads an edited copy from disk), drives AppState,
#   and prints the sorted table, the percentage and the chart.
#
# COMMANDS:
# ---------
# 1. Dump the dataset as editable JSON:
#    data-sorter fetch
#    data-sorter fetch --output users.json
#
# 2. Sort and report:
#    data-sorter sort --key height
#    data-sorter sort --input users.json --output sorted.json --trace
#
# 3. Overweight percentage only:
#    data-sorter stats --input users.json
#
# EXIT CODES:
#   0 success, 1 any DataSorterError (message on stderr)
#
# ==============================================

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from data_sorter import __version__
from data_sorter.analysis.sorter import SortKey
from data_sorter.app_state import (
    AppState,
    initial_state,
    on_key_selected,
    on_load_failed,
    on_load_succeeded,
    on_sort_requested,
    on_text_loaded,
)
from data_sorter.config import AppConfig, get_config
from data_sorter.data_source import UsersApiClient
from data_sorter.errors import DataSorterError, FetchError, ParseError
from data_sorter.report import render_bar_chart, render_report, render_summary
from data_sorter.storage.record_store import RecordStore

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="data-sorter",
        description="Selection-sort a users dataset and report the overweight percentage"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_parser = subparsers.add_parser("fetch", help="Fetch users and print editable JSON")
    fetch_parser.add_argument("--output", "-o", help="Write JSON to this file instead of stdout")

    sort_parser = subparsers.add_parser("sort", help="Sort users and show table, percentage and chart")
    sort_parser.add_argument(
        "--key", "-k",
        choices=[key.value for key in SortKey],
        default=None,
        help="Field to sort by (default from DEFAULT_SORT_KEY)",
    )
    sort_parser.add_argument("--input", "-i", help="Read JSON array from this file instead of fetching")
    sort_parser.add_argument("--output", "-o", help="Write sorted JSON to this file")
    sort_parser.add_argument("--trace", action="store_true", help="Show comparison and swap counts")

    stats_parser = subparsers.add_parser("stats", help="Show the overweight percentage only")
    stats_parser.add_argument("--input", "-i", help="Read JSON array from this file instead of fetching")

    return parser.parse_args(argv)


def load_state(config: AppConfig, input_path: Optional[str], sort_key: Optional[str] = None) -> AppState:
    """Build the initial AppState from a file or from the data source."""
    state = initial_state(
        sort_key=config.analysis.default_sort_key,
        threshold=config.analysis.overweight_threshold,
        precision=config.analysis.percentage_precision
    )
    if sort_key is not None:
        state = on_key_selected(state, sort_key)

    if input_path:
        try:
            text = Path(input_path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"{input_path} is not UTF-8 text: {e.reason}") from e
        return on_text_loaded(state, text)

    try:
        users = UsersApiClient(config).fetch_users()
    except FetchError as e:
        return on_load_failed(state, str(e))
    return on_load_succeeded(state, users)


def _fail(message: str) -> int:
    print(f"✗ {message}", file=sys.stderr)
    return 1


def run_fetch(args: argparse.Namespace, config: AppConfig) -> int:
    try:
        text = UsersApiClient(config).fetch_users_text()
    except FetchError as e:
        return _fail(str(e))

    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        print(f"✓ Wrote users to {args.output}")
    else:
        print(text)
    return 0


def run_sort(args: argparse.Namespace, config: AppConfig) -> int:
    state = load_state(config, args.input, args.key)
    if state.load_error:
        return _fail(state.load_error)
    if state.error:
        return _fail(state.error)

    state = on_sort_requested(state)
    if state.error:
        return _fail(state.error)

    print(render_report(
        state.sorted_records,
        state.metric,
        state.last_sort if args.trace else None
    ))

    if args.output:
        Path(args.output).write_text(RecordStore().serialize(state.sorted_records) + "\n", encoding="utf-8")
        print(f"\n✓ Wrote {len(state.sorted_records)} sorted records to {args.output}")
    return 0


def run_stats(args: argparse.Namespace, config: AppConfig) -> int:
    state = load_state(config, args.input)
    if state.load_error:
        return _fail(state.load_error)

    state = on_sort_requested(state)
    if state.error:
        return _fail(state.error)

    print(render_summary(state.metric))
    print()
    print(render_bar_chart(state.metric))
    return 0


COMMANDS = {
    "fetch": run_fetch,
    "sort": run_sort,
    "stats": run_stats,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = get_config()

    logging.basicConfig(
        level=getattr(logging, args.log_level or config.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return COMMANDS[args.command](args, config)
    except DataSorterError as e:
        return _fail(str(e))
    except OSError as e:
        return _fail(f"Cannot access file: {e}")


if __name__ == "__main__":
    sys.exit(main())
