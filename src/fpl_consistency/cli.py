"""Command-line interface for browsing and exporting return-consistency metrics."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Sequence

from fpl_consistency.config import DEFAULT_CONFIG, EXPORT_FILENAME, ViewerConfig, column_label, sort_label
from fpl_consistency.config_loader import ConfigError, ConfigProfile
from fpl_consistency.ingest import DatasetLoadError, load_bundled_records, load_records_from_json
from fpl_consistency.models import resolve_column
from fpl_consistency.pool import PageResult, format_cell, position_display, write_csv
from fpl_consistency.viewer import ViewerController


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse FPL return-consistency metrics")
    parser.add_argument("--data", type=Path, default=None, help="Metrics JSON file (defaults to the bundled dataset)")
    parser.add_argument("--config", type=Path, default=None, help="JSON file with viewer config overrides")
    parser.add_argument("--search", default="", help="Case-insensitive player name search (overrides club/position)")
    parser.add_argument("--club", default=None, help="Club code to filter by (e.g., LIV)")
    parser.add_argument(
        "--position",
        default=None,
        type=str.upper,
        choices=["GKP", "DEF", "MID", "FWD"],
        help="Position code to filter by",
    )
    parser.add_argument("--sort-by", default=None, help="Column to sort by (e.g., consistency_score)")
    parser.add_argument("--sort-order", default=None, choices=["asc", "desc"], help="Sort direction")
    parser.add_argument("--page", type=int, default=1, help="Page number to show (clamped to range)")
    parser.add_argument("--page-size", type=int, default=None, help="Players per page")
    parser.add_argument("--view", default="table", choices=["table", "card"], help="Output layout")
    parser.add_argument(
        "--export",
        type=Path,
        nargs="?",
        const=Path(EXPORT_FILENAME),
        default=None,
        help=f"Write the full filtered view as CSV (default path: {EXPORT_FILENAME})",
    )
    parser.add_argument("--list-clubs", action="store_true", help="List club codes and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable informational logging")
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> ViewerConfig:
    config = DEFAULT_CONFIG
    if args.config:
        config = ConfigProfile.load(args.config).apply(config)
    if args.page_size is not None:
        try:
            config = replace(config, page_size=args.page_size)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
    return config


def _render_table(page: PageResult, headers: List[str], threshold: int) -> List[str]:
    labels = [column_label(header) for header in headers]
    body = [[format_cell(record, header, threshold) for header in headers] for record in page.rows]
    widths = [
        max([len(label)] + [len(row[index]) for row in body])
        for index, label in enumerate(labels)
    ]
    lines = ["  ".join(label.ljust(width) for label, width in zip(labels, widths))]
    lines.append("  ".join("-" * width for width in widths))
    for row in body:
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))
    return lines


def _render_cards(page: PageResult, headers: List[str], threshold: int) -> List[str]:
    lines: List[str] = []
    for record in page.rows:
        lines.append(f"{record.name or '-'} ({record.club or '-'}, {position_display(record.position)})")
        for header in headers:
            if header in {"web_name", "team", "element_type"}:
                continue
            lines.append(f"  {column_label(header)}: {format_cell(record, header, threshold)}")
        lines.append("")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _resolve_config(args)
        records = load_records_from_json(args.data) if args.data else load_bundled_records()
    except (ConfigError, DatasetLoadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    controller = ViewerController(records, config)
    if args.list_clubs:
        for club in controller.clubs:
            print(club)
        return 0

    state = controller.state
    state.search_text = args.search
    state.club = args.club or ""
    state.position = args.position or ""
    if args.sort_by:
        state.sort_by = resolve_column(args.sort_by)
    if args.sort_order:
        state.sort_order = args.sort_order
    state.view_mode = args.view

    page = controller.load_page(args.page)
    if args.search.strip() and (args.club or args.position):
        print("Note: name search ignores --club and --position filters")
    print(f"{page.total_items} players found, sorted by {sort_label(state.sort_by)} ({state.sort_order})")

    if page.rows:
        render = _render_cards if state.view_mode == "card" else _render_table
        for line in render(page, controller.headers, config.min_matches_for_score):
            print(line)
    else:
        print("No players found. Try adjusting your filters or search terms.")
    print(f"Page {page.current_page} of {page.total_pages}")

    if args.export:
        if not write_csv(controller.processed(), args.export):
            print("No data to export")
        else:
            print(f"Exported {page.total_items} players to {args.export}")

    controller.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
