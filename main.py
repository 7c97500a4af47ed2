"""Entry point — prints the week rows of a month grid."""

from __future__ import annotations

import argparse
import logging
from datetime import date

from calendar_grid import CalendarGrid
from calendar_logic import CellFormat, InvalidMonthError
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calendar-grid",
        description="Print the Sunday-first week grid of a month.",
        usage="%(prog)s [YEAR MONTH] [--next | --prev] [--format {full,day}]",
    )
    parser.add_argument("args", nargs="*", type=int, metavar="N",
                        help="Year and month (default: last shown, else today).")
    step = parser.add_mutually_exclusive_group()
    step.add_argument("--next", action="store_true", help="Show the following month.")
    step.add_argument("--prev", action="store_true", help="Show the preceding month.")
    parser.add_argument("--format", choices=[f.value for f in CellFormat],
                        help="Cell format (default: from settings).")
    parser.add_argument("--settings", metavar="PATH", help="Settings file to use.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def _start_position(args: list[int], settings: dict) -> tuple[int, int]:
    if len(args) == 2:
        return args[0], args[1]
    if settings["last_year"] is not None and settings["last_month"] is not None:
        return settings["last_year"], settings["last_month"]
    today = date.today()
    return today.year, today.month


def main(argv: list[str] | None = None) -> int:
    parser = _create_parser()
    opts = parser.parse_args(argv)
    if len(opts.args) not in (0, 2):
        parser.error("expected both YEAR and MONTH, or neither")

    logging.basicConfig(
        level=logging.DEBUG if opts.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    settings = load_settings(opts.settings)
    cell_format = opts.format or settings["cell_format"]
    year, month = _start_position(opts.args, settings)

    try:
        grid = CalendarGrid(year, month, cell_format)
    except InvalidMonthError as e:
        parser.error(str(e))
    if opts.next:
        grid.next_month()
    elif opts.prev:
        grid.prev_month()

    for row in grid.get_grid():
        print(" ".join(row))

    settings["last_year"], settings["last_month"] = grid.position
    try:
        save_settings(settings, opts.settings)
    except OSError as e:
        logger.warning("Could not save settings: %s", e)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
