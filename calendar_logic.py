"""Pure calendar calculations — no state, no I/O."""

from __future__ import annotations

import calendar
import logging
from datetime import date
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


class InvalidMonthError(ValueError):
    """Raised when a month number is outside 1–12."""

    def __init__(self, month: int) -> None:
        super().__init__(f"Month {month!r} is not between 1 and 12.")
        self.month = month


class CellFormat(str, Enum):
    """How a grid cell is rendered."""

    FULL = "full"  # DD-MM-YYYY
    DAY = "day"    # DD


class CalendarPosition(NamedTuple):
    """A (year, month) pair identifying the month a grid shows."""

    year: int
    month: int


class CellDate(NamedTuple):
    """The resolved date behind one grid cell."""

    day: int
    month: int
    year: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def format(self, cell_format: CellFormat = CellFormat.FULL) -> str:
        return format_cell(self, cell_format)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)


# --- month arithmetic --------------------------------------------------------

def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_long_month(month: int) -> bool:
    """Return True for the 31-day months.

    Odd months are long up to July, even months from August on.
    February is not special-cased here.
    """
    if month < 8:
        return month % 2 == 1
    return month % 2 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    _check_month(month)
    base = 28 if month == 2 else 30
    if is_long_month(month) or (month == 2 and is_leap_year(year)):
        base += 1
    return base


def next_month_position(year: int, month: int) -> CalendarPosition:
    """Return the position one month later."""
    _check_month(month)
    if month == 12:
        return CalendarPosition(year + 1, 1)
    return CalendarPosition(year, month + 1)


def prev_month_position(year: int, month: int) -> CalendarPosition:
    """Return the position one month earlier."""
    _check_month(month)
    if month == 1:
        return CalendarPosition(year - 1, 12)
    return CalendarPosition(year, month - 1)


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday .. 6 = Saturday."""
    _check_month(month)
    # calendar.weekday() is Monday-based
    return (calendar.weekday(year, month, 1) + 1) % DAYS_PER_WEEK


# --- formatting -------------------------------------------------------------

def pad2(value: int) -> str:
    """Zero-pad a day or month to two characters."""
    return ("0" + str(value))[-2:]


def format_cell(cell: CellDate, cell_format: CellFormat = CellFormat.FULL) -> str:
    if CellFormat(cell_format) is CellFormat.DAY:
        return pad2(cell.day)
    return f"{pad2(cell.day)}-{pad2(cell.month)}-{cell.year}"


# --- grid generation --------------------------------------------------------

def generate_cells(year: int, month: int) -> list[list[CellDate]]:
    """Return the Sunday-first week rows of resolved dates for a month.

    Cells before the 1st are taken from the end of the previous month and
    cells after the last day from the start of the next month, so every
    row holds exactly 7 consecutive dates.
    """
    start = first_weekday(year, month)
    count = days_in_month(year, month)
    rows = -(-(start + count) // DAYS_PER_WEEK)

    prev = prev_month_position(year, month)
    nxt = next_month_position(year, month)
    leading_start = days_in_month(prev.year, prev.month) - start + 1

    grid: list[list[CellDate]] = []
    row: list[CellDate] = []
    for i in range(rows * DAYS_PER_WEEK):
        if i < start:
            cell = CellDate(leading_start + i, prev.month, prev.year)
        elif i < start + count:
            cell = CellDate(i - start + 1, month, year)
        else:
            cell = CellDate(i - start - count + 1, nxt.month, nxt.year)
        row.append(cell)
        if len(row) == DAYS_PER_WEEK:
            grid.append(row)
            row = []

    logger.debug("Generated %d rows for %04d-%02d (starts on weekday %d)",
                 len(grid), year, month, start)
    return grid


def generate_grid(
    year: int, month: int, cell_format: CellFormat = CellFormat.FULL,
) -> list[list[str]]:
    """Return the formatted week rows for a month."""
    return [
        [format_cell(cell, cell_format) for cell in row]
        for row in generate_cells(year, month)
    ]
