"""Month-view grid that follows a navigable (year, month) position."""

from __future__ import annotations

import logging

from calendar_logic import (
    CalendarPosition,
    CellDate,
    CellFormat,
    days_in_month,
    format_cell,
    generate_cells,
    is_leap_year,
    next_month_position,
    prev_month_position,
)

logger = logging.getLogger(__name__)


class CalendarGrid:
    """A month position plus the week grid derived from it.

    The grid is regenerated whenever the position changes; readers only
    ever see a fully built grid for the current position.
    """

    __slots__ = ("_position", "_cell_format", "_cells", "_grid")

    def __init__(self, year: int, month: int,
                 cell_format: CellFormat | str = CellFormat.FULL) -> None:
        self._cell_format = CellFormat(cell_format)
        self._position: CalendarPosition
        self._cells: list[list[CellDate]]
        self._grid: list[list[str]]
        self._move_to(CalendarPosition(year, month))

    def __repr__(self) -> str:
        return (f"CalendarGrid(year={self.year}, month={self.month}, "
                f"cell_format={self._cell_format.value!r})")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def position(self) -> CalendarPosition:
        return self._position

    @property
    def year(self) -> int:
        return self._position.year

    @property
    def month(self) -> int:
        return self._position.month

    @property
    def cell_format(self) -> CellFormat:
        return self._cell_format

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def get_grid(self) -> list[list[str]]:
        """Return the cached grid of formatted cells."""
        return self._grid

    def get_cells(self) -> list[list[CellDate]]:
        """Return the resolved dates behind the current grid."""
        return self._cells

    def get_next_month(self) -> CalendarPosition:
        return next_month_position(*self._position)

    def get_prev_month(self) -> CalendarPosition:
        return prev_month_position(*self._position)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_month(self) -> None:
        """Advance one month; the year rolls over after December."""
        self._move_to(self.get_next_month())

    def prev_month(self) -> None:
        """Go back one month; the year rolls back before January."""
        self._move_to(self.get_prev_month())

    def set_month(self, year: int, month: int) -> None:
        """Jump to an arbitrary position."""
        self._move_to(CalendarPosition(year, month))

    def _move_to(self, position: CalendarPosition) -> None:
        # Build first so a rejected position leaves the old state intact
        cells = generate_cells(position.year, position.month)
        grid = [[format_cell(c, self._cell_format) for c in row] for row in cells]
        self._position, self._cells, self._grid = position, cells, grid
        logger.debug("Calendar moved to %04d-%02d (%d weeks)",
                     position.year, position.month, len(grid))
