"""Perimeter of an island on a grid of land and water cells."""

from __future__ import annotations

from typing import Sequence


def island_perimeter(grid: Sequence[Sequence[int]]) -> int:
    """Return the length of the coastline of the land cells in ``grid``.

    Each land cell counts four edges; every edge it shares with the land
    cell above or to its left removes two.
    """
    if not grid or not grid[0]:
        return 0
    perimeter = 0
    previous_row: Sequence[int] = ()
    for row in grid:
        left = 0
        for col, cell in enumerate(row):
            if cell != 0:
                perimeter += 4
                if previous_row and previous_row[col] == 1:
                    perimeter -= 2
                if col > 0 and left == 1:
                    perimeter -= 2
            left = cell
        previous_row = row
    return perimeter