"""Sudoku generation, checking, hints and solving."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

SIZE = 9
CELLS = SIZE * SIZE
MIN_KEEP = 10
MAX_DEPTH = CELLS

Grid = list[list[int]]


def _empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def _randrange(rng: random.Random | None, stop: int) -> int:
    return (rng if rng is not None else random).randrange(stop)


def _in_range(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def row_random(grid: Grid, row: int, rng: random.Random | None = None) -> None:
    """Fill ``grid[row]`` with a random arrangement of the digits 1 to 9."""
    digits = list(range(1, SIZE + 1))
    for i in range(SIZE):
        j = _randrange(rng, SIZE)
        digits[i], digits[j] = digits[j], digits[i]
    grid[row][:] = digits


def find_next_empty(grid: Grid, row: int = 0) -> tuple[int, int] | None:
    """Position of the first empty cell at or after ``row``, in row-major order."""
    for r in range(row, SIZE):
        for c, value in enumerate(grid[r]):
            if value == 0:
                return r, c
    return None


def fits(grid: Grid, x: int, y: int, number: int, check_self: bool = False) -> bool:
    """Whether ``number`` may stand at ``(x, y)`` without breaking the rules.

    The cell itself is ignored, unless ``check_self`` is set, in which case an
    occupied cell never fits.
    """
    if check_self and grid[x][y] != 0:
        return False
    if any(grid[i][y] == number for i in range(SIZE) if i != x):
        return False
    if any(grid[x][j] == number for j in range(SIZE) if j != y):
        return False
    box_x, box_y = x // 3 * 3, y // 3 * 3
    for i in range(box_x, box_x + 3):
        for j in range(box_y, box_y + 3):
            if (i, j) != (x, y) and grid[i][j] == number:
                return False
    return True


def solve(grid: Grid, row: int, col: int, depth: int = 0, is_init: bool = False) -> tuple[bool, bool]:
    """Solve ``grid`` in place by backtracking, starting at ``(row, col)``.

    Returns a pair whose first item tells whether a solution was found; the
    second is False only when the search was abandoned, which aborts every
    enclosing level outside of initial generation.
    """
    if depth > MAX_DEPTH:
        return False, True
    for number in range(1, SIZE + 1):
        if not fits(grid, row, col, number):
            continue
        grid[row][col] = number
        following = find_next_empty(grid, row)
        if following is None:
            return True, True
        solved, completed = solve(grid, following[0], following[1], depth + 1, is_init)
        if not is_init and not completed:
            grid[row][col] = 0
            return False, False
        if solved:
            return True, True
        grid[row][col] = 0
    return False, True


def dig_holes(grid: Grid, keep: int, tag: Grid, rng: random.Random | None = None) -> None:
    """Empty all but a random selection of cells of ``grid``.

    ``keep % 81`` cells are kept, but never fewer than 10; each kept cell is
    marked with 1 in ``tag``.
    """
    count = max(keep % CELLS, MIN_KEEP)
    kept = _empty_grid()
    for _ in range(count):
        index = _randrange(rng, CELLS)
        while True:
            index %= CELLS
            r, c = divmod(index, SIZE)
            if kept[r][c] != 0:
                index += 1
                continue
            kept[r][c] = grid[r][c]
            tag[r][c] = 1
            break
    for r in range(SIZE):
        grid[r][:] = kept[r]


def add_num(grid: Grid, row: int, col: int, num: int, check: bool = True) -> bool:
    """Write ``num`` into an empty cell; False if the cell or number is refused.

    With ``check`` set, a number that breaks the rules is refused as well.
    """
    if not _in_range(row, col):
        return False
    if grid[row][col] != 0:
        return False
    if not 1 <= num <= SIZE:
        return False
    if check and not fits(grid, row, col, num):
        return False
    grid[row][col] = num
    return True


def del_num(grid: Grid, tag: Grid, row: int, col: int) -> bool:
    """Clear a cell; False if it is out of range, empty or one of the givens."""
    if not _in_range(row, col):
        return False
    if grid[row][col] == 0 or tag[row][col] == 1:
        return False
    grid[row][col] = 0
    return True


def hint(grid: Grid, rng: random.Random | None = None) -> tuple[int, int, int] | None:
    """Fill one random empty cell with its value from a solution of ``grid``.

    Returns ``(row, col, value)`` of the filled cell, or None when the grid is
    full or has no solution; the grid is left unchanged then.
    """
    start = find_next_empty(grid, 0)
    if start is None:
        return None
    solution = [list(r) for r in grid]
    if not solve(solution, start[0], start[1], 0, False)[0]:
        return None

    index = _randrange(rng, CELLS)
    for _ in range(CELLS):
        index %= CELLS
        r, c = divmod(index, SIZE)
        if grid[r][c] == 0:
            break
        index += 1
    else:
        return None

    value = solution[r][c]
    if not add_num(grid, r, c, value, False):
        return None
    return r, c, value


@dataclass
class Sudoku:
    """A puzzle: the visible grid and the marks of its given cells."""

    grid: Grid = field(default_factory=_empty_grid)
    tag: Grid = field(default_factory=_empty_grid)

    def generate(self, rng: random.Random | None = None, keep: int = 15) -> None:
        """Create a new puzzle with ``keep`` given cells (see :func:`dig_holes`)."""
        self.grid = _empty_grid()
        self.tag = _empty_grid()
        row_random(self.grid, 0, rng)
        solve(self.grid, 1, 1, 0, True)
        dig_holes(self.grid, keep, self.tag, rng)

    def add(self, row: int, col: int, num: int) -> bool:
        """Enter a number, refusing it if it breaks the rules."""
        return add_num(self.grid, row, col, num, True)

    def delete(self, row: int, col: int) -> bool:
        """Clear an entered number; givens cannot be cleared."""
        return del_num(self.grid, self.tag, row, col)

    def hint(self, rng: random.Random | None = None) -> tuple[int, int, int] | None:
        """Fill one empty cell from a solution; see :func:`hint`."""
        return hint(self.grid, rng)

    def solve(self) -> bool:
        """Solve the puzzle in place; False if it has no solution."""
        return solve(self.grid, 0, 0, 0, False)[0]

    def render(self) -> str:
        """The grid as text, one row per line, with '.' for empty cells."""
        return "\n".join(
            " ".join(str(value) if value else "." for value in row) for row in self.grid
        )