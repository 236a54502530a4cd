# -*- coding: utf-8 -*-
"""Sudoku board with constant time validity checks."""
from typing import Iterator, List, Optional, Sequence, Tuple

from puzzlesmith.common.constants import BOX_SHAPES, EMPTY, SUPPORTED_SIZES
from puzzlesmith.puzzles.sudoku.variants import Position, SudokuVariant


class Board:
    """
    An N x N sudoku grid.

    Cells hold 0 for empty or a value in 1..N. Besides the grid the board keeps
    one occupancy bit mask per row, column, box and variant unit, so
    `is_valid` never scans the grid. All writes must go through `place` and
    `clear` to keep the masks in sync.

    Boxes are `box_rows x box_cols`: 2x2 for N=4, 2x3 for N=6, 3x3 for N=9.
    """

    def __init__(self, size: int = 9, variant: Optional[SudokuVariant] = None):
        if size not in BOX_SHAPES:
            raise ValueError(f"Unsupported board size: {size}, supported: {list(SUPPORTED_SIZES)}")
        self.size = size
        self.box_rows, self.box_cols = BOX_SHAPES[size]
        self.variant = variant if variant is not None else SudokuVariant()
        self.cells = [[EMPTY] * size for _ in range(size)]

        self._row_masks = [0] * size
        self._col_masks = [0] * size
        self._box_masks = [0] * size
        self._extra_units = self.variant.extra_units(size)
        self._extra_masks = [0] * len(self._extra_units)
        self._cell_extra = [[[] for _ in range(size)] for _ in range(size)]
        for index, unit in enumerate(self._extra_units):
            for r, c in unit:
                self._cell_extra[r][c].append(index)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], variant: Optional[SudokuVariant] = None
    ) -> "Board":
        """Build a board from a list of rows.

        Raises:
            ValueError: If the shape is not square and supported, a value is out
                of range, or a given breaks a constraint.
        """
        size = len(rows)
        board = cls(size, variant)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {size}")
            for c, value in enumerate(row):
                value = int(value)
                if not 0 <= value <= size:
                    raise ValueError(f"Cell ({r}, {c}) holds {value}, expected 0..{size}")
                if value == EMPTY:
                    continue
                if not board.is_valid(r, c, value):
                    raise ValueError(f"Cell ({r}, {c}) repeats given value {value}")
                board.place(r, c, value)
        return board

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other.size = self.size
        other.box_rows, other.box_cols = self.box_rows, self.box_cols
        other.variant = self.variant
        other.cells = [row[:] for row in self.cells]
        other._row_masks = self._row_masks[:]
        other._col_masks = self._col_masks[:]
        other._box_masks = self._box_masks[:]
        other._extra_units = self._extra_units
        other._extra_masks = self._extra_masks[:]
        other._cell_extra = self._cell_extra
        return other

    def to_rows(self) -> List[List[int]]:
        return [row[:] for row in self.cells]

    def box_index(self, row: int, col: int) -> int:
        return (row // self.box_rows) * (self.size // self.box_cols) + col // self.box_cols

    def box_origin(self, row: int, col: int) -> Position:
        return (row // self.box_rows) * self.box_rows, (col // self.box_cols) * self.box_cols

    def get(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def is_valid(self, row: int, col: int, value: int) -> bool:
        """
        Check whether `value` may go at (row, col).

        Returns False if the value already occurs in the row, the column, the
        box of the cell, or any variant unit containing the cell.

        Args:
            row (int): Row index.
            col (int): Column index.
            value (int): Candidate value in 1..N.

        Returns:
            bool: True if the placement is legal.
        """
        bit = 1 << value
        if self._row_masks[row] & bit or self._col_masks[col] & bit:
            return False
        if self._box_masks[self.box_index(row, col)] & bit:
            return False
        for index in self._cell_extra[row][col]:
            if self._extra_masks[index] & bit:
                return False
        return True

    def place(self, row: int, col: int, value: int) -> None:
        """Write `value` into (row, col), replacing any previous value."""
        if self.cells[row][col] != EMPTY:
            self.clear(row, col)
        bit = 1 << value
        self.cells[row][col] = value
        self._row_masks[row] |= bit
        self._col_masks[col] |= bit
        self._box_masks[self.box_index(row, col)] |= bit
        for index in self._cell_extra[row][col]:
            self._extra_masks[index] |= bit

    def clear(self, row: int, col: int) -> None:
        value = self.cells[row][col]
        if value == EMPTY:
            return
        bit = ~(1 << value)
        self.cells[row][col] = EMPTY
        self._row_masks[row] &= bit
        self._col_masks[col] &= bit
        self._box_masks[self.box_index(row, col)] &= bit
        for index in self._cell_extra[row][col]:
            self._extra_masks[index] &= bit

    def candidates(self, row: int, col: int) -> List[int]:
        """Legal values for an empty cell in ascending order, [] for a filled one."""
        if self.cells[row][col] != EMPTY:
            return []
        return [v for v in range(1, self.size + 1) if self.is_valid(row, col, v)]

    def find_empty(self) -> Optional[Position]:
        """First empty cell in row-major order."""
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] == EMPTY:
                    return r, c
        return None

    def empty_cells(self) -> List[Position]:
        return [
            (r, c) for r in range(self.size) for c in range(self.size) if self.cells[r][c] == EMPTY
        ]

    def filled_count(self) -> int:
        return sum(1 for row in self.cells for v in row if v != EMPTY)

    def is_full(self) -> bool:
        return self.find_empty() is None

    def units(self) -> Iterator[List[Position]]:
        """Every constraint unit: rows, columns, boxes, then variant units."""
        n = self.size
        for r in range(n):
            yield [(r, c) for c in range(n)]
        for c in range(n):
            yield [(r, c) for r in range(n)]
        for br in range(0, n, self.box_rows):
            for bc in range(0, n, self.box_cols):
                yield [
                    (r, c)
                    for r in range(br, br + self.box_rows)
                    for c in range(bc, bc + self.box_cols)
                ]
        yield from self._extra_units

    def independent_boxes(self) -> List[Tuple[int, int]]:
        """Origins of the boxes on the box diagonal; no two share a row or column."""
        count = min(self.size // self.box_rows, self.size // self.box_cols)
        return [(k * self.box_rows, k * self.box_cols) for k in range(count)]

    def __eq__(self, other) -> bool:
        if isinstance(other, Board):
            return self.cells == other.cells
        return self.cells == other

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) if v else "." for v in row) for row in self.cells)
