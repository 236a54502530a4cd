from typing import List, Optional, Sequence

from puzzlesmith.common.constants import BOX_SHAPES, EMPTY
from puzzlesmith.puzzles.sudoku.board import Board
from puzzlesmith.puzzles.sudoku.puzzle import SudokuPuzzle
from puzzlesmith.puzzles.sudoku.solver import count_solutions
from puzzlesmith.puzzles.sudoku.variants import SudokuVariant, get_variant


class SudokuJudge:
    """
    Judge sudoku boards and generated puzzles.

    - Supports 4x4, 6x6 and 9x9 boards and any registered variant
    - Allows incomplete boards (zeros are treated as empty cells)
    - Checks rows, columns, boxes and variant units
    """

    @staticmethod
    def is_valid(rows: Sequence[Sequence[int]], variant: Optional[SudokuVariant] = None) -> bool:
        size = len(rows)
        if size not in BOX_SHAPES or any(len(row) != size for row in rows):
            return False
        try:
            Board.from_rows(rows, variant)
        except ValueError:
            return False
        return True

    @staticmethod
    def is_complete(rows: Sequence[Sequence[int]], variant: Optional[SudokuVariant] = None) -> bool:
        """Valid and without empty cells."""
        return SudokuJudge.is_valid(rows, variant) and all(EMPTY not in row for row in rows)

    @staticmethod
    def is_solved(rows: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> bool:
        return [list(row) for row in rows] == [list(row) for row in solution]

    @staticmethod
    def check_puzzle(puzzle: SudokuPuzzle) -> List[str]:
        """
        Check the guarantees of a generated puzzle.

        Returns:
            list[str]: Problems found; empty if the puzzle is sound.
        """
        problems = []
        n = puzzle.size
        variant = get_variant(puzzle.variant)

        if not SudokuJudge.is_complete(puzzle.solution, variant):
            problems.append("solution is not a complete valid grid")

        for r in range(n):
            for c in range(n):
                cell = puzzle.grid[r][c]
                if cell.given and cell.value != puzzle.solution[r][c]:
                    problems.append(f"given ({r}, {c}) differs from the solution")
                if not cell.given and cell.value != EMPTY:
                    problems.append(f"cleared cell ({r}, {c}) still holds a value")
                if puzzle.symmetrical and not cell.given and puzzle.grid[n - 1 - r][n - 1 - c].given:
                    problems.append(f"cleared cell ({r}, {c}) has a given mirror")

        try:
            board = Board.from_rows(puzzle.puzzle_rows(), variant)
        except ValueError as e:
            problems.append(f"puzzle grid is invalid: {e}")
        else:
            solutions = count_solutions(board)
            if solutions != 1:
                problems.append(f"puzzle has {solutions} solutions (capped), expected exactly 1")
        return problems
