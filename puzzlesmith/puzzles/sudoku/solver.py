# -*- coding: utf-8 -*-
"""Backtracking sudoku solver and solution counter.

Both searches visit empty cells in row-major order and try values in
ascending order, so their results are deterministic for a given board.
"""
from puzzlesmith.common.constants import UNIQUENESS_CAP
from puzzlesmith.puzzles.sudoku.board import Board
from puzzlesmith.utils.log import get_logger


class Solver:
    """
    Depth-first search over a board, mutating it in place.

    Attributes:
        nodes (int): Placements tried by the last call, for diagnostics.
    """

    def __init__(self):
        self.nodes = 0
        self.logger = get_logger(__name__)

    def solve(self, board: Board) -> bool:
        """
        Fill `board` with the first solution found.

        Args:
            board (Board): Board to complete in place.

        Returns:
            bool: True if a solution exists. On False the board is left as given.
        """
        self.nodes = 0
        solved = self._solve(board)
        self.logger.debug(f"solve: solved={solved}, nodes={self.nodes}")
        return solved

    def _solve(self, board: Board) -> bool:
        empty = board.find_empty()
        if empty is None:
            return True

        r, c = empty
        for value in range(1, board.size + 1):
            if board.is_valid(r, c, value):
                board.place(r, c, value)
                self.nodes += 1
                if self._solve(board):
                    return True
                board.clear(r, c)

        return False

    def count_solutions(self, board: Board, cap: int = UNIQUENESS_CAP) -> int:
        """
        Count the solutions of `board`, stopping once `cap` are found.

        The board is restored to its input state before returning.

        Args:
            board (Board): Puzzle to count.
            cap (int): Upper bound on the returned count.

        Returns:
            int: min(number of solutions, cap).
        """
        if cap <= 0:
            raise ValueError(f"cap must be positive, got {cap}")
        self.nodes = 0
        empties = board.empty_cells()
        count = self._count(board, empties, 0, 0, cap)
        self.logger.debug(f"count_solutions: count={count}, cap={cap}, nodes={self.nodes}")
        return count

    def _count(self, board: Board, empties, index: int, count: int, cap: int) -> int:
        if index == len(empties):
            return count + 1

        r, c = empties[index]
        for value in range(1, board.size + 1):
            if board.is_valid(r, c, value):
                board.place(r, c, value)
                self.nodes += 1
                count = self._count(board, empties, index + 1, count, cap)
                board.clear(r, c)
                if count >= cap:
                    break
        return count


def solve(board: Board) -> bool:
    """Complete `board` in place with its first row-major solution."""
    return Solver().solve(board)


def count_solutions(board: Board, cap: int = UNIQUENESS_CAP) -> int:
    """Number of solutions of `board`, capped at `cap`."""
    return Solver().count_solutions(board, cap)


def has_unique_solution(board: Board) -> bool:
    return count_solutions(board, UNIQUENESS_CAP) == 1
