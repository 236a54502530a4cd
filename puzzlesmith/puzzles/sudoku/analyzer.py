# -*- coding: utf-8 -*-
"""Complexity analysis and hints for a sudoku puzzle grid."""
from itertools import combinations
from typing import Dict, List, Optional

from puzzlesmith.common.constants import Difficulty
from puzzlesmith.puzzles.sudoku.board import Board
from puzzlesmith.puzzles.sudoku.puzzle import PuzzleStats
from puzzlesmith.puzzles.sudoku.variants import SudokuVariant

EMPTY_WEIGHT = 10
MISSING_SINGLE_WEIGHT = 20
NAKED_PAIR_WEIGHT = 30
HIDDEN_PAIR_WEIGHT = 40


def cell_candidates(board: Board) -> Dict[tuple, List[int]]:
    """Legal values of every empty cell, keyed by (row, col)."""
    return {(r, c): board.candidates(r, c) for r, c in board.empty_cells()}


def _count_pairs(board: Board, candidates: Dict[tuple, List[int]]):
    naked = 0
    hidden = 0
    for unit in board.units():
        empties = [pos for pos in unit if pos in candidates]

        two_sets = [pos for pos in empties if len(candidates[pos]) == 2]
        naked_sets = set()
        for a, b in combinations(two_sets, 2):
            if candidates[a] == candidates[b]:
                naked += 1
                naked_sets.add(frozenset((a, b)))

        places = {}
        for pos in empties:
            for value in candidates[pos]:
                places.setdefault(value, []).append(pos)
        confined = sorted(v for v, cells in places.items() if len(cells) == 2)
        for v, w in combinations(confined, 2):
            if places[v] == places[w] and frozenset(places[v]) not in naked_sets:
                hidden += 1
    return naked, hidden


def analyze_complexity(
    board: Board, candidates: Optional[Dict[tuple, List[int]]] = None
) -> PuzzleStats:
    """
    Score a puzzle grid.

    Only the puzzle is inspected, never its solution, and the board is not
    modified, so repeated calls return equal stats.

    Args:
        board (Board): The puzzle grid, empty cells as 0.
        candidates (dict): Output of `cell_candidates(board)`, if already known.

    Returns:
        PuzzleStats: Given count, single-candidate cells, naked and hidden
            pairs, and the complexity score. Fewer givens and fewer single
            candidates give a higher score.
    """
    n = board.size
    given_count = board.filled_count()
    if candidates is None:
        candidates = cell_candidates(board)
    single_candidates = sum(1 for values in candidates.values() if len(values) == 1)
    naked_pairs, hidden_pairs = _count_pairs(board, candidates)

    complexity = (
        (n * n - given_count) * EMPTY_WEIGHT
        + max(0, n - single_candidates) * MISSING_SINGLE_WEIGHT
        + naked_pairs * NAKED_PAIR_WEIGHT
        + hidden_pairs * HIDDEN_PAIR_WEIGHT
    )
    return PuzzleStats(
        given_count=given_count,
        single_candidates=single_candidates,
        naked_pairs=naked_pairs,
        hidden_pairs=hidden_pairs,
        complexity=complexity,
    )


def generate_hints(
    stats: PuzzleStats, variant: SudokuVariant, difficulty: str, size: int = 9
) -> List[str]:
    """Canned solving hints. They never reveal a cell value."""
    difficulty = Difficulty(difficulty)
    hints = []

    if difficulty == Difficulty.EASY:
        hints.append("Look for cells with only one possible number")
        hints.append(f"There are {stats.single_candidates} cells with only one possible value")
    elif difficulty == Difficulty.MEDIUM:
        hints.append("Use scanning techniques to find single candidates")
        hints.append("Look for naked pairs in rows and columns")
        if stats.naked_pairs:
            hints.append(f"There are {stats.naked_pairs} naked pairs to start from")
    elif difficulty == Difficulty.HARD:
        hints.append("Consider advanced techniques like hidden pairs")
    else:
        hints.append("Expect to chain several techniques; single candidates are rare")
        hints.append("Consider advanced techniques like hidden pairs")

    hints.extend(variant.hints(size))
    return hints
