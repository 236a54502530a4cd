# -*- coding: utf-8 -*-
"""Sudoku puzzle generation."""
import time
from dataclasses import replace
from typing import Dict, List, Optional

import numpy as np

from puzzlesmith.common.config import Config, SudokuConfig
from puzzlesmith.common.config_validator import SudokuConfigValidator
from puzzlesmith.common.constants import EMPTY, UNIQUENESS_CAP
from puzzlesmith.puzzles.generator import PuzzleGenerator
from puzzlesmith.puzzles.sudoku.analyzer import (
    analyze_complexity,
    cell_candidates,
    generate_hints,
)
from puzzlesmith.puzzles.sudoku.board import Board
from puzzlesmith.puzzles.sudoku.judge import SudokuJudge
from puzzlesmith.puzzles.sudoku.puzzle import SudokuCell, SudokuPuzzle
from puzzlesmith.puzzles.sudoku.solver import Solver
from puzzlesmith.puzzles.sudoku.variants import SudokuVariant, get_variant
from puzzlesmith.utils.log import get_logger

logger = get_logger(__name__)

# permutations drawn per seeded box before the attempt is abandoned
MAX_BOX_DRAWS = 1000


def _seed_independent_boxes(board: Board, rng: np.random.Generator) -> bool:
    """Fill the boxes on the box diagonal with shuffled 1..N.

    Classic boxes on the diagonal share no unit, so the first draw always
    fits. Variant units may cross them; such draws are redrawn.
    """
    values = np.arange(1, board.size + 1)
    for r0, c0 in board.independent_boxes():
        positions = [
            (r0 + i, c0 + j) for i in range(board.box_rows) for j in range(board.box_cols)
        ]
        for _ in range(MAX_BOX_DRAWS):
            perm = [int(v) for v in rng.permutation(values)]
            if all(board.is_valid(r, c, v) for (r, c), v in zip(positions, perm)):
                break
        else:
            return False
        for (r, c), v in zip(positions, perm):
            board.place(r, c, v)
    return True


def generate_solution(
    size: int,
    variant: Optional[SudokuVariant] = None,
    rng: Optional[np.random.Generator] = None,
    max_attempts: int = 10,
) -> Board:
    """
    Generate a complete, valid grid.

    The independent diagonal boxes are seeded at random first, then the
    backtracking solver completes the grid. Variant units can make a seeding
    uncompletable (about two thirds of 6x6 diagonal seedings are). After
    `max_attempts` such seedings the empty board is solved directly and its
    values are relabeled by a random permutation of 1..N.

    Raises:
        RuntimeError: If the rule set admits no complete grid at all.
    """
    rng = rng if rng is not None else np.random.default_rng()
    solver = Solver()
    for attempt in range(1, max_attempts + 1):
        board = Board(size, variant)
        if _seed_independent_boxes(board, rng) and solver.solve(board):
            logger.debug(f"Solution found on attempt {attempt} after {solver.nodes} nodes")
            return board
        logger.debug(f"Seeded boxes admit no solution, attempt {attempt}/{max_attempts}")

    board = Board(size, variant)
    if not solver.solve(board):
        message = f"No complete {size}x{size} grid exists for this variant"
        logger.error(message)
        raise RuntimeError(message)
    logger.debug(f"Falling back to a relabeled solution after {max_attempts} seeded attempts")
    return _relabel(board, rng)


def _relabel(board: Board, rng: np.random.Generator) -> Board:
    """Apply a random value permutation; every unit stays all-distinct."""
    mapping = [0] + [int(v) for v in rng.permutation(np.arange(1, board.size + 1))]
    rows = [[mapping[v] for v in row] for row in board.to_rows()]
    return Board.from_rows(rows, board.variant)


def remove_cells(
    board: Board,
    solution: List[List[int]],
    target_count: int,
    symmetrical: bool,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    Clear cells of `board` while it keeps exactly one solution.

    Positions are visited in a random order. A tentative removal (and, when
    `symmetrical`, the removal of its point mirror) is kept only if the
    solution count stays at one; otherwise the values are restored from
    `solution`. Falling short of `target_count` is not an error.

    Args:
        board (Board): The full grid, cleared in place.
        solution (list[list[int]]): The full grid used for restores.
        target_count (int): Cells to clear.
        symmetrical (bool): Clear cells in point-symmetric pairs.
        rng (np.random.Generator): Random source for the visiting order.

    Returns:
        int: Number of cells actually cleared.
    """
    rng = rng if rng is not None else np.random.default_rng()
    n = board.size
    positions = [(r, c) for r in range(n) for c in range(n)]
    solver = Solver()

    removed = 0
    for index in rng.permutation(len(positions)):
        if removed >= target_count:
            break
        r, c = positions[int(index)]
        if board.get(r, c) == EMPTY:
            continue

        cleared = [(r, c)]
        if symmetrical:
            mirror = (n - 1 - r, n - 1 - c)
            if board.get(*mirror) == EMPTY:
                continue
            if mirror != (r, c):
                cleared.append(mirror)

        for pos in cleared:
            board.clear(*pos)
        if solver.count_solutions(board, UNIQUENESS_CAP) == 1:
            removed += len(cleared)
        else:
            for cr, cc in cleared:
                board.place(cr, cc, solution[cr][cc])

    return removed


class SudokuGenerator(PuzzleGenerator):
    """
    Sudoku puzzle generator.

    Features:
    - 4x4, 6x6 and 9x9 boards, classic and diagonal variants
    - Every emitted puzzle has exactly one solution
    - Optional point-symmetric removal
    - Complexity stats, hints and a solving time estimate
    """

    def __init__(self, config: Config, rng: Optional[np.random.Generator] = None):
        SudokuConfigValidator().validate(config)
        super().__init__(config, rng)

    @property
    def seed(self) -> Optional[int]:
        return self.config.sudoku.seed

    def generate(self) -> SudokuPuzzle:
        """
        Generate a sudoku puzzle and its solution.

        Returns:
            SudokuPuzzle: The puzzle, with `removed` possibly below
                `target_removed` when uniqueness stopped the remover early.

        Raises:
            RuntimeError: If the generated puzzle breaks its guarantees.
        """
        settings = self.config.sudoku
        variant = get_variant(settings.variant)
        start = time.time()

        board = generate_solution(settings.size, variant, self.rng, settings.max_attempts)
        solution = board.to_rows()

        target = settings.target_removed
        removed = remove_cells(board, solution, target, settings.symmetrical, self.rng)
        if removed < target:
            self.logger.info(
                f"Removed {removed} of {target} cells; more removals would break uniqueness"
            )

        candidates = cell_candidates(board)
        stats = analyze_complexity(board, candidates)
        hints = (
            generate_hints(stats, variant, settings.difficulty, settings.size)
            if settings.show_hints
            else None
        )

        puzzle = SudokuPuzzle(
            grid=self._build_grid(board, candidates),
            solution=solution,
            size=settings.size,
            difficulty=settings.difficulty,
            variant=settings.variant,
            symmetrical=settings.symmetrical,
            unique_solution=True,
            removed=removed,
            target_removed=target,
            stats=stats,
            time_estimate=stats.complexity * settings.time_factor,
            hints=hints,
            category=settings.category,
            style=settings.style,
            seed=settings.seed,
        )

        problems = SudokuJudge.check_puzzle(puzzle)
        if problems:
            self.logger.error(f"Generated puzzle is corrupt: {problems}")
            raise RuntimeError(f"Generated puzzle is corrupt: {problems[0]}")

        self.logger.info(
            f"Generated {settings.size}x{settings.size} {settings.variant} "
            f"{settings.difficulty} sudoku with {stats.given_count} givens "
            f"in {time.time() - start:.3f}s"
        )
        return puzzle

    @staticmethod
    def _build_grid(
        board: Board, candidates: Dict[tuple, List[int]]
    ) -> List[List[SudokuCell]]:
        return [
            [
                SudokuCell(
                    value=board.get(r, c),
                    given=board.get(r, c) != EMPTY,
                    row=r,
                    col=c,
                    block=board.box_index(r, c),
                    candidates=candidates.get((r, c), []),
                )
                for c in range(board.size)
            ]
            for r in range(board.size)
        ]


def generate_sudoku(
    settings: Optional[SudokuConfig] = None,
    rng: Optional[np.random.Generator] = None,
    **overrides,
) -> SudokuPuzzle:
    """Generate one puzzle from sudoku settings, with keyword overrides.

    Example:

        .. code-block:: python

            puzzle = generate_sudoku(size=4, difficulty="medium", seed=7)
    """
    try:
        settings = replace(settings if settings is not None else SudokuConfig(), **overrides)
    except TypeError as e:
        raise ValueError(f"Unknown sudoku option: {e}") from e
    return SudokuGenerator(Config(sudoku=settings), rng).generate()
