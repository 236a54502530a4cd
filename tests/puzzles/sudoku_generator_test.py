# -*- coding: utf-8 -*-
"""Test cases for sudoku generation."""
import unittest

import numpy as np
import pytest
from parameterized import parameterized

from puzzlesmith.common.config import Config, SudokuConfig
from puzzlesmith.puzzles import PUZZLE_GENERATORS, PuzzleGenerator
from puzzlesmith.puzzles.sudoku import generator as generator_module
from puzzlesmith.puzzles.sudoku.board import Board
from puzzlesmith.puzzles.sudoku.generator import (
    SudokuGenerator,
    generate_solution,
    generate_sudoku,
    remove_cells,
)
from puzzlesmith.puzzles.sudoku.judge import SudokuJudge
from puzzlesmith.puzzles.sudoku.solver import count_solutions, solve
from puzzlesmith.puzzles.sudoku.variants import DiagonalVariant, SudokuVariant, get_variant
from tests.tools import CLASSIC_SOLUTION, assert_complete_grid, get_template_config

# ---------- Solution Tests ----------


@pytest.mark.parametrize("size,box_rows,box_cols", [(4, 2, 2), (6, 2, 3), (9, 3, 3)])
def test_solution_is_complete_and_valid(rng, size, box_rows, box_cols):
    board = generate_solution(size, rng=rng)
    assert board.is_full()
    assert_complete_grid(board.to_rows(), box_rows, box_cols)


@pytest.mark.parametrize("size", [4, 6, 9])
def test_diagonal_solution_has_distinct_diagonal(rng, size):
    board = generate_solution(size, DiagonalVariant(), rng)
    rows = board.to_rows()
    assert SudokuJudge.is_complete(rows, DiagonalVariant())
    assert sorted(rows[i][i] for i in range(size)) == list(range(1, size + 1))


def test_solution_is_reproducible_with_seed():
    first = generate_solution(9, rng=np.random.default_rng(7))
    second = generate_solution(9, rng=np.random.default_rng(7))
    third = generate_solution(9, rng=np.random.default_rng(8))
    assert first == second
    assert first != third


def test_failed_seedings_fall_back_to_relabeled_grid(monkeypatch, rng):
    monkeypatch.setattr(generator_module, "_seed_independent_boxes", lambda board, rng: False)
    board = generate_solution(6, DiagonalVariant(), rng, max_attempts=3)
    rows = board.to_rows()
    assert SudokuJudge.is_complete(rows, DiagonalVariant())

    plain = Board(6, DiagonalVariant())
    assert solve(plain)
    # the fallback grid is the plain solve with its values renamed
    mapping = {}
    for plain_row, row in zip(plain.to_rows(), rows):
        for old, new in zip(plain_row, row):
            assert mapping.setdefault(old, new) == new
    assert sorted(mapping.values()) == list(range(1, 7))


class _OverfullRowVariant(SudokuVariant):
    """Row 0 plus one more cell must be all-distinct: five cells, four values."""

    def extra_units(self, size):
        return [[(0, c) for c in range(size)] + [(1, 0)]]


def test_unsatisfiable_variant_raises(rng):
    with pytest.raises(RuntimeError):
        generate_solution(4, _OverfullRowVariant(), rng, max_attempts=2)


# ---------- Removal Tests ----------


class TestRemoveCells(unittest.TestCase):
    def test_removal_keeps_uniqueness(self):
        rng = np.random.default_rng(3)
        board = Board.from_rows(CLASSIC_SOLUTION)
        removed = remove_cells(board, CLASSIC_SOLUTION, 40, False, rng)
        self.assertEqual(removed, 40)
        self.assertEqual(board.filled_count(), 41)
        self.assertEqual(count_solutions(board), 1)
        for r, c in [(r, c) for r in range(9) for c in range(9)]:
            value = board.get(r, c)
            self.assertIn(value, (0, CLASSIC_SOLUTION[r][c]))

    def test_symmetrical_removal(self):
        rng = np.random.default_rng(5)
        board = Board.from_rows(CLASSIC_SOLUTION)
        removed = remove_cells(board, CLASSIC_SOLUTION, 30, True, rng)
        self.assertGreaterEqual(removed, 30)
        self.assertEqual(81 - board.filled_count(), removed)
        for r in range(9):
            for c in range(9):
                self.assertEqual(board.get(r, c) == 0, board.get(8 - r, 8 - c) == 0)

    def test_under_removal_is_not_an_error(self):
        rng = np.random.default_rng(11)
        solution = generate_solution(4, rng=rng).to_rows()
        board = Board.from_rows(solution)
        # no 4x4 puzzle with a single given has one solution
        removed = remove_cells(board, solution, 15, False, rng)
        self.assertLess(removed, 15)
        self.assertEqual(count_solutions(board), 1)


# ---------- Generator Tests ----------


class TestSudokuGenerator(unittest.TestCase):
    def test_registered(self):
        generator_cls = PUZZLE_GENERATORS.get("sudoku")
        self.assertIs(generator_cls, SudokuGenerator)
        self.assertTrue(issubclass(generator_cls, PuzzleGenerator))

    def test_easy_9x9(self):
        config = get_template_config(size=9, difficulty="easy", symmetrical=False, seed=42)
        puzzle = SudokuGenerator(config).generate()

        self.assertEqual(len(puzzle.grid), 9)
        self.assertTrue(all(len(row) == 9 for row in puzzle.grid))
        self.assertEqual(puzzle.target_removed, 40)
        self.assertEqual(puzzle.removed, 40)
        self.assertEqual(puzzle.stats.given_count, 41)
        self.assertEqual(puzzle.num_givens, 41)
        self.assertTrue(puzzle.unique_solution)
        self.assertIsNone(puzzle.hints)
        assert_complete_grid(puzzle.solution, 3, 3)
        self.assertEqual(count_solutions(Board.from_rows(puzzle.puzzle_rows())), 1)
        self.assertEqual(SudokuJudge.check_puzzle(puzzle), [])

    def test_medium_4x4(self):
        config = get_template_config(size=4, difficulty="medium", seed=3)
        puzzle = SudokuGenerator(config).generate()
        self.assertEqual(len(puzzle.solution), 4)
        assert_complete_grid(puzzle.solution, 2, 2)
        self.assertTrue(all(1 <= v <= 4 for row in puzzle.solution for v in row))
        self.assertEqual(count_solutions(Board.from_rows(puzzle.puzzle_rows())), 1)

    @parameterized.expand([(4,), (6,), (9,)])
    def test_givens_match_solution(self, size):
        config = get_template_config(size=size, difficulty="easy", seed=size)
        puzzle = SudokuGenerator(config).generate()
        for r, row in enumerate(puzzle.grid):
            for c, cell in enumerate(row):
                self.assertEqual((cell.row, cell.col), (r, c))
                if cell.given:
                    self.assertEqual(cell.value, puzzle.solution[r][c])
                    self.assertEqual(cell.candidates, [])
                else:
                    self.assertEqual(cell.value, 0)
                    self.assertIn(puzzle.solution[r][c], cell.candidates)

    @parameterized.expand([(6, "medium"), (9, "easy")])
    def test_symmetry(self, size, difficulty):
        config = get_template_config(size=size, difficulty=difficulty, symmetrical=True, seed=9)
        puzzle = SudokuGenerator(config).generate()
        n = size
        for r in range(n):
            for c in range(n):
                self.assertEqual(puzzle.grid[r][c].given, puzzle.grid[n - 1 - r][n - 1 - c].given)
        self.assertEqual(SudokuJudge.check_puzzle(puzzle), [])

    @parameterized.expand([(4,), (9,)])
    def test_diagonal_variant(self, size):
        config = get_template_config(size=size, difficulty="easy", variant="diagonal", seed=21)
        puzzle = SudokuGenerator(config).generate()
        self.assertEqual(puzzle.variant, "diagonal")
        self.assertTrue(SudokuJudge.is_complete(puzzle.solution, get_variant("diagonal")))
        board = Board.from_rows(puzzle.puzzle_rows(), DiagonalVariant())
        self.assertEqual(count_solutions(board), 1)

    def test_hints_and_time_estimate(self):
        config = get_template_config(size=9, difficulty="easy", show_hints=True, seed=1)
        puzzle = SudokuGenerator(config).generate()
        self.assertEqual(
            puzzle.hints[1],
            f"There are {puzzle.stats.single_candidates} cells with only one possible value",
        )
        self.assertEqual(puzzle.time_estimate, puzzle.stats.complexity * 1.0)

    def test_given_count_override(self):
        config = get_template_config(size=6, difficulty="hard", given_count=20, seed=4)
        puzzle = SudokuGenerator(config).generate()
        self.assertEqual(puzzle.target_removed, 16)
        self.assertEqual(puzzle.num_givens, 36 - puzzle.removed)
        self.assertGreaterEqual(puzzle.num_givens, 20)

    def test_seed_reproduces_puzzle(self):
        first = generate_sudoku(size=6, difficulty="medium", seed=99)
        second = generate_sudoku(size=6, difficulty="medium", seed=99)
        self.assertEqual(first.puzzle_rows(), second.puzzle_rows())
        self.assertEqual(first.solution, second.solution)
        self.assertEqual(first.stats, second.stats)

    def test_injected_rng_wins_over_seed(self):
        settings = SudokuConfig(size=4, difficulty="easy", seed=1)
        first = SudokuGenerator(Config(sudoku=settings), np.random.default_rng(5)).generate()
        second = generate_sudoku(settings, np.random.default_rng(5))
        self.assertEqual(first.solution, second.solution)

    def test_easy_keeps_more_givens_than_hard(self):
        for size in (4, 6):
            easy, hard = [], []
            for seed in range(5):
                easy.append(generate_sudoku(size=size, difficulty="easy", seed=seed).num_givens)
                hard.append(generate_sudoku(size=size, difficulty="hard", seed=seed).num_givens)
            self.assertGreaterEqual(sum(easy) / len(easy), sum(hard) / len(hard))

    def test_diagonal_6x6_never_fails(self):
        for seed in range(200):
            with self.subTest(seed=seed):
                puzzle = generate_sudoku(size=6, difficulty="easy", variant="diagonal", seed=seed)
                self.assertEqual(
                    sorted(puzzle.solution[i][i] for i in range(6)), list(range(1, 7))
                )

    def test_hard_and_expert_9x9_reach_their_targets(self):
        hard, expert = [], []
        for seed in (0, 1):
            for difficulty, givens in (("hard", hard), ("expert", expert)):
                puzzle = generate_sudoku(size=9, difficulty=difficulty, seed=seed)
                self.assertEqual(puzzle.removed, puzzle.target_removed)
                self.assertEqual(count_solutions(Board.from_rows(puzzle.puzzle_rows())), 1)
                givens.append(puzzle.num_givens)
        self.assertEqual(hard, [81 - 54] * 2)
        self.assertEqual(expert, [81 - 56] * 2)
        self.assertGreater(sum(hard) / len(hard), sum(expert) / len(expert))

    def test_style_is_passed_through(self):
        config = get_template_config(size=4, difficulty="easy", seed=2, category="kids")
        config.sudoku.style.accent_color = "#ff0000"
        puzzle = SudokuGenerator(config).generate()
        data = puzzle.to_dict()
        self.assertEqual(data["category"], "kids")
        self.assertEqual(data["accentColor"], "#ff0000")
        self.assertEqual(data["style"]["gridStyle"], "classic")
        self.assertEqual(data["stats"]["givenCount"], puzzle.stats.given_count)
        self.assertEqual(data["numGivens"], puzzle.num_givens)
        self.assertNotIn("hints", data)
        self.assertNotIn("solution", puzzle.to_dict(include_solution=False))

    def test_invalid_config_fails_before_search(self):
        with self.assertRaises(ValueError):
            SudokuGenerator(Config(sudoku=SudokuConfig(size=5)))
        with self.assertRaises(ValueError):
            generate_sudoku(size=9, difficulty="impossible")
        with self.assertRaises(ValueError):
            generate_sudoku(size=9, colour="red")

    def test_corrupt_puzzle_is_detected(self):
        puzzle = generate_sudoku(size=4, difficulty="easy", seed=8)
        cell = next(cell for row in puzzle.grid for cell in row if cell.given)
        cell.value = cell.value % 4 + 1
        self.assertTrue(SudokuJudge.check_puzzle(puzzle))


def test_candidates_are_computed_once(monkeypatch):
    calls = []
    original = generator_module.cell_candidates

    def counting(board):
        calls.append(board.filled_count())
        return original(board)

    monkeypatch.setattr(generator_module, "cell_candidates", counting)
    puzzle = generate_sudoku(size=4, difficulty="easy", seed=6)
    assert calls == [puzzle.num_givens]
    empty_cells = [cell for row in puzzle.grid for cell in row if not cell.given]
    assert all(cell.candidates for cell in empty_cells)
