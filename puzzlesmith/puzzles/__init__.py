# -*- coding: utf-8 -*-
"""Puzzle generators."""
from puzzlesmith.puzzles.generator import PuzzleGenerator
from puzzlesmith.utils.registry import Registry

PUZZLE_GENERATORS: Registry = Registry(
    "puzzle_generators",
    default_mapping={
        "sudoku": "puzzlesmith.puzzles.sudoku.generator.SudokuGenerator",
    },
)

__all__ = [
    "PuzzleGenerator",
    "PUZZLE_GENERATORS",
]
