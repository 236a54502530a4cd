# -*- coding: utf-8 -*-
"""Sudoku variant rule sets.

A variant adds constraint units on top of the classic rows, columns and
boxes. Each extra unit is a group of cells in which a value may appear at
most once.
"""
from typing import List, Tuple

from puzzlesmith.utils.registry import Registry

Position = Tuple[int, int]

VARIANTS: Registry = Registry("sudoku_variants")


@VARIANTS.register_module("classic")
class SudokuVariant:
    """Classic rules, no extra units."""

    name = "classic"

    def extra_units(self, size: int) -> List[List[Position]]:
        return []

    def hints(self, size: int) -> List[str]:
        return []


@VARIANTS.register_module("diagonal")
class DiagonalVariant(SudokuVariant):
    """The main diagonal must also hold every value once."""

    name = "diagonal"

    def extra_units(self, size: int) -> List[List[Position]]:
        return [[(i, i) for i in range(size)]]

    def hints(self, size: int) -> List[str]:
        return [f"Remember that the main diagonal must also contain numbers 1-{size}"]


def get_variant(name: str) -> SudokuVariant:
    """Instantiate the variant registered as `name`."""
    return VARIANTS.get(name.lower())()
