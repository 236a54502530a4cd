# -*- coding: utf-8 -*-
"""Sudoku puzzle data types."""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from puzzlesmith.common.config import StyleConfig


@dataclass
class SudokuCell:
    value: int  # 0 when empty
    given: bool  # printed in the puzzle
    row: int
    col: int
    block: int
    candidates: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "given": self.given,
            "row": self.row,
            "col": self.col,
            "block": self.block,
            "candidates": list(self.candidates),
        }


@dataclass(frozen=True)
class PuzzleStats:
    given_count: int
    single_candidates: int  # empty cells with exactly one legal value
    naked_pairs: int
    hidden_pairs: int
    complexity: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "givenCount": self.given_count,
            "singleCandidates": self.single_candidates,
            "nakedPairs": self.naked_pairs,
            "hiddenPairs": self.hidden_pairs,
            "complexity": self.complexity,
        }


@dataclass
class SudokuPuzzle:
    """One generated puzzle together with its solution and statistics."""

    grid: List[List[SudokuCell]]
    solution: List[List[int]]
    size: int
    difficulty: str
    variant: str
    symmetrical: bool
    unique_solution: bool
    removed: int  # cells actually cleared
    target_removed: int  # cells the remover aimed to clear
    stats: PuzzleStats
    time_estimate: float
    hints: Optional[List[str]] = None
    category: str = ""
    style: StyleConfig = field(default_factory=StyleConfig)
    seed: Optional[int] = None

    @property
    def num_givens(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell.given)

    def puzzle_rows(self) -> List[List[int]]:
        """The puzzle as plain rows, 0 for empty cells."""
        return [[cell.value for cell in row] for row in self.grid]

    def to_dict(self, include_solution: bool = True) -> Dict[str, Any]:
        """Render the puzzle with camelCase keys for JSON transport."""
        style = asdict(self.style)
        result = {
            "grid": [[cell.to_dict() for cell in row] for row in self.grid],
            "size": self.size,
            "difficulty": self.difficulty,
            "variant": self.variant,
            "numGivens": self.num_givens,
            "symmetrical": self.symmetrical,
            "uniqueSolution": self.unique_solution,
            "removed": self.removed,
            "targetRemoved": self.target_removed,
            "stats": self.stats.to_dict(),
            "timeEstimate": self.time_estimate,
            "category": self.category,
            "textColor": style.pop("text_color"),
            "backgroundColor": style.pop("background_color"),
            "accentColor": style.pop("accent_color"),
            "highlightColor": style.pop("highlight_color"),
            "style": {_camel(k): v for k, v in style.items()},
        }
        if include_solution:
            result["solution"] = [row[:] for row in self.solution]
        if self.hints is not None:
            result["hints"] = list(self.hints)
        if self.seed is not None:
            result["seed"] = self.seed
        return result


def _camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)
