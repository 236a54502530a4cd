# -*- coding: utf-8 -*-
"""Configs for puzzle generation."""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from omegaconf import OmegaConf

from puzzlesmith.common.constants import (
    BOX_SHAPES,
    DEFAULT_REMOVAL_TABLE,
    DEFAULT_TIME_FACTORS,
)
from puzzlesmith.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class StyleConfig:
    """Display settings. Passed through to the puzzle, never read by generation."""

    text_color: str = "#1f2937"
    background_color: str = "#ffffff"
    accent_color: str = "#3b82f6"
    highlight_color: str = "#fef3c7"
    number_color: str = "#111827"
    font_size: str = "medium"  # small, medium, large
    print_layout: str = "compact"  # compact, spacious
    cell_size: str = "medium"  # small, medium, large
    grid_style: str = "classic"  # classic, modern, minimal
    show_guidelines: bool = True
    show_candidates: bool = False
    highlight_regions: bool = False


@dataclass
class SudokuConfig:
    """Configs for a single sudoku generation request."""

    size: int = 9  # 4, 6 or 9
    difficulty: str = "medium"  # easy, medium, hard, expert
    symmetrical: bool = False  # remove cells in point-symmetric pairs
    show_hints: bool = False
    variant: str = "classic"  # any key of `VARIANTS`
    # seed for the random source; None draws fresh entropy
    seed: Optional[int] = None
    # if set, overrides `removal_table` with `size * size - given_count` removals
    given_count: Optional[int] = None
    # attempts to build a complete solution before giving up
    max_attempts: int = 10

    removal_table: Dict[int, Dict[str, int]] = field(
        default_factory=lambda: deepcopy(DEFAULT_REMOVAL_TABLE)
    )
    time_factors: Dict[str, float] = field(
        default_factory=lambda: {k: float(v) for k, v in DEFAULT_TIME_FACTORS.items()}
    )

    category: str = ""
    style: StyleConfig = field(default_factory=StyleConfig)

    @property
    def box_shape(self) -> Tuple[int, int]:
        return BOX_SHAPES[self.size]

    @property
    def target_removed(self) -> int:
        """Number of cells the remover tries to clear."""
        if self.given_count is not None:
            return self.size * self.size - self.given_count
        return self.removal_table[self.size][self.difficulty]

    @property
    def time_factor(self) -> float:
        return self.time_factors[self.difficulty]


@dataclass
class LogConfig:
    """Configs for logger."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR


@dataclass
class Config:
    """Global Configuration"""

    # name of the generator in `PUZZLE_GENERATORS`
    puzzle: str = "sudoku"
    sudoku: SudokuConfig = field(default_factory=SudokuConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def save(self, config_path: str) -> None:
        """Save config to file."""
        with open(config_path, "w", encoding="utf-8") as f:
            OmegaConf.save(self, f)

    def check_and_update(self) -> Config:
        """Validate the config in place and apply its log level.

        Raises:
            ValueError: If any option is invalid.
        """
        from puzzlesmith.common.config_validator import validators
        from puzzlesmith.utils.log import set_log_level

        for validator in validators:
            validator.validate(self)
        set_log_level(self.log.level)
        logger.debug(f"Config checked: {self.flatten()}")
        return self

    def flatten(self) -> Dict[str, Any]:
        """Flatten the config into a dict with dotted keys."""

        def _flatten(obj, parent_key="", sep="."):
            items = {}
            if hasattr(obj, "__dataclass_fields__"):
                obj = vars(obj)
            if isinstance(obj, dict):
                for k, v in obj.items():
                    new_key = f"{parent_key}{sep}{k}" if parent_key else str(k)
                    items.update(_flatten(v, new_key, sep=sep))
            else:
                items[parent_key] = obj
            return items

        return _flatten(self)


def load_config(config_path: str) -> Config:
    """Load the configuration from the given path."""
    schema = OmegaConf.structured(Config)
    yaml_config = OmegaConf.load(config_path)
    try:
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
