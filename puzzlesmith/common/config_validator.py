import logging
from abc import ABC, abstractmethod

from puzzlesmith.common.config import Config, SudokuConfig
from puzzlesmith.common.constants import SUPPORTED_SIZES, Difficulty
from puzzlesmith.puzzles import PUZZLE_GENERATORS
from puzzlesmith.puzzles.sudoku.variants import VARIANTS
from puzzlesmith.utils.log import get_logger


class ConfigValidator(ABC):
    """Abstract base class for configuration validators.

    Each validator checks one section of the global configuration and may
    normalize it in place (e.g. lower-casing enum-like strings).
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    @abstractmethod
    def validate(self, config: Config) -> None:
        """Validate and potentially modify the given configuration.

        Args:
            config: The global configuration object to validate and modify.

        Raises:
            ValueError: If the configuration is invalid.
        """


class GlobalConfigValidator(ConfigValidator):
    """Checks that the requested puzzle type has a registered generator."""

    def validate(self, config: Config) -> None:
        if config.puzzle not in PUZZLE_GENERATORS.keys() and "." not in config.puzzle:
            raise ValueError(
                f"Invalid puzzle: {config.puzzle}, available: {PUZZLE_GENERATORS.keys()}"
            )


class LogConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        level = str(config.log.level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {config.log.level}")
        config.log.level = level


class SudokuConfigValidator(ConfigValidator):
    """Validator for the sudoku section.

    Every check here runs before any search starts. Nothing is coerced into
    range: unsupported sizes, unknown difficulties or variants, and counts
    outside the board are rejected.
    """

    def validate(self, config: Config) -> None:
        sudoku = config.sudoku
        self._check_board(sudoku)
        self._check_counts(sudoku)
        self._check_tables(sudoku)

    def _check_board(self, sudoku: SudokuConfig) -> None:
        if isinstance(sudoku.size, bool) or sudoku.size not in SUPPORTED_SIZES:
            raise ValueError(
                f"Invalid sudoku.size: {sudoku.size}, supported sizes: {list(SUPPORTED_SIZES)}"
            )
        try:
            sudoku.difficulty = Difficulty(sudoku.difficulty).value
        except ValueError:
            raise ValueError(
                f"Invalid sudoku.difficulty: {sudoku.difficulty}, "
                f"supported: {[d.value for d in Difficulty]}"
            )
        variant = str(sudoku.variant).lower()
        if variant not in VARIANTS.keys():
            raise ValueError(
                f"Invalid sudoku.variant: {sudoku.variant}, available: {VARIANTS.keys()}"
            )
        sudoku.variant = variant

    def _check_counts(self, sudoku: SudokuConfig) -> None:
        if sudoku.max_attempts <= 0:
            raise ValueError(f"sudoku.max_attempts must be positive, got {sudoku.max_attempts}")
        if sudoku.seed is not None and sudoku.seed < 0:
            raise ValueError(f"sudoku.seed must be non-negative, got {sudoku.seed}")
        if sudoku.given_count is not None:
            cells = sudoku.size * sudoku.size
            if not 0 < sudoku.given_count < cells:
                raise ValueError(
                    f"sudoku.given_count must be in [1, {cells - 1}] "
                    f"for a {sudoku.size}x{sudoku.size} board, got {sudoku.given_count}"
                )

    def _check_tables(self, sudoku: SudokuConfig) -> None:
        if sudoku.given_count is None:
            table = sudoku.removal_table.get(sudoku.size)
            if table is None or sudoku.difficulty not in table:
                raise ValueError(
                    f"sudoku.removal_table has no entry for size {sudoku.size} "
                    f"and difficulty {sudoku.difficulty}"
                )
            target = table[sudoku.difficulty]
            if target <= 0 or target >= sudoku.size * sudoku.size:
                raise ValueError(
                    f"sudoku.removal_table[{sudoku.size}][{sudoku.difficulty}] must be in "
                    f"[1, {sudoku.size * sudoku.size - 1}], got {target}"
                )
        factor = sudoku.time_factors.get(sudoku.difficulty)
        if factor is None or factor <= 0:
            raise ValueError(
                f"sudoku.time_factors must hold a positive factor for {sudoku.difficulty}"
            )


validators = [
    GlobalConfigValidator(),
    LogConfigValidator(),
    SudokuConfigValidator(),
]
