# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

# env var names

LOG_LEVEL_ENV_VAR = "PUZZLESMITH_LOG_LEVEL"  # global log level

# board geometry

SUPPORTED_SIZES = (4, 6, 9)

# (box rows, box cols) per board size; 6x6 has no integer root
BOX_SHAPES = {
    4: (2, 2),
    6: (2, 3),
    9: (3, 3),
}

EMPTY = 0

# counting to two separates "unique" from "not unique"
UNIQUENESS_CAP = 2

# cells to remove, keyed by size then difficulty
DEFAULT_REMOVAL_TABLE = {
    4: {"easy": 6, "medium": 8, "hard": 10, "expert": 11},
    6: {"easy": 14, "medium": 18, "hard": 22, "expert": 24},
    9: {"easy": 40, "medium": 50, "hard": 54, "expert": 56},
}

# time estimate multiplier applied to the complexity score
DEFAULT_TIME_FACTORS = {"easy": 1, "medium": 2, "hard": 3, "expert": 4}


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    def __getitem__(cls, name):
        return super().__getitem__(name.upper())

    def __call__(cls, value, *args, **kwargs):
        if isinstance(value, str):
            value = value.lower()
        return super().__call__(value, *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class Difficulty(CaseInsensitiveEnum):
    """Puzzle difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

