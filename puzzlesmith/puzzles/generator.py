# -*- coding: utf-8 -*-
"""Base class of puzzle generators."""
from typing import Any, Optional

import numpy as np

from puzzlesmith.common.config import Config
from puzzlesmith.utils.log import get_logger


class PuzzleGenerator:
    """The base puzzle generator.

    A generator turns one validated `Config` into one puzzle object. It owns
    its random source, so two generators never share state and may run in
    parallel.

    Attributes:
        config: The global configuration.
        rng: The random source used for every random draw of this generator.
    """

    def __init__(self, config: Config, rng: Optional[np.random.Generator] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(self.seed)
        self.logger = get_logger(__name__)

    @property
    def seed(self) -> Optional[int]:
        """Seed for the default random source. None draws fresh entropy."""
        return None

    def generate(self) -> Any:
        """Generate one puzzle."""
        raise NotImplementedError
