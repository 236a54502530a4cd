# -*- coding: utf-8 -*-
"""puzzlesmith: printable puzzle generators."""

__version__ = "0.1.0"
