# -*- coding: utf-8 -*-
"""Sudoku generation, solving and analysis."""
