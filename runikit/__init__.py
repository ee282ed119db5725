"""Kernel building blocks: intrusive lists, a buddy allocator, error codes, argument splitting and sudoku game logic."""

__version__ = "0.1.0"