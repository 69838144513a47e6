"""Greedy edit-script computation over an edit graph, with a text visualiser of the search and helpers for inspecting callables."""

__version__ = "0.1.0"
__all__ = ["debug", "diff", "function"]