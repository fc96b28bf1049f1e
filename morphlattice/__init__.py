"""Lattices, N-best search, option parsing and output formatting for morphological analysis."""

__version__ = "0.1.0"