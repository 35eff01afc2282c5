"""Chainable builders rendering gnuplot plot-element and style options."""

__version__ = "0.1.0"
