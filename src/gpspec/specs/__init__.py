"""Chainable gnuplot option builders."""

from .box import BoxSpecs
from .fill import FillStyle
from .line import LineStyle
from .plot import LabelMode, PlotSpecs
from .point import PointStyle

__all__ = [
    "BoxSpecs",
    "FillStyle",
    "LabelMode",
    "LineStyle",
    "PlotSpecs",
    "PointStyle",
]
