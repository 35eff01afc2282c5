# ==================================================================================================
#                                   Constants
# ==================================================================================================
#
# Default style values applied by the builders. Keeping them in one place lets
# the YAML loader and the builders agree on what "unset" falls back to.

from typing import Final
# Line width every PlotSpecs starts with; thin enough for dense data files.
DEFAULT_LINEWIDTH: Final[int] = 2
# Separator between the base `using` expression and tic-label columns.
USING_SEPARATOR: Final[str] = ":"
# Separator between plot elements in a single `plot` command.
PLOT_SEPARATOR: Final[str] = ", "
