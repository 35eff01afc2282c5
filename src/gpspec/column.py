"""
Column references for data-file based plots.

gnuplot addresses data columns either by 1-based position (``2``) or by the
header name, which must be quoted (``'Price'``). `ColumnIndex` keeps the
already-formatted text so builders can splice it into expressions.
"""

from dataclasses import dataclass
from typing import Union

from gpspec.gnuplot import quote

# ==================================================================================================
#                                   TYPES
# ==================================================================================================

ColumnLike = Union["ColumnIndex", int, str]


@dataclass(frozen=True, slots=True)
class ColumnIndex:
    """
    A data column identified by index or by name.

    Attributes
    ----------
    value : str
        gnuplot text for the column (``"1"`` or ``"'Name'"``).

    Usage example
    -------------
        ColumnIndex.of(3).value        # -> "3"
        ColumnIndex.of("Price").value  # -> "'Price'"
    """

    value: str

    @staticmethod
    def of(column: ColumnLike) -> "ColumnIndex":
        """
        Build a column reference from an index, a name or an existing reference.

        Parameters
        ----------
        column
            1-based column index, column header name, or a `ColumnIndex`.

        Returns
        -------
        ColumnIndex
            Normalized reference.
        """
        if isinstance(column, ColumnIndex):
            return column
        if isinstance(column, str):
            return ColumnIndex(quote(column))
        return ColumnIndex(str(column))

    def __str__(self) -> str:
        return self.value
