# ==================================================================================================
#                               gnuplot string helpers
# ==================================================================================================
#
# Small formatting primitives shared by every builder. Builders never talk to
# gnuplot; they only emit script fragments, and these helpers are the single
# place where clause spelling, quoting and whitespace cleanup are decided.

from typing import Any, Optional, Union

Number = Union[int, float]


# ==================================================================================================
#                                   CLAUSES
# ==================================================================================================

def option_value_str(option: str, value: Optional[str]) -> str:
    """
    Format an ``option value`` clause followed by a single space.

    Parameters
    ----------
    option
        gnuplot keyword (e.g. ``"using"``, ``"lw"``).
    value
        Clause value. Empty string or None omits the whole clause.

    Returns
    -------
    str
        ``"<option> <value> "`` or ``""``.

    Usage example
    -------------
        option_value_str("with", "lines")  # -> "with lines "
        option_value_str("using", "")      # -> ""
    """
    if not value:
        return ""
    return f"{option} {value} "


def option_str(option: Optional[str]) -> str:
    """Format a bare keyword followed by a space, or ``""`` when empty."""
    return f"{option} " if option else ""


def quote(text: Any) -> str:
    """
    Return ``text`` as a single-quoted gnuplot string.

    gnuplot has no backslash escapes inside single quotes; an embedded quote
    is written as two consecutive quotes.

    Usage example
    -------------
        quote("Series A")  # -> "'Series A'"
        quote("it's")      # -> "'it''s'"
    """
    return "'" + str(text).replace("'", "''") + "'"


def format_number(value: Any) -> str:
    """
    Render a numeric option value.

    Floats use their shortest ``%g`` form and bools become ``0``/``1``. Anything
    else (ints, strings such as ``"2"`` or gnuplot expressions) is passed
    through with ``str``.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


# ==================================================================================================
#                                   CLEANUP
# ==================================================================================================

def trim_right(text: str, char: str) -> str:
    """Remove every trailing occurrence of ``char`` from ``text``."""
    return text.rstrip(char)


def trim_left(text: str, char: str) -> str:
    """Remove every leading occurrence of ``char`` from ``text``."""
    return text.lstrip(char)


def remove_extra_whitespaces(text: str) -> str:
    """
    Collapse each run of consecutive spaces into a single space.

    Leading and trailing single spaces survive; builders rely on the trailing
    separator when fragments are concatenated.

    Usage example
    -------------
        remove_extra_whitespaces("a   b  ")  # -> "a b "
    """
    out = []
    previous = ""
    for char in text:
        if char == " " and previous == " ":
            continue
        out.append(char)
        previous = char
    return "".join(out)
