"""Tests for the plot element builder."""

import pytest

from gpspec.column import ColumnIndex
from gpspec.specs.plot import LabelMode, PlotSpecs


def test_end_to_end_clause_order() -> None:
    """what, using, title and with clauses should appear in that order."""
    text = PlotSpecs("'data.csv'", "1:2", "lines").label("A").repr()

    positions = [text.index(part) for part in ("'data.csv'", "using 1:2", "title 'A'", "with lines")]
    assert positions == sorted(positions)
    assert text == "'data.csv' using 1:2 title 'A' with lines lw 2 "


def test_constructor_stores_fields_verbatim() -> None:
    spec = PlotSpecs("sin(x) + ", "($1*2):2", "linespoints")
    assert spec.what == "sin(x) + "
    assert spec.using == "($1*2):2"
    assert spec.with_ == "linespoints"
    assert spec.line.width == 2


@pytest.mark.parametrize(
    ("setter", "mode", "clause"),
    [
        (lambda s: s.label("Series A"), LabelMode.LITERAL, "title 'Series A' "),
        (lambda s: s.label_from_column_header(), LabelMode.COLUMN_HEADER, "title columnheader "),
        (lambda s: s.label_from_column_header(3), LabelMode.INDEXED_COLUMN_HEADER, "title columnheader(3) "),
        (lambda s: s.label_none(), LabelMode.NONE, "notitle "),
        (lambda s: s.label_default(), LabelMode.DEFAULT, ""),
    ],
)
def test_each_label_mode_renders_its_clause(setter, mode: LabelMode, clause: str) -> None:  # noqa: ANN001
    spec = setter(PlotSpecs("'d.dat'", "1:2", "lines"))
    assert spec.label_mode is mode
    assert spec.title_clause() == clause


def test_last_label_call_wins() -> None:
    """Only the most recent label mode reaches the rendered text."""
    spec = PlotSpecs("'d.dat'", "1:2", "lines")
    spec.label("A").label_from_column_header().label_from_column_header(2).label_none()
    text = spec.repr()
    assert "notitle" in text
    assert "title" not in text.replace("notitle", "")

    spec.label_default()
    assert "title" not in spec.repr()

    spec.label_none().label("B")
    assert "title 'B'" in spec.repr()
    assert "notitle" not in spec.repr()


def test_using_expression_without_tics_has_no_trailing_colon() -> None:
    assert PlotSpecs("'d.dat'", "1:2", "lines").using_expression() == "1:2"


def test_using_expression_with_empty_base_drops_leading_separator() -> None:
    spec = PlotSpecs("'d.dat'", "", "lines").xtics(1)
    assert spec.using_expression() == "xtic(stringcolumn(1))"


def test_using_expression_keeps_inner_separators() -> None:
    """An unset xtic between a base and a ytic leaves an empty inner field."""
    spec = PlotSpecs("'d.dat'", "1:2", "lines").ytics("Name")
    assert spec.using_expression() == "1:2::ytic(stringcolumn('Name'))"


def test_tics_accept_column_references_and_overwrite() -> None:
    spec = PlotSpecs("'d.dat'", "0:2", "boxes").xtics(ColumnIndex.of("City")).ytics(4)
    assert spec.using_expression() == "0:2:xtic(stringcolumn('City')):ytic(stringcolumn(4))"

    spec.xtics(1)
    assert spec.using_expression() == "0:2:xtic(stringcolumn(1)):ytic(stringcolumn(4))"


def test_full_repr_with_tics_and_styles() -> None:
    spec = (
        PlotSpecs("'data.csv'", "1:2", "lines")
        .xtics(1)
        .label("Series A")
        .line_color("red")
        .point_type(7)
        .fill_solid()
    )
    assert spec.repr() == (
        "'data.csv' using 1:2:xtic(stringcolumn(1)) title 'Series A' with lines "
        "lw 2 lc rgb 'red' pt 7 fs solid "
    )


def test_repr_is_idempotent_and_collapses_whitespace() -> None:
    spec = PlotSpecs("sin(x)", "", "").label_none()
    first = spec.repr()
    assert first == spec.repr() == str(spec)
    assert "  " not in first
    assert first == "sin(x) notitle lw 2 "


def test_string_line_width_renders_verbatim() -> None:
    """Builders have no error conditions: a string width is passed through."""
    spec = PlotSpecs("sin(x)", "", "lines").line_width("2")
    assert spec.repr() == "sin(x) with lines lw 2 "


def test_label_none_emits_bare_notitle_keyword() -> None:
    """`notitle` is emitted on its own rather than as `title notitle`.

    gnuplot would parse the second form as a title taken from a string
    variable named `notitle`.
    """
    text = PlotSpecs("'d.dat'", "1:2", "lines").label_none().repr()
    assert text == "'d.dat' using 1:2 notitle with lines lw 2 "


def test_indexed_column_header_is_passed_through() -> None:
    assert PlotSpecs("'d.dat'", "1:2", "lines").label_from_column_header(2.5).title_clause() == (
        "title columnheader(2.5) "
    )
