# ==================================================================================================
#                               Plot definitions
# ==================================================================================================
#
# Turns the mappings of a plot-definition file into `PlotSpecs` builders and
# joins rendered builders into a gnuplot `plot` command.
#
# Entry layout (all keys except `what` optional):
#
#     what: "'data.csv'"
#     using: "1:2"
#     with: lines
#     label: "Series A"            # false -> notitle, {column_header: true | <index>}
#     xtics: 1                     # column index or header name
#     ytics: Name
#     line:  {style, type, width, color, dash_type}
#     point: {type, size}
#     fill:  {style, intensity, pattern, transparent, color, border, border_color}
#
# Only structure is checked here. Expression strings are passed through to
# gnuplot unchanged.

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from gpspec.config import ProjectConfig
from gpspec.constants import PLOT_SEPARATOR
from gpspec.errors import EntryFailure, ErrorPolicy, SpecConfigError, run_entry
from gpspec.specs.plot import PlotSpecs

logger = logging.getLogger(__name__)

# ==================================================================================================
#                                   CONSTANTS
# ==================================================================================================

_ENTRY_KEYS = frozenset({"what", "using", "with", "label", "xtics", "ytics", "line", "point", "fill"})
_DEFAULT_KEYS = frozenset({"line_width"})
_FILL_STYLES = ("empty", "solid")

# Section key -> PlotSpecs setter name.
_LINE_SETTERS: Dict[str, str] = {
    "style": "line_style",
    "type": "line_type",
    "width": "line_width",
    "color": "line_color",
    "dash_type": "dash_type",
}
_POINT_SETTERS: Dict[str, str] = {
    "type": "point_type",
    "size": "point_size",
}


# ==================================================================================================
#                                   HELPERS
# ==================================================================================================

def _check_keys(section: str, data: Mapping[str, Any], allowed: Iterable[str]) -> None:
    unknown = sorted(set(map(str, data)) - set(allowed))
    if unknown:
        raise SpecConfigError(f"Unknown key(s) in {section}: {', '.join(unknown)}")


def _section(entry: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    data = entry.get(name)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise SpecConfigError(f"'{name}' must be a mapping, got: {type(data).__name__}")
    return data


def _text(entry: Mapping[str, Any], key: str, default: str = "") -> str:
    value = entry.get(key, default)
    if value is None:
        return default
    if isinstance(value, (Mapping, list, bool)):
        raise SpecConfigError(f"'{key}' must be a scalar expression, got: {type(value).__name__}")
    return str(value)


def _column(key: str, value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise SpecConfigError(f"'{key}' must be a column index or name, got: {value!r}")
    return value


def _apply_setters(spec: PlotSpecs, section: str, data: Mapping[str, Any], setters: Dict[str, str]) -> None:
    _check_keys(section, data, setters)
    for key, setter in setters.items():
        if data.get(key) is not None:
            method: Callable[[Any], PlotSpecs] = getattr(spec, setter)
            method(data[key])


def _apply_label(spec: PlotSpecs, label: Any) -> None:
    if label is None:
        spec.label_default()
    elif label is False:
        spec.label_none()
    elif isinstance(label, str):
        spec.label(label)
    elif isinstance(label, Mapping) and set(label) == {"column_header"}:
        header = label["column_header"]
        if header is True:
            spec.label_from_column_header()
        elif isinstance(header, int) and not isinstance(header, bool):
            spec.label_from_column_header(header)
        else:
            raise SpecConfigError(f"'label.column_header' must be true or a column index, got: {header!r}")
    else:
        raise SpecConfigError(f"Unsupported 'label' value: {label!r}")


def _apply_fill(spec: PlotSpecs, data: Mapping[str, Any]) -> None:
    _check_keys("fill", data, ("style", "intensity", "pattern", "transparent", "color", "border", "border_color"))

    style = data.get("style")
    if style == "empty":
        spec.fill_empty()
    elif style == "solid":
        spec.fill_solid()
    elif style is not None:
        raise SpecConfigError(f"'fill.style' must be one of {_FILL_STYLES}, got: {style!r}")

    if data.get("intensity") is not None:
        spec.fill_intensity(data["intensity"])
    if data.get("pattern") is not None:
        spec.fill_pattern(data["pattern"])
    if data.get("transparent") is not None:
        spec.fill_transparent(bool(data["transparent"]))
    if data.get("color") is not None:
        spec.fill_color(str(data["color"]))

    border = data.get("border")
    if border is True:
        spec.border_show()
    elif border is False:
        spec.border_hide()
    if data.get("border_color") is not None:
        spec.border_line_color(str(data["border_color"]))


# ==================================================================================================
#                                   CORE LOGIC
# ==================================================================================================

def plot_specs_from_mapping(entry: Any, defaults: Optional[Mapping[str, Any]] = None) -> PlotSpecs:
    """
    Build a `PlotSpecs` from one plot-definition entry.

    Parameters
    ----------
    entry
        Mapping read from the `plots:` list.
    defaults
        Optional `defaults:` mapping; values apply before the entry's own.

    Returns
    -------
    PlotSpecs
        Configured builder.

    Raises
    ------
    SpecConfigError
        If the entry is not a mapping, lacks `what`, or has malformed sections.

    Usage example
    -------------
        spec = plot_specs_from_mapping({"what": "sin(x)", "with": "lines", "label": "sine"})
        spec.repr()  # -> "sin(x) title 'sine' with lines lw 2 "
    """
    if not isinstance(entry, Mapping):
        raise SpecConfigError(f"Plot entry must be a mapping, got: {type(entry).__name__}")
    _check_keys("plot entry", entry, _ENTRY_KEYS)

    what = entry.get("what")
    if not isinstance(what, str) or not what:
        raise SpecConfigError("Plot entry requires a non-empty string 'what'")

    spec = PlotSpecs(what, _text(entry, "using"), _text(entry, "with"))

    defaults = defaults or {}
    if not isinstance(defaults, Mapping):
        raise SpecConfigError(f"'defaults' must be a mapping, got: {type(defaults).__name__}")
    _check_keys("defaults", defaults, _DEFAULT_KEYS)
    if defaults.get("line_width") is not None:
        spec.line_width(defaults["line_width"])

    _apply_label(spec, entry.get("label"))
    if entry.get("xtics") is not None:
        spec.xtics(_column("xtics", entry["xtics"]))
    if entry.get("ytics") is not None:
        spec.ytics(_column("ytics", entry["ytics"]))

    _apply_setters(spec, "line", _section(entry, "line"), _LINE_SETTERS)
    _apply_setters(spec, "point", _section(entry, "point"), _POINT_SETTERS)
    _apply_fill(spec, _section(entry, "fill"))
    return spec


def plot_command(specs: Iterable[PlotSpecs]) -> str:
    """
    Join rendered plot elements into one gnuplot `plot` command.

    Usage example
    -------------
        plot_command([PlotSpecs("sin(x)", "", "lines"), PlotSpecs("cos(x)", "", "lines")])
        # -> "plot sin(x) with lines lw 2, cos(x) with lines lw 2"
    """
    return "plot " + PLOT_SEPARATOR.join(spec.repr().strip() for spec in specs)


def render_entry(entry: Any, cfg: ProjectConfig) -> str:
    """
    Build one plot entry and render it as a `plot` element fragment.

    The file's `defaults:` section is read here rather than once per file, so a
    malformed section fails each entry through the same error policy.

    Usage example
    -------------
        render_entry({"what": "sin(x)"}, ProjectConfig(raw={}))  # -> "sin(x) lw 2"
    """
    return plot_specs_from_mapping(entry, cfg.defaults).repr().strip()


def render_config(cfg: ProjectConfig, policy: ErrorPolicy) -> Tuple[str, List[EntryFailure]]:
    """
    Build and render every entry of a plot-definition file into a `plot` command.

    Each entry is built and rendered through `run_entry`, so in run mode any
    entry that fails is logged and skipped while the remaining ones still render.

    Parameters
    ----------
    cfg
        Loaded plot-definition file.
    policy
        Error handling policy.

    Returns
    -------
    tuple of (str, list of EntryFailure)
        The `plot` command (empty string when nothing rendered) and the
        failures recorded for skipped entries.
    """
    fragments: List[str] = []
    failures: List[EntryFailure] = []

    for index, entry in enumerate(cfg.plots):
        result = run_entry(policy, index, entry, render_entry, cfg)
        if result.failure is not None:
            failures.append(result.failure)
            continue
        fragments.append(result.value)

    logger.debug("Rendered %d plot element(s), %d failure(s)", len(fragments), len(failures))
    if not fragments:
        return "", failures
    return "plot " + PLOT_SEPARATOR.join(fragments), failures
