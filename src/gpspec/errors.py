"""
Error types and policy-driven error handling for batch rendering.

Builders accept any input and never raise; malformed gnuplot syntax is only
caught by gnuplot itself. Errors here come from the plot-definition layer
(a YAML entry that cannot be turned into a rendered element) and are handled
in one of two modes:
1) Debug mode: fail fast and re-raise exceptions immediately.
2) Run mode: record which entry failed and return that record to the caller,
   so one bad entry does not prevent the others from rendering.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

# ==================================================================================================
#                                   TYPES
# ==================================================================================================

T = TypeVar("T")


class SpecConfigError(ValueError):
    """A plot definition is structurally malformed and cannot build a spec."""


@dataclass(frozen=True)
class ErrorPolicy:
    """
    Error handling policy.

    Attributes
    ----------
    debug : bool
        If True, the first failing entry re-raises (fail-fast).
        If False, failing entries are logged and skipped.
    log_path : Path
        Where to write failure logs (file logger).
    """

    debug: bool
    log_path: Path


@dataclass(frozen=True)
class EntryFailure:
    """
    Record of a plot entry that was skipped.

    Attributes
    ----------
    index : int
        Position of the entry in the `plots:` list.
    what : str, optional
        The entry's `what` expression, when it had a usable one.
    exc_type : str
        Exception class name.
    message : str
        Exception message.
    timestamp_utc : str
        ISO timestamp.
    """

    index: int
    what: Optional[str]
    exc_type: str
    message: str
    timestamp_utc: str

    @property
    def step(self) -> str:
        """Location of the entry in the definition file, e.g. ``plots[2]``."""
        return f"plots[{self.index}]"


@dataclass(frozen=True)
class EntryResult(Generic[T]):
    """
    Result wrapper: either the rendered value or the failure record.

    Usage example
    -------------
        result = run_entry(policy, 0, entry, render_entry, cfg)
        if result.failure is None:
            fragment = result.value
    """

    value: Optional[T]
    failure: Optional[EntryFailure]


# ==================================================================================================
#                                   HELPERS
# ==================================================================================================

def entry_what(entry: Any) -> Optional[str]:
    """Return the `what` expression of a raw entry, or None if it has none."""
    if isinstance(entry, Mapping) and isinstance(entry.get("what"), str):
        return entry["what"]
    return None


def make_logger(*, log_path: Path) -> logging.Logger:
    """
    Return a file-backed logger for skipped plot entries.

    The function is idempotent for a given path: it avoids attaching duplicate
    handlers when called repeatedly in long-running processes or tests.
    """
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("gpspec.entries")
    logger.setLevel(logging.INFO)

    # One handler per log file, however many renders share the process.
    if not any(isinstance(h, logging.FileHandler) and h.baseFilename == str(log_path) for h in logger.handlers):
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# ==================================================================================================
#                                   CORE LOGIC
# ==================================================================================================

def run_entry(
    policy: ErrorPolicy,
    index: int,
    entry: Any,
    func: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> EntryResult[T]:
    """
    Process one plot entry with policy-controlled error handling.

    Calls ``func(entry, *args, **kwargs)``. In debug mode exceptions propagate;
    in run mode the failure is logged with its traceback and returned as an
    `EntryFailure`.

    Usage example
    -------------
        policy = ErrorPolicy(debug=False, log_path=Path("render.log"))
        res = run_entry(policy, 1, entry, render_entry, cfg)
        if res.failure:
            # skip this entry
            pass
    """
    logger = make_logger(log_path=policy.log_path)

    try:
        return EntryResult(value=func(entry, *args, **kwargs), failure=None)
    except Exception as exc:  # noqa: BLE001 (intentional: boundary catch)
        failure = EntryFailure(
            index=index,
            what=entry_what(entry),
            exc_type=type(exc).__name__,
            message=str(exc),
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
        )

        # Single record per entry; the traceback rides along via exc_info.
        logger.error(
            "%s failed | what=%s | %s: %s",
            failure.step,
            failure.what,
            failure.exc_type,
            failure.message,
            exc_info=True,
        )

        if policy.debug:
            raise

        # Run mode: the caller keeps rendering the remaining entries.
        return EntryResult(value=None, failure=failure)
