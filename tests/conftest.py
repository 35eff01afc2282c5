"""Shared pytest fixtures for the gpspec test suite.

Plot-definition fixtures are plain dictionaries so config and loader tests can
write them to YAML or feed them straight into the builders.
"""

from pathlib import Path
import sys
from typing import Any

import pytest
import yaml

# Ensure `import gpspec` resolves to the in-repo source tree during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def sample_plot_definitions() -> dict[str, Any]:
    """Two-element plot definition covering labels, tics and style sections."""
    return {
        "defaults": {"line_width": 3},
        "plots": [
            {
                "what": "'data.csv'",
                "using": "1:2",
                "with": "lines",
                "label": "Series A",
                "xtics": 1,
                "line": {"color": "red"},
            },
            {
                "what": "'data.csv'",
                "using": "1:3",
                "with": "boxes",
                "label": {"column_header": 3},
                "fill": {"intensity": 0.5, "transparent": True, "border": False},
            },
        ],
    }


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Return a helper writing a payload to `<tmp_path>/<name>` as YAML."""

    def _write(payload: Any, name: str = "plots.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
        return path

    return _write
