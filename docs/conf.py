"""Sphinx configuration for the gpspec docs."""

import os
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

project = "gpspec"
author = "gpspec contributors"
copyright = "MIT"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
    "numpydoc",
]

try:
    import sphinx_autodoc_typehints  # noqa: F401
except ImportError:
    _TYPEHINTS_AVAILABLE = False
else:
    _TYPEHINTS_AVAILABLE = True
    extensions.append("sphinx_autodoc_typehints")

try:
    import myst_parser  # noqa: F401
except ImportError:
    _MYST_AVAILABLE = False
else:
    _MYST_AVAILABLE = True
    extensions.append("myst_parser")

templates_path = ["_templates"]
exclude_patterns: list[str] = ["_build"]

autosummary_generate = True
autodoc_typehints = "description"
autodoc_member_order = "groupwise"

numpydoc_show_class_members = False
numpydoc_class_members_toctree = False

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

try:
    import pydata_sphinx_theme  # noqa: F401
except ImportError:
    html_theme = "alabaster"
    html_theme_options = {}
else:
    html_theme = "pydata_sphinx_theme"
    html_theme_options = {
        "navigation_depth": 3,
        "show_toc_level": 2,
    }

html_static_path: list[str] = []

if os.getenv("SPHINX_DEBUG"):
    nitpicky = True

autodoc_mock_imports = [
    "yaml",
]
