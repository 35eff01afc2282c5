# ==================================================================================================
#                               Config loading
# ==================================================================================================
#
# Single entry point for reading plot-definition files from disk.
#
# A plot-definition file is YAML with a `plots:` list (one mapping per plotted
# element) and an optional `defaults:` section. This module only loads and
# packages the raw mapping; turning entries into builders is the job of
# `gpspec.loader`, so the CLI and library callers share one parsing path.

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from gpspec.errors import SpecConfigError


# ==================================================================================================
#                                   TYPES
# ==================================================================================================

@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """
    Parsed plot-definition file.

    Parameters
    ----------
    raw
        Raw config dictionary loaded from YAML.

    Usage example
    -------------
        cfg = load_project_config(Path("plots.yaml"))
        first = cfg.plots[0]["what"]
    """

    raw: Dict[str, Any]

    @property
    def plots(self) -> List[Any]:
        """Entries under `plots:` (empty when the section is missing)."""
        plots = self.raw.get("plots")
        if plots is None:
            return []
        if not isinstance(plots, list):
            raise SpecConfigError(f"'plots' must be a list, got: {type(plots).__name__}")
        return list(plots)

    @property
    def defaults(self) -> Dict[str, Any]:
        """Mapping under `defaults:` (empty when the section is missing)."""
        defaults = self.raw.get("defaults")
        if defaults is None:
            return {}
        if not isinstance(defaults, Mapping):
            raise SpecConfigError(f"'defaults' must be a mapping, got: {type(defaults).__name__}")
        return dict(defaults)


# ==================================================================================================
#                                   IO
# ==================================================================================================

def load_project_config(config_path: Path) -> ProjectConfig:
    """
    Load YAML config into a ProjectConfig object.

    Parameters
    ----------
    config_path
        Path to YAML config file.

    Returns
    -------
    ProjectConfig
        Loaded configuration.

    Usage example
    -------------
        cfg = load_project_config(Path("plots.yaml"))
        print(len(cfg.plots))
    """
    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, Mapping):
        raise ValueError(f"Config must be a mapping at top-level, got: {type(data)}")

    return ProjectConfig(raw=dict(data))
