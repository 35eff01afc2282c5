# ==================================================================================================
#                               CLI: render
# ==================================================================================================
#
# Command handler for: `gpspec render ...`
#
# Responsibilities
# ----------------
# - define subcommand arguments (add_subparser)
# - run the command given parsed args + loaded config (run)
#
# Builder logic lives in `gpspec.loader` / `gpspec.specs`, not here.
#

# ==================================================================================================
# Imports
# ==================================================================================================

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from gpspec.config import ProjectConfig
from gpspec.errors import ErrorPolicy
from gpspec.loader import render_config

logger = logging.getLogger(__name__)

# ==================================================================================================
# Constants
# ==================================================================================================

DEFAULT_LOG_PATH: Path = Path("gpspec-render.log")


# ==================================================================================================
# Subparser
# ==================================================================================================

def add_subparser(subparsers: Any) -> None:
    """
    Register the `render` subcommand.

    Parameters
    ----------
    subparsers
        Subparser registry from the top-level CLI.

    Usage example
    -------------
        # called internally by gpspec.cli.main.build_arg_parser()
        add_subparser(subparsers)
    """
    parser = subparsers.add_parser(
        "render",
        help="Render a plot-definition YAML file into a gnuplot `plot` command",
    )

    parser.add_argument("--config", type=Path, required=True, help="Path to plot-definition YAML.")
    parser.add_argument("--out", type=Path, default=None, help="Output file (default: stdout).")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Stop at the first malformed plot entry instead of skipping it.",
    )
    parser.add_argument(
        "--log-path",
        type=Path,
        default=DEFAULT_LOG_PATH,
        help="File receiving failure details for skipped entries.",
    )


# ==================================================================================================
# Runner
# ==================================================================================================

def run(args: argparse.Namespace, cfg: ProjectConfig) -> None:
    """
    Execute the `render` command.

    Parameters
    ----------
    args
        Parsed argparse namespace for this subcommand.
    cfg
        Plot-definition config (already loaded once in gpspec.cli.main).

    Usage example
    -------------
        # called internally by gpspec.cli.main.main()
        run(args, cfg)
    """
    policy = ErrorPolicy(debug=bool(args.debug), log_path=Path(args.log_path))
    command, failures = render_config(cfg, policy)

    if failures:
        logger.warning("Skipped %d malformed plot entr(y/ies); details in %s", len(failures), policy.log_path)

    if args.out is None:
        sys.stdout.write(command + "\n")
        return

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(command + "\n", encoding="utf-8")
    logger.info("Wrote plot command to %s", args.out)
