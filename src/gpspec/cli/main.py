# ==================================================================================================
#                                   CLI
# ==================================================================================================
#
# Entry point for the `gpspec` command-line interface.
#
# This module is a thin dispatcher:
# - parse global + subcommand arguments
# - load the plot-definition config once
# - call a single command module per subcommand
#
# Builder logic must live in `gpspec.*` (specs/loader), not here.
#
# ==================================================================================================
# Imports
# ==================================================================================================

import argparse
import logging
from pathlib import Path
from typing import Dict, Sequence

from gpspec.config import load_project_config
from gpspec.cli.types import CliCommand
from gpspec.logging import configure_logging

# Command handlers (thin)
from gpspec.cli.commands import render as cmd_render  # noqa: F401


# ==================================================================================================
# Command registry
# ==================================================================================================

_COMMANDS: Dict[str, CliCommand] = {
    "render": cmd_render,
}


# ==================================================================================================
# Argument parsing
# ==================================================================================================

def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the top-level CLI parser with subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.

    Usage example
    -------------
        gpspec render --config plots.yaml --out plot.gp

        gpspec --log-level DEBUG render --config plots.yaml --debug
    """
    parser = argparse.ArgumentParser(
        prog="gpspec",
        description="Build gnuplot plot commands from style definitions",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console logging level.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="<command>")

    for name, module in _COMMANDS.items():
        if not hasattr(module, "add_subparser"):
            raise RuntimeError(f"CLI command module for '{name}' is missing add_subparser().")
        module.add_subparser(subparsers)

    return parser


# ==================================================================================================
# Entry point
# ==================================================================================================

def main(argv: Sequence[str] | None = None) -> None:
    """
    CLI entry point.

    Parameters
    ----------
    argv
        Optional argv for testing. If None, reads from sys.argv.

    Returns
    -------
    None

    Usage example
    -------------
        main(["render", "--config", "plots.yaml", "--out", "plot.gp"])
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)  # noqa

    configure_logging(getattr(logging, str(args.log_level)))

    # Every subcommand requires --config (enforced by handlers)
    if not hasattr(args, "config"):
        raise RuntimeError("Internal error: subcommand args missing --config.")

    cfg = load_project_config(Path(args.config))

    command_name = str(args.command)
    module = _COMMANDS.get(command_name)
    if module is None:
        raise RuntimeError(f"Unknown command: {command_name}")

    if not hasattr(module, "run"):
        raise RuntimeError(f"CLI command module for '{command_name}' is missing run().")

    module.run(args, cfg)


if __name__ == "__main__":
    main()
