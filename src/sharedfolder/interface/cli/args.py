from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sharedfolder CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sharedfolder",
        description="Map and scan paths below a folder shared with a remote IDE.",
    )

    # --- Shared Folder & Output ---
    p.add_argument(
        "-s", "--shared-folder",
        dest="shared_folder",
        default=None,
        help="Absolute root all relative paths are resolved against.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Commands ---
    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    walk = sub.add_parser("walk", help="Recursively list files with their binary classification.")
    walk.add_argument("dir", help="Directory to scan (relative to the shared folder or absolute).")

    lst = sub.add_parser("list", help="List the immediate children of a directory.")
    lst.add_argument("dir", help="Directory to list (relative to the shared folder or absolute).")

    absolute = sub.add_parser("absolute", help="Map a Unix-style relative path to a native absolute path.")
    absolute.add_argument("path")

    relative = sub.add_parser("relative", help="Map a native path to a Unix-style relative path.")
    relative.add_argument("path")

    domain = sub.add_parser("domain", help="Extract the domain part of a URL.")
    domain.add_argument("url")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. None means "not set".
    """
    overrides: Dict[str, Any] = {
        "shared_folder": args.shared_folder,
        "log_file": args.log_file,
    }

    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
