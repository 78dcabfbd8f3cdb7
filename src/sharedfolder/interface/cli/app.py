from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults,
persistent storage and CLI overrides), logging bootstrap, command dispatch
and result rendering. Filesystem errors raised by the scanner are reported
here, never inside the core.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from sharedfolder.core.services.scanner import resolve_directory, walk_sync
from sharedfolder.core.services.validator import validate_config
from sharedfolder.domain.config import get_default_config, load_config
from sharedfolder.infra.fs import absolute_path, relative_path
from sharedfolder.infra.logging import LoggingConfig, configure_logging, get_logger
from sharedfolder.interface.cli import args as cli_args
from sharedfolder.utils.urls import get_domain

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=conf["log_file"] or None,
    ))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    logger.debug(f"Running '{args.command}' with shared folder '{conf['shared_folder']}'")

    try:
        return _run_command(args, conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.error(f"Filesystem error during '{args.command}': {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    except Exception as e:
        logger.critical(f"Command '{args.command}' failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMAND DISPATCH
# -----------------------------------------------------------------------------

def _run_command(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    """Execute the selected sub-command and render its result."""
    shared_folder = conf["shared_folder"]
    as_json = conf["json_output"]

    if args.command == "walk":
        files = walk_sync(absolute_path(args.dir, shared_folder), shared_folder)
        if as_json:
            _print_json(files)
        else:
            for rel in sorted(files):
                print(f"{'binary' if files[rel] else 'text':<6}  {rel}")
        return EXIT_OK

    if args.command == "list":
        entries = resolve_directory(absolute_path(args.dir, shared_folder), shared_folder)
        if as_json:
            _print_json({rel: entry.to_dict() for rel, entry in entries.items()})
        else:
            for rel in sorted(entries):
                print(f"{'dir' if entries[rel].is_directory else 'file':<4}  {rel}")
        return EXIT_OK

    if args.command == "absolute":
        _print_value(absolute_path(args.path, shared_folder), as_json)
        return EXIT_OK

    if args.command == "relative":
        _print_value(relative_path(absolute_path(args.path, shared_folder), shared_folder), as_json)
        return EXIT_OK

    # domain
    domain = get_domain(args.url)
    if domain is None:
        print(f"No domain found in '{args.url}'.", file=sys.stderr)
        return EXIT_FAILURE
    _print_value(domain, as_json)
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge the overrides that were actually set on the command line.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject; None entries are ignored.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))


def _print_value(value: str, as_json: bool) -> None:
    if as_json:
        _print_json({"result": value})
    else:
        print(value)


if __name__ == "__main__":
    sys.exit(main())
