# SPDX-License-Identifier: MIT
"""Command-line interface for decoding and encoding crosshair share codes."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Callable

import logfire
from pydantic import ValidationError

from codec import decode, encode
from directives import build_config_file, config_filename, render_directives
from errors import FieldOutOfRange, FormatError, ShareCodeError, TypeMismatch
from io_utils.loader import load_record, parse_record
from models import ConfigRecord
from observability.monitoring import init_logfire
from runtime.settings import Settings, load_settings
from utils import LoggingErrorHandler

LOG_LEVELS = ["fatal", "error", "warn", "notice", "info", "debug", "trace"]

EXIT_INVALID = 2
EXIT_WRONG_KIND = 3
EXIT_OUT_OF_RANGE = 4

TOKEN_HELP = "Share code such as CSGO-XXXXX-XXXXX-XXXXX-XXXXX-XXXXX"

# Module logger for CLI diagnostics mirroring
logger = logging.getLogger(__name__)


def _print_version() -> None:
    """Print the installed package version."""
    try:
        pkg_version = version("crosshair-sharecode")
    except PackageNotFoundError:  # pragma: no cover - fallback for editable installs
        pkg_version = "unknown"
    line = f"crosshair-sharecode {pkg_version}"
    print(line)
    logger.info(line)


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire based on settings and verbosity flags."""
    level = settings.log_level.lower()
    base = LOG_LEVELS.index(level) if level in LOG_LEVELS else 2
    index = max(0, min(len(LOG_LEVELS) - 1, base + args.verbose - args.quiet))
    init_logfire(settings.logfire_token, LOG_LEVELS[index])  # type: ignore[arg-type]


def describe_error(exc: ShareCodeError) -> str:
    """Return a user-facing message for ``exc``."""
    if isinstance(exc, TypeMismatch):
        return (
            "This share code is valid but is not a crosshair code. "
            "Copy the code from the crosshair settings instead."
        )
    if isinstance(exc, FormatError):
        return f"Invalid share code ({exc.message}). Check the code and retype it."
    if isinstance(exc, FieldOutOfRange):
        return f"Crosshair setting '{exc.field}' is out of range: {exc.value!r}."
    return exc.message


def exit_code_for(exc: ShareCodeError) -> int:
    """Return the process exit status used for ``exc``."""
    if isinstance(exc, TypeMismatch):
        return EXIT_WRONG_KIND
    if isinstance(exc, FieldOutOfRange):
        return EXIT_OUT_OF_RANGE
    return EXIT_INVALID


def _cmd_decode(args: argparse.Namespace, settings: Settings) -> None:
    """Print the decoded record as JSON."""
    print(decode(args.token).model_dump_json(indent=2))


def _cmd_directives(args: argparse.Namespace, settings: Settings) -> None:
    """Print the directive lines for a token."""
    print(render_directives(decode(args.token)))


def _cmd_config(args: argparse.Namespace, settings: Settings) -> None:
    """Print a complete config file for a token."""
    record = decode(args.token)
    text = build_config_file(
        args.token,
        record,
        alias=args.alias,
        header=settings.config_header and not args.no_header,
        default_alias=settings.default_alias,
    )
    logfire.info(
        "Rendered crosshair config",
        filename=config_filename(args.alias, settings.default_alias),
    )
    print(text, end="")


_FIELD_FLAGS: dict[str, Callable[[str], Any]] = {
    "gap": float,
    "outline": int,
    "thickness": float,
    "length": float,
    "red": int,
    "green": int,
    "blue": int,
    "alpha": int,
    "color_index": int,
    "style": int,
}

_BOOL_FLAGS = {
    "center_dot_enabled": "--center-dot",
    "outline_enabled": "--outline-enabled",
    "alpha_enabled": "--use-alpha",
    "fixed_gap_enabled": "--fixed-gap",
}


def _record_from_args(args: argparse.Namespace) -> ConfigRecord:
    """Build a record from ``--json`` input overlaid with field flags."""
    handler = LoggingErrorHandler()
    if args.json == "-":
        base = parse_record(sys.stdin.read(), handler)
    elif args.json:
        base = load_record(args.json, handler)
    else:
        base = ConfigRecord()
    overrides = {
        name: getattr(args, name)
        for name in (*_FIELD_FLAGS, *_BOOL_FLAGS)
        if getattr(args, name) is not None
    }
    try:
        return ConfigRecord(**{**base.model_dump(), **overrides})
    except ValidationError as exc:
        handler.handle("Invalid crosshair record", exc)
        raise RuntimeError(f"Invalid crosshair record: {exc}") from exc


def _cmd_encode(args: argparse.Namespace, settings: Settings) -> None:
    """Print the share code for a record."""
    print(encode(_record_from_args(args)))


def _add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Attach arguments shared by every subcommand."""
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML configuration file (default: config/app.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeatable)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease logging verbosity (repeatable)",
    )
    return parser


def _add_token_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
    name: str,
    help_text: str,
    func: Callable[[argparse.Namespace, Settings], None],
) -> argparse.ArgumentParser:
    """Create a subcommand parser taking a single token argument."""
    parser = subparsers.add_parser(
        name,
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help=help_text,
    )
    parser.add_argument("token", help=TOKEN_HELP)
    parser.set_defaults(func=func)
    return parser


def _add_encode_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``encode`` subcommand parser."""
    parser = subparsers.add_parser(
        "encode",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Encode a crosshair record as a share code",
        description=(
            "Encode a crosshair record read from --json (use '-' for stdin) or"
            " built from defaults; individual flags override either source."
        ),
    )
    parser.add_argument("--json", default=None, help="Crosshair record JSON file")
    for name, kind in _FIELD_FLAGS.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}", dest=name, type=kind, default=None
        )
    for name, flag in _BOOL_FLAGS.items():
        parser.add_argument(
            flag,
            dest=name,
            action=argparse.BooleanOptionalAction,
            default=None,
        )
    parser.set_defaults(func=_cmd_encode)
    return parser


def _add_config_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``config`` subcommand parser."""
    parser = _add_token_subparser(
        subparsers,
        common,
        "config",
        "Print a config file for a share code",
        _cmd_config,
    )
    parser.add_argument(
        "--alias", default=None, help="Alias name; letters and digits only"
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Emit only the directive lines",
    )
    return parser


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser configured with subcommands."""
    parser = argparse.ArgumentParser(
        description="Decode, encode and render crosshair share codes.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the crosshair-sharecode version and exit.",
    )
    common = _add_common_args(
        argparse.ArgumentParser(
            add_help=False, formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    )
    subparsers = parser.add_subparsers(dest="command")
    _add_token_subparser(
        subparsers, common, "decode", "Decode a share code to JSON", _cmd_decode
    )
    _add_token_subparser(
        subparsers,
        common,
        "directives",
        "Print the directive lines for a share code",
        _cmd_directives,
    )
    _add_config_subparser(subparsers, common)
    _add_encode_subparser(subparsers, common)
    return parser


def _execute_subcommand(args: argparse.Namespace, settings: Settings) -> None:
    """Run the chosen subcommand and map failures to exit codes."""
    handler = LoggingErrorHandler()
    try:
        args.func(args, settings)
    except ShareCodeError as exc:
        handler.handle(f"{args.command} failed", exc)
        print(describe_error(exc), file=sys.stderr)
        raise SystemExit(exit_code_for(exc)) from exc
    except (FileNotFoundError, RuntimeError) as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(EXIT_INVALID) from exc
    finally:
        logfire.force_flush()


def main() -> None:
    """Parse arguments and dispatch to the requested subcommand."""
    parser = _build_parser()
    args = parser.parse_args()
    if args.version:
        _print_version()
        return
    if args.command is None:
        parser.print_help()
        raise SystemExit(1)
    settings = load_settings(args.config)
    _configure_logging(args, settings)
    _execute_subcommand(args, settings)


if __name__ == "__main__":
    # Allow module to be executed as a standalone script
    main()
