"""Command line entry point: ``paranoid-spacing text|file``."""

from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import DEFAULT_CONFIG_FILE, ConfigError, SpacingConfig, load_config
from .debug_utils import debug_logging
from .file_io import file_needs_spacing, space_file, space_path
from .logging_utils import setup_logger
from .spacing import space_text, trace_spacing

EXIT_OK = 0
EXIT_CHANGES = 1
EXIT_ERROR = 2

console = Console(stderr=True)
logger = logging.getLogger("paranoid_spacing.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paranoid-spacing",
        description="Insert spaces between CJK and half-width letters, digits and symbols.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help=f"YAML configuration file (default: {DEFAULT_CONFIG_FILE}, ignored when missing)",
    )
    parser.add_argument("--log-level", help="Logging level, overrides the configuration")
    parser.add_argument("--log-dir", type=Path, help="Also write rotating log files under this directory")
    parser.add_argument("--debug", action="store_true", help="Log every rule that changes the text")

    sub = parser.add_subparsers(dest="command", required=True)

    text_cmd = sub.add_parser("text", help="Space text given as arguments or read from stdin")
    text_cmd.add_argument("text", nargs="*", help="Text to process; stdin is read when omitted")
    text_cmd.add_argument("--explain", action="store_true", help="List the rules that fired on stderr")
    text_cmd.set_defaults(handler=cmd_text)

    file_cmd = sub.add_parser("file", help="Space files or directories of files")
    file_cmd.add_argument("paths", nargs="+", type=Path, help="Files, or directories searched with the configured pattern")
    mode = file_cmd.add_mutually_exclusive_group()
    mode.add_argument("--inplace", action="store_true", help="Rewrite files in place")
    mode.add_argument("--check", action="store_true", help="Only report files that would change (exit 1 if any)")
    mode.add_argument("--verbatim", action="store_true", help="Copy files to stdout without spacing")
    file_cmd.add_argument("--no-backup", action="store_true", help="Skip the backup copy when rewriting in place")
    file_cmd.add_argument("--encoding", help="File encoding, overrides the configuration")
    file_cmd.add_argument("--pattern", help="Glob used for directories, overrides the configuration")
    file_cmd.set_defaults(handler=cmd_file)
    return parser


def _iter_targets(paths: Iterable[Path], pattern: str) -> Iterator[Path]:
    """Yield files from *paths*, expanding directories with *pattern*."""

    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob(pattern) if p.is_file())
        else:
            yield path


def _print_trace(fired: Sequence[str]) -> None:
    table = Table(title="Rules applied")
    table.add_column("#", justify="right")
    table.add_column("Rule")
    for index, name in enumerate(fired, start=1):
        table.add_row(str(index), name)
    if not fired:
        table.add_row("-", "(none)")
    console.print(table)


def cmd_text(args: argparse.Namespace, cfg: SpacingConfig) -> int:
    """Handle ``text``: write the spaced text to stdout, one line at a time."""

    if args.text:
        lines: Iterable[str] = io.StringIO(" ".join(args.text) + "\n", newline="")
    else:
        lines = sys.stdin

    fired: List[str] = []
    for line in lines:
        if args.explain:
            spaced, names = trace_spacing(line)
            fired.extend(names)
        else:
            spaced = space_text(line)
        sys.stdout.write(spaced)

    if args.explain:
        _print_trace(fired)
    return EXIT_OK


def cmd_file(args: argparse.Namespace, cfg: SpacingConfig) -> int:
    """Handle ``file``: stream, rewrite or check each target."""

    encoding = args.encoding or cfg.encoding
    pattern = args.pattern or cfg.pattern
    backup_suffix = None if args.no_backup else (cfg.backup_suffix or None)

    pending: List[Path] = []
    for target in _iter_targets(args.paths, pattern):
        if args.check:
            if file_needs_spacing(target, encoding=encoding):
                pending.append(target)
                sys.stdout.write(f"{target}\n")
        elif args.inplace:
            if space_path(target, backup_suffix=backup_suffix, encoding=encoding):
                console.print(f"[green]spaced[/green] {escape(str(target))}", highlight=False)
        else:
            space_file(target, sys.stdout, spacing=not args.verbatim, encoding=encoding)

    if args.check:
        logger.info("%d file(s) need spacing", len(pending))
        return EXIT_CHANGES if pending else EXIT_OK
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, configure logging and run the selected command."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return EXIT_ERROR

    setup_logger(
        "paranoid_spacing",
        log_dir=args.log_dir or cfg.log_dir,
        level=args.log_level or cfg.log_level,
    )
    logger.debug("paranoid-spacing %s command=%s", __version__, args.command)

    try:
        with debug_logging(args.debug):
            return args.handler(args, cfg)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        console.print(f"[red]error:[/red] {escape(str(exc))}", highlight=False)
        return EXIT_ERROR
