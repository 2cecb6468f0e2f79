"""Command-line entry point: read paths from stdin, print the tree to stdout."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import IO

from pathtree.models import TreeOptions
from pathtree.path_filter import check_options, parse_pattern_input
from pathtree.tree_builder import format_tree

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return version("pathtree")
    except PackageNotFoundError:
        # Running from a source checkout that was never installed
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtree",
        description="Render a list of paths read from stdin as a directory tree.",
        epilog="Example:  git ls-files | pathtree --compact",
    )
    parser.add_argument(
        "-c", "--compact", action="store_true",
        help="Join chains of single-child directories on one line",
    )
    parser.add_argument(
        "-s", "--separator", default="/",
        help="Path separator (default: /)",
    )
    parser.add_argument(
        "-i", "--include", default="",
        help="Only keep paths matching any of these regexes (comma-separated)",
    )
    parser.add_argument(
        "-e", "--exclude", default="",
        help="Drop paths matching any of these regexes (comma-separated)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def _parse_options(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> TreeOptions:
    if not args.separator:
        parser.error("separator must not be empty")

    options = TreeOptions(
        separator=args.separator,
        compact=args.compact,
        include=parse_pattern_input(args.include),
        exclude=parse_pattern_input(args.exclude),
    )
    errors = check_options(options)
    if errors:
        parser.error("invalid regex: " + "; ".join(errors))
    return options


def _read_lines(stream: IO[str]) -> list[str]:
    """Read every line of *stream* as UTF-8 text."""
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")
    return stream.readlines()


def _write_text(stream: IO[str], text: str) -> None:
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")
    stream.write(text)
    stream.flush()


def _discard_stdout() -> None:
    """Point stdout at devnull so the shutdown flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    options = _parse_options(parser, args)

    try:
        lines = _read_lines(sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read input: %s", exc)
        return 1
    logger.debug("Read %d input lines", len(lines))

    output = format_tree(lines, options)

    try:
        _write_text(sys.stdout, output)
    except BrokenPipeError:
        logger.error("Failed to write output: reader closed the pipe")
        _discard_stdout()
        return 1
    except OSError as exc:
        logger.error("Failed to write output: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
