"""isin-tool: screen files of candidate ISINs, one per line.

Usage:
  isin-tool isins.txt
  gzcat isins.txt.gz | isin-tool
  isin-tool --loose --fix export.csv other.txt

Each invalid line is printed as NAME:LINE: RAW: MESSAGE, followed by the
corrected ISIN when --fix can repair it. A summary per input goes to
stderr. Exit status is 0 when every line is valid, 1 otherwise, and 2
when an input cannot be read.
"""

from __future__ import annotations

import argparse
import dataclasses
import io
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from isin.core.result import Err
from isin.infra.config import (
    LOG_LEVELS,
    LoggingConfig,
    logging_config_from_env,
    screening_config_from_env,
)
from isin.infra.log import configure_logging
from isin.tool.screening import ScreeningReport, screen_lines

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    env_config = screening_config_from_env()
    parser = argparse.ArgumentParser(
        prog="isin-tool",
        description="Validate ISINs read one per line from files or stdin.",
    )
    parser.add_argument(
        "paths", nargs="*", default=["-"], metavar="PATH",
        help="Input files; '-' or nothing reads stdin.",
    )
    parser.add_argument(
        "--loose", action=argparse.BooleanOptionalAction, default=env_config.loose,
        help="Accept lowercase letters and surrounding whitespace.",
    )
    parser.add_argument(
        "--fix", action=argparse.BooleanOptionalAction, default=env_config.fix,
        help="Print a corrected ISIN for wrong check digits and bare payloads.",
    )
    parser.add_argument(
        "--fail-fast", action="store_true", help="Stop at the first invalid line.",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Do not print per-input summaries.",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, default=None,
        help="Logging level (default from ISIN_TOOL_LOG_LEVEL, else WARNING).",
    )
    return parser


def _tolerant(stream: TextIO) -> TextIO:
    # undecodable bytes become lone surrogates, as for files
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding="utf-8", errors="surrogateescape")
    return stream


def _print_report(name: str, report: ScreeningReport, out: TextIO) -> None:
    for outcome in report.failures:
        if isinstance(outcome.result, Err):
            print(f"{name}:{outcome.line_no}: {outcome.raw!r}: {outcome.result.error}", file=out)
        if outcome.fixed is not None:
            print(f"{name}:{outcome.line_no}: fixed: {outcome.fixed}", file=out)


def _print_summary(name: str, report: ScreeningReport, err: TextIO) -> None:
    print(
        f"{name}: {report.total} screened, {report.valid} valid, "
        f"{report.invalid} invalid, {report.fixed} fixed",
        file=err,
    )
    for code, count in report.error_counts:
        print(f"  {code}: {count}", file=err)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    args = build_parser().parse_args(argv)
    log_config = logging_config_from_env()
    if args.log_level is not None:
        log_config = LoggingConfig(level=args.log_level)
    configure_logging(log_config)

    config = dataclasses.replace(
        screening_config_from_env(),
        loose=args.loose, fix=args.fix, fail_fast=args.fail_fast,
    )
    logger.debug("screening with %s", config)

    all_valid = True
    for path in args.paths:
        if path == "-":
            name = "<stdin>"
            report = screen_lines(_tolerant(stdin), config)
        else:
            name = path
            try:
                with open(path, encoding="utf-8", errors="surrogateescape") as fh:
                    report = screen_lines(fh, config)
            except OSError as e:
                print(f"isin-tool: cannot read {path}: {e.strerror}", file=stderr)
                return 2
        _print_report(name, report, stdout)
        if not args.quiet:
            _print_summary(name, report, stderr)
        if not report.all_valid:
            all_valid = False
            if config.fail_fast:
                break
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
