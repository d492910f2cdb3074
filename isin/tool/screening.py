"""Bulk screening of candidate ISINs, one per line.

The core never aggregates errors; this layer does. Each line becomes a
ScreenOutcome, and screen_lines() folds them into a ScreeningReport with
per-error-code counts. In fix mode, a line whose only problem is the
check digit (or that is a bare 11-character payload) gets a corrected
ISIN attached.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import final

from isin.core.errors import IncorrectCheckDigit, InvalidLength, ISINError
from isin.core.identifier import ISIN, normalize
from isin.core.result import Err, Ok, partition
from isin.infra.config import ScreeningConfig

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class ScreenOutcome:
    """Result of screening a single line."""

    line_no: int
    raw: str
    result: Ok[ISIN] | Err[ISINError]
    fixed: ISIN | None = None

    @property
    def valid(self) -> bool:
        return isinstance(self.result, Ok)


@final
@dataclass(frozen=True, slots=True)
class ScreeningReport:
    """Aggregate counts over a batch of lines."""

    total: int
    valid: int
    invalid: int
    fixed: int
    error_counts: tuple[tuple[str, int], ...]   # (error code, count), sorted by code
    failures: tuple[ScreenOutcome, ...]

    @property
    def all_valid(self) -> bool:
        return self.invalid == 0


def _repair(candidate: str, error: ISINError) -> ISIN | None:
    match error:
        case IncorrectCheckDigit():
            payload = candidate[:-1]
        case InvalidLength(was=11):
            payload = candidate
        case _:
            return None
    return ISIN.build_from_payload(payload).unwrap_or(None)


def screen_line(line_no: int, raw: str, config: ScreeningConfig) -> ScreenOutcome:
    """Parse one line (line endings already removed) according to config."""
    candidate = normalize(raw) if config.loose else raw
    result = ISIN.parse(candidate)
    fixed: ISIN | None = None
    if config.fix and isinstance(result, Err):
        fixed = _repair(candidate, result.error)
    return ScreenOutcome(line_no=line_no, raw=raw, result=result, fixed=fixed)


def screen_lines(lines: Iterable[str], config: ScreeningConfig) -> ScreeningReport:
    """Screen every line and aggregate. Stops early only when config.fail_fast."""
    total = valid = fixed = 0
    failures: list[ScreenOutcome] = []
    for line_no, line in enumerate(lines, start=1):
        raw = line.rstrip("\r\n")
        if config.skip_blank and not raw.strip():
            continue
        outcome = screen_line(line_no, raw, config)
        total += 1
        match outcome.result:
            case Ok():
                valid += 1
                continue
            case Err(error):
                logger.debug("line %d: %r: %s", line_no, raw, error)
        failures.append(outcome)
        if outcome.fixed is not None:
            fixed += 1
        if config.fail_fast:
            logger.info("stopping at line %d (fail-fast)", line_no)
            break
    _, errors = partition(o.result for o in failures)
    codes = Counter(e.code for e in errors)
    report = ScreeningReport(
        total=total,
        valid=valid,
        invalid=len(failures),
        fixed=fixed,
        error_counts=tuple(sorted(codes.items())),
        failures=tuple(failures),
    )
    logger.info(
        "screened %d line(s): %d valid, %d invalid, %d fixed",
        report.total, report.valid, report.invalid, report.fixed,
    )
    return report
