"""ISO 6166 "modulus 10 double-add-double" check digit.

Two implementations that must agree on every uppercase-alphanumeric input:

checksum_functional(s) -> int: literal rendering of the standard's prose.
    Values are expanded into decimal digits, the digit stream is reversed,
    every digit at an even index is doubled and re-expanded, everything is
    summed, and the check digit is (10 - sum % 10) % 10. Kept as the test
    oracle.

checksum_table(s) -> int: used by parsing. Walks characters right to left
    with a step counter; per-character net contributions for even and odd
    steps are precomputed in EVENS/ODDS, and WIDTHS says how many steps a
    character consumes (1 for digits, 2 for letters).

Both functions take bytes that have already passed field-format checks.
Any other byte is a caller bug and raises ChecksumContractError.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import final

_ORD_0 = ord("0")
_ORD_9 = ord("9")
_ORD_A = ord("A")
_ORD_Z = ord("Z")


@final
class ChecksumContractError(RuntimeError):
    """A byte outside 0-9/A-Z reached the checksum engine.

    Only possible if field validation upstream is broken. Never caught
    inside this package.
    """


def char_value(b: int) -> int:
    """Map an ASCII digit to 0-9 and an ASCII uppercase letter to 10-35."""
    if _ORD_0 <= b <= _ORD_9:
        return b - _ORD_0
    if _ORD_A <= b <= _ORD_Z:
        return b - _ORD_A + 10
    raise ChecksumContractError(
        f"byte {b!r} is not an ASCII digit or uppercase letter; "
        "checksum input must be validated first"
    )


def _digits_of(x: int) -> tuple[int, ...]:
    return (x // 10, x % 10) if x >= 10 else (x,)


def _complement(total: int) -> int:
    # 10 - 0 is reported as 0
    return (10 - total % 10) % 10


def checksum_functional(s: Iterable[int]) -> int:
    """Reference double-add-double over a byte sequence."""
    expanded = list(chain.from_iterable(_digits_of(char_value(b)) for b in s))
    total = sum(
        sum(_digits_of(d * 2)) if i % 2 == 0 else d
        for i, d in enumerate(reversed(expanded))
    )
    return _complement(total)


# fmt: off
WIDTHS: tuple[int, ...] = (
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
    2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
    2, 2, 2, 2, 2, 2,
)

# Net contribution (mod 10) when the character starts on an even step.
EVENS: tuple[int, ...] = (
    0, 2, 4, 6, 8, 1, 3, 5, 7, 9,
    1, 3, 5, 7, 9, 2, 4, 6, 8, 0,
    2, 4, 6, 8, 0, 3, 5, 7, 9, 1,
    3, 5, 7, 9, 1, 4,
)

# Net contribution (mod 10) when the character starts on an odd step.
ODDS: tuple[int, ...] = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9,
    2, 3, 4, 5, 6, 7, 8, 9, 0, 1,
    4, 5, 6, 7, 8, 9, 0, 1, 2, 3,
    6, 7, 8, 9, 0, 1,
)
# fmt: on


def checksum_table(s: bytes | bytearray | memoryview) -> int:
    """Table-driven double-add-double; identical output to checksum_functional."""
    total = 0
    step = 0
    for b in reversed(s):
        v = char_value(b)
        total = (total + (ODDS[v] if step & 1 else EVENS[v])) % 10
        step += WIDTHS[v]
    return _complement(total)


def compute_check_digit(payload: bytes | bytearray | memoryview) -> str:
    """Check digit character for a payload. No length or format check is made."""
    return chr(_ORD_0 + checksum_table(payload))
