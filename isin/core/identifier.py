"""Validated ISIN newtype and the parse/build pipeline.

An ISIN is 12 ASCII characters: a 2-letter prefix, a 9-character
uppercase alphanumeric body, and one check digit computed over the
11-character payload (prefix + body) with the double-add-double checksum.

Checks run in a fixed order and stop at the first failure:
length, prefix, body, check-digit format, check-digit value. All checks
run on the UTF-8 bytes of the input, so non-ASCII text fails as a
length or field-format error and never raises.
"""

from __future__ import annotations

import string
import warnings
from dataclasses import dataclass
from typing import final

from isin.core.checksum import compute_check_digit
from isin.core.errors import (
    BODY_LENGTH,
    ISIN_LENGTH,
    PAYLOAD_LENGTH,
    PREFIX_LENGTH,
    IncorrectCheckDigit,
    InvalidBody,
    InvalidBodyLength,
    InvalidCheckDigit,
    InvalidLength,
    InvalidPayloadLength,
    InvalidPrefix,
    InvalidPrefixLength,
    ISINError,
)
from isin.core.result import Err, Ok

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
# Unicode White_Space, which excludes the U+001C..U+001F separators
_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _encode(text: str) -> bytes:
    # surrogatepass: lone surrogates become bytes that fail format checks
    return text.encode("utf-8", "surrogatepass")


# --- Field checks (bytes methods are ASCII-only) ---


def _check_prefix(prefix: bytes) -> ISINError | None:
    if prefix.isalpha() and prefix.isupper():
        return None
    return InvalidPrefix(was=bytes(prefix))


def _check_body(body: bytes) -> ISINError | None:
    if body.isalnum() and body.upper() == body:
        return None
    return InvalidBody(was=bytes(body))


def _check_check_digit(cd: bytes) -> ISINError | None:
    if cd.isdigit():
        return None
    return InvalidCheckDigit(was=bytes(cd))


def _check_payload(payload: bytes) -> ISINError | None:
    return _check_prefix(payload[:PREFIX_LENGTH]) or _check_body(payload[PREFIX_LENGTH:])


def _check_isin(raw: bytes) -> ISINError | None:
    """Full strict validation of a candidate ISIN's bytes."""
    if len(raw) != ISIN_LENGTH:
        return InvalidLength(was=len(raw))
    error = _check_payload(raw[:PAYLOAD_LENGTH]) or _check_check_digit(raw[PAYLOAD_LENGTH:])
    if error is not None:
        return error
    was = chr(raw[PAYLOAD_LENGTH])
    expected = compute_check_digit(raw[:PAYLOAD_LENGTH])
    if was != expected:
        return IncorrectCheckDigit(was=was, expected=expected)
    return None


@final
@dataclass(frozen=True, slots=True, order=True)
class ISIN:
    """International Securities Identification Number: 12 chars, checksum-valid.

    Obtain one through parse(), parse_loose(), build_from_payload() or
    build_from_parts(). Direct construction with an invalid value raises
    TypeError.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"ISIN requires str, got {type(self.value).__name__}")
        error = _check_isin(_encode(self.value))
        if error is not None:
            raise TypeError(f"ISIN requires a valid value, got {self.value!r}: {error}")

    def __str__(self) -> str:
        return self.value

    # --- Accessors ---

    @property
    def prefix(self) -> str:
        """Two-letter prefix, usually the ISO 3166 country code."""
        return self.value[:PREFIX_LENGTH]

    @property
    def body(self) -> str:
        """Nine-character code assigned by the national numbering agency."""
        return self.value[PREFIX_LENGTH:PAYLOAD_LENGTH]

    @property
    def payload(self) -> str:
        """Prefix + body: everything the check digit is computed over."""
        return self.value[:PAYLOAD_LENGTH]

    @property
    def check_digit(self) -> str:
        return self.value[PAYLOAD_LENGTH]

    @property
    def basic_code(self) -> str:
        """Same as body."""
        return self.body

    @property
    def security_identifier(self) -> str:
        warnings.warn(
            "ISIN.security_identifier is deprecated, use ISIN.body",
            DeprecationWarning, stacklevel=2,
        )
        return self.body

    @property
    def country_code(self) -> str:
        warnings.warn(
            "ISIN.country_code is deprecated, use ISIN.prefix",
            DeprecationWarning, stacklevel=2,
        )
        return self.prefix

    # --- Construction ---

    @staticmethod
    def parse(raw: str) -> Ok[ISIN] | Err[ISINError]:
        """Strict parse: exactly 12 uppercase ASCII characters, correct check digit."""
        error = _check_isin(_encode(raw))
        if error is not None:
            return Err(error)
        return Ok(ISIN(value=raw))

    @staticmethod
    def parse_loose(raw: str) -> Ok[ISIN] | Err[ISINError]:
        """Upper-case ASCII letters and strip surrounding whitespace, then parse strictly."""
        return ISIN.parse(normalize(raw))

    @staticmethod
    def parse_strict(raw: str) -> Ok[ISIN] | Err[ISINError]:
        warnings.warn("ISIN.parse_strict is deprecated, use ISIN.parse", DeprecationWarning, stacklevel=2)
        return ISIN.parse(raw)

    @staticmethod
    def build_from_payload(payload: str) -> Ok[ISIN] | Err[ISINError]:
        """Append the computed check digit to an 11-character prefix + body."""
        b = _encode(payload)
        if len(b) != PAYLOAD_LENGTH:
            return Err(InvalidPayloadLength(was=len(b)))
        error = _check_payload(b)
        if error is not None:
            return Err(error)
        return Ok(ISIN(value=payload + compute_check_digit(b)))

    @staticmethod
    def build_from_parts(prefix: str, body: str) -> Ok[ISIN] | Err[ISINError]:
        """Build from a separate prefix and body, computing the check digit."""
        p = _encode(prefix)
        if len(p) != PREFIX_LENGTH:
            return Err(InvalidPrefixLength(was=len(p)))
        error = _check_prefix(p)
        if error is not None:
            return Err(error)
        b = _encode(body)
        if len(b) != BODY_LENGTH:
            return Err(InvalidBodyLength(was=len(b)))
        error = _check_body(b)
        if error is not None:
            return Err(error)
        payload = p + b
        return Ok(ISIN(value=prefix + body + compute_check_digit(payload)))


def normalize(raw: str) -> str:
    """The loose-parsing normalization: ASCII upper-case, then strip whitespace."""
    return raw.translate(_ASCII_UPPER).strip(_WHITESPACE)


parse = ISIN.parse
parse_loose = ISIN.parse_loose
build_from_payload = ISIN.build_from_payload
build_from_parts = ISIN.build_from_parts


def parse_strict(raw: str) -> Ok[ISIN] | Err[ISINError]:
    warnings.warn("parse_strict is deprecated, use parse", DeprecationWarning, stacklevel=2)
    return ISIN.parse(raw)


def validate_detail(raw: str) -> ISINError | None:
    """Run strict parse and keep only the error, or None if the input is a valid ISIN."""
    match ISIN.parse(raw):
        case Err(error):
            return error
        case _:
            return None


def validate(raw: str) -> bool:
    """True iff parse(raw) would succeed."""
    return validate_detail(raw) is None
