"""Error values for ISIN parsing and building. Nothing here is raised.

Every error is a frozen dataclass value that can be pattern-matched,
compared, hashed and serialized. Base class ISINError, eight @final
variants. Byte payloads are snapshots of the offending field, so an
error stays meaningful after the input string is gone.

Rendering:
  str(err)       -> human message ("prefix 'us' is not two uppercase ...")
  repr(err)      -> structured ("InvalidPrefix(was=b'us')")
  err.to_dict()  -> JSON-compatible dict with stable keys
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import ClassVar, final

ISIN_LENGTH = 12
PAYLOAD_LENGTH = 11
PREFIX_LENGTH = 2
BODY_LENGTH = 9


def _show(was: bytes) -> str:
    try:
        return repr(was.decode("utf-8"))
    except UnicodeDecodeError:
        return f"(invalid UTF-8) {was!r}"


@dataclass(frozen=True, slots=True)
class ISINError:
    """Base error value. NOT @final — has subclasses."""

    code: ClassVar[str] = "ISIN_ERROR"

    @property
    def message(self) -> str:
        return "invalid ISIN"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys."""
        return {"code": self.code, "message": self.message}


# ---------------------------------------------------------------------------
# Length errors
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class InvalidLength(ISINError):
    """Input is not exactly 12 bytes."""

    code: ClassVar[str] = "INVALID_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid length {self.was} bytes when expecting {ISIN_LENGTH}"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidPayloadLength(ISINError):
    """Payload passed to build_from_payload is not exactly 11 bytes."""

    code: ClassVar[str] = "INVALID_PAYLOAD_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid payload length {self.was} bytes when expecting {PAYLOAD_LENGTH}"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidPrefixLength(ISINError):
    """Prefix passed to build_from_parts is not exactly 2 bytes."""

    code: ClassVar[str] = "INVALID_PREFIX_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid prefix length {self.was} bytes when expecting {PREFIX_LENGTH}"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidBodyLength(ISINError):
    """Body passed to build_from_parts is not exactly 9 bytes."""

    code: ClassVar[str] = "INVALID_BODY_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid body length {self.was} bytes when expecting {BODY_LENGTH}"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was}


# ---------------------------------------------------------------------------
# Field format errors
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class InvalidPrefix(ISINError):
    """Prefix is not two uppercase ASCII letters."""

    code: ClassVar[str] = "INVALID_PREFIX"

    was: bytes

    @property
    def message(self) -> str:
        return f"prefix {_show(self.was)} is not two uppercase ASCII alphabetic characters"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was.decode("utf-8", "replace")}


@final
@dataclass(frozen=True, slots=True)
class InvalidBody(ISINError):
    """Body is not nine uppercase ASCII alphanumerics."""

    code: ClassVar[str] = "INVALID_BODY"

    was: bytes

    @property
    def message(self) -> str:
        return f"body {_show(self.was)} is not nine uppercase ASCII alphanumeric characters"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was.decode("utf-8", "replace")}


@final
@dataclass(frozen=True, slots=True)
class InvalidCheckDigit(ISINError):
    """Check digit slot does not hold an ASCII decimal digit."""

    code: ClassVar[str] = "INVALID_CHECK_DIGIT"

    was: bytes

    @property
    def message(self) -> str:
        return f"check digit {_show(self.was)} is not one ASCII decimal digit"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was.decode("utf-8", "replace")}


@final
@dataclass(frozen=True, slots=True)
class IncorrectCheckDigit(ISINError):
    """Check digit is well-formed but does not match the payload."""

    code: ClassVar[str] = "INCORRECT_CHECK_DIGIT"

    was: str
    expected: str

    @property
    def message(self) -> str:
        return f"incorrect check digit {self.was!r} when expecting {self.expected!r}"

    def to_dict(self) -> dict[str, object]:
        return {**ISINError.to_dict(self), "was": self.was, "expected": self.expected}


# ---------------------------------------------------------------------------
# Deprecated names
# ---------------------------------------------------------------------------

_DEPRECATED_ALIASES: dict[str, type[ISINError]] = {
    "ParseError": ISINError,
    "InvalidBasicCode": InvalidBody,
    "InvalidBasicCodeLength": InvalidBodyLength,
}


def __getattr__(name: str) -> type[ISINError]:
    if name in _DEPRECATED_ALIASES:
        target = _DEPRECATED_ALIASES[name]
        warnings.warn(
            f"{name} is deprecated, use {target.__name__} instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return target
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
