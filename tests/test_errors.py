"""Tests for isin.core.errors — error values and their renderings."""

from __future__ import annotations

import dataclasses
import json

import pytest

from isin.core import errors
from isin.core.errors import (
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

ALL_VARIANTS: tuple[ISINError, ...] = (
    InvalidLength(was=0),
    InvalidPayloadLength(was=10),
    InvalidPrefixLength(was=3),
    InvalidBodyLength(was=8),
    InvalidPrefix(was=b"us"),
    InvalidBody(was=b"09739d100"),
    InvalidCheckDigit(was=b"X"),
    IncorrectCheckDigit(was="6", expected="5"),
)


class TestISINErrorBase:
    @pytest.mark.parametrize("err", ALL_VARIANTS, ids=lambda e: type(e).__name__)
    def test_is_isin_error(self, err: ISINError) -> None:
        assert isinstance(err, ISINError)

    @pytest.mark.parametrize("err", ALL_VARIANTS, ids=lambda e: type(e).__name__)
    def test_is_frozen(self, err: ISINError) -> None:
        field = dataclasses.fields(err)[0].name
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(err, field, "changed")

    @pytest.mark.parametrize("err", ALL_VARIANTS, ids=lambda e: type(e).__name__)
    def test_to_dict_json_serializable(self, err: ISINError) -> None:
        d = err.to_dict()
        assert d["code"] == err.code
        assert d["message"] == err.message
        json.dumps(d)  # should not raise

    @pytest.mark.parametrize("err", ALL_VARIANTS, ids=lambda e: type(e).__name__)
    def test_str_is_message(self, err: ISINError) -> None:
        assert str(err) == err.message

    def test_codes_are_distinct(self) -> None:
        codes = [e.code for e in ALL_VARIANTS]
        assert len(set(codes)) == len(codes)

    def test_not_exceptions(self) -> None:
        assert not issubclass(ISINError, BaseException)


class TestEqualityAndHashing:
    def test_same_payload_equal(self) -> None:
        assert InvalidLength(was=5) == InvalidLength(was=5)
        assert hash(InvalidLength(was=5)) == hash(InvalidLength(was=5))

    def test_different_payload_not_equal(self) -> None:
        assert InvalidLength(was=5) != InvalidLength(was=6)

    def test_different_variant_same_payload_not_equal(self) -> None:
        assert InvalidLength(was=11) != InvalidPayloadLength(was=11)

    def test_pattern_match(self) -> None:
        match IncorrectCheckDigit(was="6", expected="5"):
            case IncorrectCheckDigit(was=was, expected=expected):
                assert (was, expected) == ("6", "5")
            case _:
                pytest.fail("Should match IncorrectCheckDigit")


class TestHumanMessages:
    def test_length(self) -> None:
        assert str(InvalidLength(was=0)) == "invalid length 0 bytes when expecting 12"

    def test_payload_length(self) -> None:
        assert str(InvalidPayloadLength(was=10)) == (
            "invalid payload length 10 bytes when expecting 11"
        )

    def test_prefix_length(self) -> None:
        assert str(InvalidPrefixLength(was=3)) == "invalid prefix length 3 bytes when expecting 2"

    def test_body_length(self) -> None:
        assert str(InvalidBodyLength(was=8)) == "invalid body length 8 bytes when expecting 9"

    def test_prefix(self) -> None:
        assert str(InvalidPrefix(was=b"us")) == (
            "prefix 'us' is not two uppercase ASCII alphabetic characters"
        )

    def test_body(self) -> None:
        assert str(InvalidBody(was=b"09739d100")) == (
            "body '09739d100' is not nine uppercase ASCII alphanumeric characters"
        )

    def test_check_digit_format(self) -> None:
        assert str(InvalidCheckDigit(was=b"X")) == "check digit 'X' is not one ASCII decimal digit"

    def test_check_digit_value(self) -> None:
        assert str(IncorrectCheckDigit(was="6", expected="5")) == (
            "incorrect check digit '6' when expecting '5'"
        )

    def test_invalid_utf8_snapshot(self) -> None:
        # first two bytes of a 3-byte UTF-8 sequence
        msg = str(InvalidPrefix(was=b"\xe2\x82"))
        assert msg.startswith("prefix (invalid UTF-8) b'\\xe2\\x82'")

    def test_valid_utf8_non_ascii_snapshot(self) -> None:
        assert str(InvalidPrefix(was="é".encode())) == (
            "prefix 'é' is not two uppercase ASCII alphabetic characters"
        )


class TestStructuredRendering:
    def test_repr_names_variant_and_payload(self) -> None:
        assert repr(InvalidPrefix(was=b"us")) == "InvalidPrefix(was=b'us')"
        assert repr(InvalidLength(was=0)) == "InvalidLength(was=0)"
        assert repr(IncorrectCheckDigit(was="6", expected="5")) == (
            "IncorrectCheckDigit(was='6', expected='5')"
        )

    def test_to_dict_keys(self) -> None:
        assert set(IncorrectCheckDigit(was="6", expected="5").to_dict()) == {
            "code", "message", "was", "expected",
        }
        assert set(InvalidLength(was=0).to_dict()) == {"code", "message", "was"}

    def test_to_dict_bytes_decoded(self) -> None:
        assert InvalidBody(was=b"09739d100").to_dict()["was"] == "09739d100"


class TestSnapshotIndependence:
    def test_snapshot_outlives_buffer(self) -> None:
        buf = bytearray(b"us")
        err = InvalidPrefix(was=bytes(buf))
        buf[:] = b"XX"
        assert err.was == b"us"


class TestDeprecatedAliases:
    def test_parse_error(self) -> None:
        with pytest.warns(DeprecationWarning):
            assert errors.ParseError is ISINError

    def test_basic_code(self) -> None:
        with pytest.warns(DeprecationWarning):
            assert errors.InvalidBasicCode is InvalidBody

    def test_basic_code_length(self) -> None:
        with pytest.warns(DeprecationWarning):
            assert errors.InvalidBasicCodeLength is InvalidBodyLength

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            errors.NoSuchError  # noqa: B018
