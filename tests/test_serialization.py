"""Tests for isin.core.serialization — JSON exchange and canonical bytes."""

from __future__ import annotations

import json
from dataclasses import dataclass

from conftest import isins
from hypothesis import given

from isin.core.errors import IncorrectCheckDigit, InvalidLength, InvalidPrefix
from isin.core.identifier import ISIN, parse
from isin.core.result import Err, Ok, unwrap
from isin.core.serialization import canonical_bytes, from_json, to_json

APPLE = "US0378331005"


class TestToJson:
    def test_twelve_char_string(self) -> None:
        assert to_json(unwrap(parse(APPLE))) == '"US0378331005"'

    def test_embeddable(self) -> None:
        assert json.loads(to_json(unwrap(parse(APPLE)))) == APPLE


class TestFromJson:
    def test_valid(self) -> None:
        assert from_json('"US0378331005"') == parse(APPLE)

    def test_bytes_input(self) -> None:
        assert from_json(b'"US0378331005"') == parse(APPLE)

    def test_is_strict(self) -> None:
        assert from_json('"us0378331005"') == Err(InvalidPrefix(was=b"us"))
        assert from_json('" US0378331005"') == Err(InvalidLength(was=13))

    def test_wrong_check_digit(self) -> None:
        assert from_json('"US0378331006"') == Err(IncorrectCheckDigit(was="6", expected="5"))

    def test_not_json(self) -> None:
        result = from_json("US0378331005")
        assert isinstance(result, Err)
        assert isinstance(result.error, str)

    def test_not_a_string(self) -> None:
        assert from_json("42") == Err("ISIN must be a JSON string, got int")
        assert isinstance(from_json('{"isin": "US0378331005"}'), Err)

    @given(isin=isins())
    def test_round_trip_exact(self, isin: ISIN) -> None:
        assert from_json(to_json(isin)) == Ok(isin)


@dataclass(frozen=True)
class _Holding:
    isin: ISIN
    quantity: int


class TestCanonicalBytes:
    def test_isin_is_plain_string(self) -> None:
        assert unwrap(canonical_bytes(unwrap(parse(APPLE)))) == b'"US0378331005"'

    def test_nested_in_dict_and_list(self) -> None:
        isin = unwrap(parse(APPLE))
        raw = unwrap(canonical_bytes({"b": [isin], "a": None}))
        assert raw == b'{"a":null,"b":["US0378331005"]}'

    def test_dataclass(self) -> None:
        holding = _Holding(isin=unwrap(parse(APPLE)), quantity=10)
        assert json.loads(unwrap(canonical_bytes(holding))) == {
            "_type": "_Holding", "isin": APPLE, "quantity": 10,
        }

    def test_error_value(self) -> None:
        raw = unwrap(canonical_bytes(InvalidLength(was=3)))
        assert json.loads(raw) == InvalidLength(was=3).to_dict()

    def test_deterministic(self) -> None:
        isin = unwrap(parse(APPLE))
        assert canonical_bytes({"x": isin, "y": 1}) == canonical_bytes({"y": 1, "x": isin})

    def test_unsupported_type_is_err(self) -> None:
        result = canonical_bytes(object())
        assert isinstance(result, Err)
        assert "Unsupported type" in result.error
