"""JSON exchange for ISIN values.

to_json(isin) -> str: the 12-character text as a JSON string.
from_json(raw) -> Result[ISIN, ISINError | str]: strict parse of a JSON string.
canonical_bytes(obj) -> Result[bytes, str]: deterministic JSON bytes for
    structures that embed ISINs (dicts, lists, dataclasses, error values).
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from isin.core.errors import ISINError
from isin.core.identifier import ISIN
from isin.core.result import Err, Ok


def to_json(isin: ISIN) -> str:
    return json.dumps(isin.value)


def from_json(raw: str | bytes) -> Ok[ISIN] | Err[ISINError | str]:
    """Decode a JSON string and strictly parse it. Never raises."""
    try:
        decoded = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return Err(f"Invalid JSON for ISIN: {e}")
    if not isinstance(decoded, str):
        return Err(f"ISIN must be a JSON string, got {type(decoded).__name__}")
    return ISIN.parse(decoded)


def _to_serializable(obj: object) -> Any:  # noqa: PLR0911
    """Recursively convert to a JSON-compatible Python value."""
    if obj is None or isinstance(obj, (bool, int, str)):
        return obj
    if isinstance(obj, ISIN):
        return obj.value
    if isinstance(obj, ISINError):
        return obj.to_dict()
    if isinstance(obj, (tuple, list)):
        return [_to_serializable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _to_serializable(v) for k, v in sorted(obj.items())}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        field_names = sorted(f.name for f in dataclasses.fields(obj))
        result: dict[str, Any] = {"_type": type(obj).__name__}
        for name in field_names:
            result[name] = _to_serializable(getattr(obj, name))
        return result
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def canonical_bytes(obj: object) -> Ok[bytes] | Err[str]:
    """Deterministic JSON bytes; Err on unsupported types instead of raising."""
    try:
        serializable = _to_serializable(obj)
    except TypeError as e:
        return Err(f"Unsupported type in canonical serialization: {e}")
    return Ok(
        json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8")
    )
