"""
Parsing and error normalization of gateway responses.

Endpoints report errors in different shapes (``errorCode``, ``ErrorCode``,
nested ``error.code``). Paths are checked in table order and the first
non-null value wins.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from sberbank_acquiring.domain.exceptions import ActionException, ResponseParsingException
from sberbank_acquiring.shared.codes import AcquiringCode


ERROR_CODE_PATHS: tuple[tuple[str, ...], ...] = (
    ("errorCode",),
    ("ErrorCode",),
    ("error", "code"),
)

ERROR_MESSAGE_PATHS: tuple[tuple[str, ...], ...] = (
    ("errorMessage",),
    ("ErrorMessage",),
    ("error", "message"),
    ("error", "description"),
)

UNKNOWN_ERROR_MESSAGE = "Unknown error."

# Removed from every response, whichever shape matched
BOOKKEEPING_KEYS = ("errorCode", "ErrorCode", "errorMessage", "ErrorMessage", "error", "success")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_response(raw: str) -> dict[str, Any]:
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ResponseParsingException(f"Malformed JSON: {exc}", raw) from exc
    if not isinstance(data, dict):
        raise ResponseParsingException(
            f"Expected a JSON object, got {type(data).__name__}", raw
        )
    return data


def _lookup(data: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    value: Any = data
    for key in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _first(data: Mapping[str, Any], paths: tuple[tuple[str, ...], ...]) -> Optional[Any]:
    for path in paths:
        value = _lookup(data, path)
        if value is not None:
            return value
    return None


def _to_code(value: Any, raw: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ResponseParsingException(f"Invalid error code: {value!r}", raw) from exc


def extract_error(data: Mapping[str, Any], raw: str = "") -> tuple[int, str]:
    """Return ``(code, message)``; code is AcquiringCode.SUCCESS when no error field is set."""
    found = _first(data, ERROR_CODE_PATHS)
    code = AcquiringCode.SUCCESS if found is None else _to_code(found, raw)
    message = _first(data, ERROR_MESSAGE_PATHS)
    return code, UNKNOWN_ERROR_MESSAGE if message is None else str(message)


def normalize_response(data: dict[str, Any], *, action: Optional[str] = None, raw: str = "") -> dict[str, Any]:
    """Strip error bookkeeping fields and raise ActionException on a non-zero code."""
    code, message = extract_error(data, raw)
    cleaned = {key: value for key, value in data.items() if key not in BOOKKEEPING_KEYS}
    if code != AcquiringCode.SUCCESS:
        raise ActionException(message, code, action=action)
    return cleaned
