# weaviate_sdk/core/wire.py
# SPDX-License-Identifier: Apache-2.0
"""
JSON wire helpers shared by the models.

Weaviate payloads mix strictly typed envelopes (ids, statuses, counters)
with open, user-defined JSON (object properties, module config, GraphQL
data). The envelope fields go through the `req_*` / `opt_*` readers below,
which raise `DecodeError` on a shape mismatch; open JSON is carried as
`JSONValue` and passed through verbatim.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from weaviate_sdk.core.errors import DecodeError

JSONValue = Union[
    None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]
]
JSONObject = Dict[str, JSONValue]

E = TypeVar("E", bound=Enum)

_MISSING = object()


def compact(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None; wire bodies omit unset fields."""
    return {k: v for k, v in data.items() if v is not None}


def expect_object(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(
            f"{what}: expected JSON object, got {type(value).__name__}",
            details={"field": what},
        )
    return value


def expect_list(value: Any, what: str) -> List[Any]:
    if not isinstance(value, list):
        raise DecodeError(
            f"{what}: expected JSON array, got {type(value).__name__}",
            details={"field": what},
        )
    return value


def _get(data: Mapping[str, Any], key: str, what: str, required: bool) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        if required:
            raise DecodeError(
                f"{what}: missing required field '{key}'",
                details={"field": f"{what}.{key}"},
            )
        return None
    return value


def _mismatch(what: str, key: str, expected: str, value: Any) -> DecodeError:
    return DecodeError(
        f"{what}.{key}: expected {expected}, got {type(value).__name__}",
        details={"field": f"{what}.{key}"},
    )


def req_str(data: Mapping[str, Any], key: str, what: str) -> str:
    value = _get(data, key, what, True)
    if not isinstance(value, str):
        raise _mismatch(what, key, "string", value)
    return value


def opt_str(data: Mapping[str, Any], key: str, what: str) -> Optional[str]:
    value = _get(data, key, what, False)
    if value is not None and not isinstance(value, str):
        raise _mismatch(what, key, "string", value)
    return value


def opt_int(data: Mapping[str, Any], key: str, what: str) -> Optional[int]:
    value = _get(data, key, what, False)
    if value is None:
        return None
    # JSON has one number type; integral floats like 3.0 are accepted
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(what, key, "integer", value)
    return value


def req_int(data: Mapping[str, Any], key: str, what: str) -> int:
    value = opt_int(data, key, what)
    if value is None:
        raise DecodeError(
            f"{what}: missing required field '{key}'",
            details={"field": f"{what}.{key}"},
        )
    return value


def opt_float(data: Mapping[str, Any], key: str, what: str) -> Optional[float]:
    value = _get(data, key, what, False)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(what, key, "number", value)
    return float(value)


def opt_bool(data: Mapping[str, Any], key: str, what: str) -> Optional[bool]:
    value = _get(data, key, what, False)
    if value is not None and not isinstance(value, bool):
        raise _mismatch(what, key, "boolean", value)
    return value


def req_bool(data: Mapping[str, Any], key: str, what: str) -> bool:
    value = _get(data, key, what, True)
    if not isinstance(value, bool):
        raise _mismatch(what, key, "boolean", value)
    return value


def opt_object(data: Mapping[str, Any], key: str, what: str) -> Optional[JSONObject]:
    """Open JSON object, copied shallowly and otherwise kept verbatim."""
    value = _get(data, key, what, False)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise _mismatch(what, key, "object", value)
    return dict(value)


def opt_list(data: Mapping[str, Any], key: str, what: str) -> Optional[List[Any]]:
    value = _get(data, key, what, False)
    if value is None:
        return None
    if not isinstance(value, list):
        raise _mismatch(what, key, "array", value)
    return value


def opt_str_list(data: Mapping[str, Any], key: str, what: str) -> Optional[List[str]]:
    items = opt_list(data, key, what)
    if items is None:
        return None
    for item in items:
        if not isinstance(item, str):
            raise _mismatch(what, key, "array of strings", item)
    return list(items)


def opt_float_list(data: Mapping[str, Any], key: str, what: str) -> Optional[List[float]]:
    items = opt_list(data, key, what)
    if items is None:
        return None
    out: List[float] = []
    for item in items:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise _mismatch(what, key, "array of numbers", item)
        out.append(float(item))
    return out


def parse_enum(enum_cls: Type[E], value: Any, what: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise DecodeError(
            f"{what}: unknown {enum_cls.__name__} value {value!r}",
            details={"field": what},
        ) from None


def opt_enum(
    enum_cls: Type[E], data: Mapping[str, Any], key: str, what: str
) -> Optional[E]:
    value = _get(data, key, what, False)
    if value is None:
        return None
    return parse_enum(enum_cls, value, f"{what}.{key}")


def enum_value(value: Optional[Enum]) -> Optional[str]:
    return None if value is None else value.value


__all__ = [
    "JSONValue",
    "JSONObject",
    "compact",
    "expect_object",
    "expect_list",
    "req_str",
    "opt_str",
    "req_int",
    "opt_int",
    "opt_float",
    "req_bool",
    "opt_bool",
    "opt_object",
    "opt_list",
    "opt_str_list",
    "opt_float_list",
    "parse_enum",
    "opt_enum",
    "enum_value",
]
