"""Typed field accessors for decoded JSON objects.

Every accessor raises :class:`FredDecodeError` with a serde-like description
(``missing field `seriess```) when a required field is absent or has the wrong
JSON type, so a body that is neither a success shape nor an error envelope is
reported the same way regardless of which endpoint decoded it.
"""

from __future__ import annotations

from collections.abc import Mapping

from .errors import FredDecodeError

JsonObject = dict[str, object]


def _missing(key: str) -> FredDecodeError:
    return FredDecodeError(f"missing field `{key}`")


def _invalid(key: str, expected: str) -> FredDecodeError:
    return FredDecodeError(f"invalid type for field `{key}`: expected {expected}")


def _coerce_int(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _coerce_numeric_id(value: object) -> int | None:
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
        return None
    return _coerce_int(value)


def require_text(payload: Mapping[str, object], key: str) -> str:
    if key not in payload or payload[key] is None:
        raise _missing(key)
    value = payload[key]
    if not isinstance(value, str):
        raise _invalid(key, "a string")
    return value


def optional_text(payload: Mapping[str, object], key: str) -> str | None:
    if payload.get(key) is None:
        return None
    return require_text(payload, key)


def require_int(payload: Mapping[str, object], key: str) -> int:
    if key not in payload or payload[key] is None:
        raise _missing(key)
    value = _coerce_int(payload[key])
    if value is None:
        raise _invalid(key, "an integer")
    return value


def optional_int(payload: Mapping[str, object], key: str) -> int | None:
    if payload.get(key) is None:
        return None
    return require_int(payload, key)


def require_numeric_id(payload: Mapping[str, object], key: str) -> int:
    """Like :func:`require_int`, but also accepts ids sent as digit strings."""

    if key not in payload or payload[key] is None:
        raise _missing(key)
    value = _coerce_numeric_id(payload[key])
    if value is None:
        raise _invalid(key, "an integer id")
    return value


def optional_numeric_id(payload: Mapping[str, object], key: str) -> int | None:
    if payload.get(key) is None:
        return None
    return require_numeric_id(payload, key)


def require_bool(payload: Mapping[str, object], key: str) -> bool:
    if key not in payload or payload[key] is None:
        raise _missing(key)
    value = payload[key]
    if not isinstance(value, bool):
        raise _invalid(key, "a boolean")
    return value


def require_objects(payload: Mapping[str, object], key: str) -> list[JsonObject]:
    if key not in payload or payload[key] is None:
        raise _missing(key)
    raw = payload[key]
    if not isinstance(raw, list):
        raise _invalid(key, "a sequence")
    for item in raw:
        if not isinstance(item, dict):
            raise _invalid(key, "a sequence of objects")
    return raw


def require_texts(payload: Mapping[str, object], key: str) -> tuple[str, ...]:
    if key not in payload or payload[key] is None:
        raise _missing(key)
    raw = payload[key]
    if not isinstance(raw, list) or any(not isinstance(item, str) for item in raw):
        raise _invalid(key, "a sequence of strings")
    return tuple(raw)


def require_object_map(payload: Mapping[str, object], key: str) -> dict[str, JsonObject]:
    if key not in payload or payload[key] is None:
        raise _missing(key)
    raw = payload[key]
    if not isinstance(raw, dict):
        raise _invalid(key, "a map")
    for value in raw.values():
        if not isinstance(value, dict):
            raise _invalid(key, "a map of objects")
    return raw


__all__ = [
    "JsonObject",
    "require_text",
    "optional_text",
    "require_int",
    "optional_int",
    "require_numeric_id",
    "optional_numeric_id",
    "require_bool",
    "require_objects",
    "require_texts",
    "require_object_map",
]
