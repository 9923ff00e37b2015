"""Field paths for structured documents, checked against class definitions."""

import dataclasses
import types
import typing
from typing import Any, Optional, Union


def to_camel_case(name: str) -> str:
    """Turn a snake_case name into camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _unwrap_optional(tp: Any) -> Any:
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _has_fields(tp: Any) -> bool:
    return isinstance(tp, type) and (
        dataclasses.is_dataclass(tp) or bool(getattr(tp, "__annotations__", None))
    )


def _field_types(cls: type) -> dict[str, Any]:
    if dataclasses.is_dataclass(cls):
        return {field.name: field.type for field in dataclasses.fields(cls)}
    annotations: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        annotations.update(vars(klass).get("__annotations__", {}))
    return annotations


def _segments(names: tuple) -> list[str]:
    parts: list[str] = []
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"field path must be a string, not {type(name).__name__}")
        pieces = name.split(".")
        if any(not piece for piece in pieces):
            raise ValueError(f"empty segment in field path {name!r}")
        parts.extend(pieces)
    return parts


def _check(cls: type, parts: list[str]) -> None:
    current: Optional[type] = cls
    for part in parts:
        if current is None:
            return
        known = _field_types(current)
        if part not in known:
            raise ValueError(f"{current.__name__} has no field {part!r}")
        nxt = _unwrap_optional(known[part])
        current = nxt if _has_fields(nxt) else None


def _split_args(args: tuple) -> tuple[Optional[type], tuple]:
    if args and isinstance(args[0], type):
        return args[0], args[1:]
    return None, args


def path(*args: Any) -> str:
    """Build a dotted field path, optionally checked against a class given first."""
    cls, names = _split_args(args)
    parts = _segments(names)
    if not parts:
        raise ValueError("a field path needs at least one field name")
    if cls is not None:
        _check(cls, parts)
    return ".".join(parts)


def paths(*args: Any) -> list[str]:
    """Build several field paths, optionally checked against a class given first."""
    cls, names = _split_args(args)
    if not names:
        raise ValueError("at least one field name is required")
    prefix = (cls,) if cls is not None else ()
    return [path(*prefix, name) for name in names]


def _camel(dotted: str) -> str:
    return ".".join(to_camel_case(part) for part in dotted.split("."))


def path_camel_case(*args: Any) -> str:
    """Like path, with every segment converted to camelCase."""
    return _camel(path(*args))


def paths_camel_case(*args: Any) -> list[str]:
    """Like paths, with every segment converted to camelCase."""
    return [_camel(item) for item in paths(*args)]