"""JSON helpers: serialise values and rebuild typed objects from JSON."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.config import JsonConfig
from selectorkit.errors import DeserializationError

__all__ = ["get_json", "from_json"]

_log = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_CONFIG = JsonConfig()


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _field_values(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Dataclass field values for *cls*, with defaults for keys absent from *data*."""
    values: dict[str, Any] = {}
    missing: list[str] = []
    for f in dataclasses.fields(cls):
        if f.name in data:
            values[f.name] = data[f.name]
        elif f.default is not dataclasses.MISSING:
            values[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            values[f.name] = f.default_factory()
        else:
            missing.append(f.name)
    if missing:
        raise DeserializationError(
            f"Missing fields for {cls.__name__}: {', '.join(missing)}"
        )
    return values


def get_json(obj: Any, config: JsonConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact by default: ``[1, 2, 3]`` becomes ``'[1,2,3]'``.
    Dataclass instances are written as their field dicts, other objects as
    their instance attributes.
    """
    cfg = config or _DEFAULT_CONFIG
    return json.dumps(
        obj,
        indent=cfg.indent,
        separators=cfg.separators,
        sort_keys=cfg.sort_keys,
        ensure_ascii=cfg.ensure_ascii,
        default=_encode_default,
    )


def from_json(cls: type[T], text: str) -> T:
    """Create an instance of *cls* and assign the keys of a JSON object to it.

    The initializer of *cls* is not called; every key of the decoded object
    becomes an attribute of the new instance. Dataclass fields absent from the
    object take their defaults; a missing required field raises
    DeserializationError.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"Invalid JSON for {cls.__name__}: {exc}") from exc
    if not isinstance(data, dict):
        raise DeserializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    attrs = dict(data)
    if dataclasses.is_dataclass(cls):
        attrs.update(_field_values(cls, data))

    instance = cls.__new__(cls)
    for key, value in attrs.items():
        setattr(instance, key, value)
    _log.debug("Restored %s with keys %s", cls.__name__, sorted(data))
    return instance
