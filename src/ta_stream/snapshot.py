"""
State Snapshots

Converts an indicator (including composites and pipelines) to plain,
JSON-compatible data and back. Indicator state is made of plain values,
numpy buffers, deques and nested ta_stream objects, so the conversion walks
instance attributes without any per-indicator code.

Snapshots record the package version. Restoring a snapshot from another
version logs a warning; compatibility across versions is not guaranteed.
"""

import importlib
import json
import logging
from collections import deque
from typing import Any, Dict

import numpy as np

from .base import Indicator
from .errors import SnapshotError

logger = logging.getLogger(__name__)

_PACKAGE = __name__.split(".")[0]


def _class_path(cls: type) -> str:
    return f"{cls.__module__}:{cls.__qualname__}"


def _resolve(path: str) -> type:
    module_name, _, qualname = path.partition(":")
    if module_name != _PACKAGE and not module_name.startswith(_PACKAGE + "."):
        raise SnapshotError(f"Refusing to restore non-{_PACKAGE} type: {path}")
    try:
        target: Any = importlib.import_module(module_name)
        for part in qualname.split("."):
            target = getattr(target, part)
    except (ImportError, AttributeError) as e:
        raise SnapshotError(f"Unknown snapshot type: {path}") from e
    if not isinstance(target, type):
        raise SnapshotError(f"Snapshot type is not a class: {path}")
    return target


def _encode(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, np.ndarray):
        return {"__ndarray__": value.tolist()}
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, deque):
        return {"__deque__": [_encode(v) for v in value], "maxlen": value.maxlen}
    if isinstance(value, tuple):
        if hasattr(value, "_fields"):
            return {"__namedtuple__": _class_path(type(value)), "values": [_encode(v) for v in value]}
        return {"__tuple__": [_encode(v) for v in value]}
    if isinstance(value, list):
        return [_encode(v) for v in value]
    if isinstance(value, dict):
        return {"__mapping__": {str(k): _encode(v) for k, v in value.items()}}
    if isinstance(value, logging.Logger):
        return {"__logger__": value.name}
    if type(value).__module__.split(".")[0] == _PACKAGE:
        return {
            "__object__": _class_path(type(value)),
            "state": {k: _encode(v) for k, v in vars(value).items()},
        }
    raise SnapshotError(f"Cannot snapshot value of type {type(value).__name__}")


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return [_decode(v) for v in value]
    if not isinstance(value, dict):
        return value

    if "__ndarray__" in value:
        return np.array(value["__ndarray__"], dtype=np.float64)
    if "__deque__" in value:
        return deque((_decode(v) for v in value["__deque__"]), maxlen=value.get("maxlen"))
    if "__namedtuple__" in value:
        return _resolve(value["__namedtuple__"])(*(_decode(v) for v in value["values"]))
    if "__tuple__" in value:
        return tuple(_decode(v) for v in value["__tuple__"])
    if "__mapping__" in value:
        return {k: _decode(v) for k, v in value["__mapping__"].items()}
    if "__logger__" in value:
        return logging.getLogger(value["__logger__"])
    if "__object__" in value:
        cls = _resolve(value["__object__"])
        obj = cls.__new__(cls)
        obj.__dict__.update({k: _decode(v) for k, v in value["state"].items()})
        return obj

    raise SnapshotError(f"Unrecognized snapshot node: {sorted(value)}")


def to_snapshot(indicator: Indicator) -> Dict[str, Any]:
    """
    Capture the full state of an indicator as plain data

    Args:
        indicator: Any ta_stream indicator, fed or not

    Returns:
        Dictionary of JSON-compatible values
    """
    from . import __version__

    return {"version": __version__, "indicator": _encode(indicator)}


def from_snapshot(snapshot: Dict[str, Any]) -> Indicator:
    """
    Rebuild an indicator from ``to_snapshot`` output

    The restored indicator continues exactly where the captured one was.

    Raises:
        SnapshotError: If the snapshot is malformed or names foreign types
    """
    from . import __version__

    if not isinstance(snapshot, dict) or "indicator" not in snapshot:
        raise SnapshotError("Snapshot must be a mapping with an 'indicator' entry")

    version = snapshot.get("version")
    if version != __version__:
        logger.warning(f"Restoring snapshot from version {version} with {_PACKAGE} {__version__}")

    indicator = _decode(snapshot["indicator"])
    if not isinstance(indicator, Indicator):
        raise SnapshotError(f"Snapshot does not contain an indicator: {type(indicator).__name__}")
    return indicator


def dumps(indicator: Indicator) -> str:
    """Serialize an indicator's state to a JSON string"""
    return json.dumps(to_snapshot(indicator))


def loads(text: str) -> Indicator:
    """Restore an indicator from a ``dumps`` string"""
    return from_snapshot(json.loads(text))


__all__ = [
    "to_snapshot",
    "from_snapshot",
    "dumps",
    "loads",
]
