from __future__ import annotations
import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import DocumentParseError

DEFAULT_STENCIL = "Basic Shapes"
DEFAULT_MASTER = "Rectangle"
DEFAULT_CONNECTOR_TYPE = "Dynamic connector"

_MISSING = object()

@dataclass
class Shape:
    id: Optional[str] = None
    name: Optional[str] = None
    text: Optional[str] = None
    x: float = 0.0
    y: float = 0.0
    width: float = 1.0           # rectangle fallback only
    height: float = 0.5          # rectangle fallback only
    stencil: Optional[str] = DEFAULT_STENCIL
    master: Optional[str] = DEFAULT_MASTER
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return self.name or self.id or ""

@dataclass
class Connector:
    from_shape: Optional[str] = None     # JSON "fromShape"
    to_shape: Optional[str] = None       # JSON "toShape"
    id: Optional[str] = None
    text: Optional[str] = None
    connector_type: Optional[str] = DEFAULT_CONNECTOR_TYPE  # descriptive only

    @property
    def label(self) -> str:
        return f"{self.from_shape} -> {self.to_shape}"

@dataclass
class Document:
    name: Optional[str] = None
    template: Optional[str] = ""
    shapes: List[Shape] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)


# ---------- JSON → models ----------

def _string(obj: Dict[str, Any], key: str, path: str, default: Optional[str] = None) -> Optional[str]:
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        return default
    if value is None:
        return None      # explicit null means "empty", not "default"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return str(value)
    raise DocumentParseError(f"{path}.{key}: expected a string, got {type(value).__name__}")

def _number(obj: Dict[str, Any], key: str, path: str, default: float) -> float:
    value = obj.get(key)
    if value is None:
        return default
    # numeric text ("1.5") is read as a number
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            number = math.nan
        if not math.isfinite(number):
            raise DocumentParseError(f"{path}.{key}: expected a number, got {value!r}")
        return number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DocumentParseError(f"{path}.{key}: expected a number, got {type(value).__name__}")
    return float(value)

def _object(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DocumentParseError(f"{path}: expected an object, got {type(value).__name__}")
    return value

def _array(obj: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DocumentParseError(f"{path}{key}: expected an array, got {type(value).__name__}")
    return value

def shape_from_dict(raw: Any, path: str) -> Shape:
    obj = _object(raw, path)
    props = obj.get("properties")
    return Shape(
        id=_string(obj, "id", path),
        name=_string(obj, "name", path),
        text=_string(obj, "text", path),
        x=_number(obj, "x", path, 0.0),
        y=_number(obj, "y", path, 0.0),
        width=_number(obj, "width", path, 1.0),
        height=_number(obj, "height", path, 0.5),
        stencil=_string(obj, "stencil", path, DEFAULT_STENCIL),
        master=_string(obj, "master", path, DEFAULT_MASTER),
        properties={} if props is None else dict(_object(props, f"{path}.properties")),
    )

def connector_from_dict(raw: Any, path: str) -> Connector:
    obj = _object(raw, path)
    return Connector(
        id=_string(obj, "id", path),
        from_shape=_string(obj, "fromShape", path),
        to_shape=_string(obj, "toShape", path),
        text=_string(obj, "text", path),
        connector_type=_string(obj, "connectorType", path, DEFAULT_CONNECTOR_TYPE),
    )

def document_from_dict(raw: Any) -> Document:
    obj = _object(raw, "document")
    return Document(
        name=_string(obj, "name", "document"),
        template=_string(obj, "template", "document", "") or "",
        shapes=[shape_from_dict(s, f"shapes[{i}]") for i, s in enumerate(_array(obj, "shapes", ""))],
        connectors=[connector_from_dict(c, f"connectors[{i}]")
                    for i, c in enumerate(_array(obj, "connectors", ""))],
    )

def document_from_json(text: str) -> Document:
    try:
        raw = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise DocumentParseError(f"Invalid JSON format: {e}") from e
    return document_from_dict(raw)
