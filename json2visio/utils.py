# json2visio/utils.py
from __future__ import annotations
import json
import re
from typing import Any, Dict

# Letters (any script), digits and underscore are kept.
_ROW_UNSAFE = re.compile(r"[^\w]+")

def formula_quote(text: str) -> str:
    """Wrap text as a ShapeSheet string literal (embedded quotes are doubled)."""
    if text is None:
        return '""'
    return '"' + str(text).replace('"', '""') + '"'

def value_text(value: Any) -> str:
    # Values are stored as text; type information is not preserved.
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)

def sanitize_row_name(name: str) -> str:
    s = _ROW_UNSAFE.sub("_", (name or "").strip())
    if not s:
        return "Property"
    if s[0].isdigit():
        s = "P_" + s
    return s

def unique_row_name(name: str, taken: Dict[str, str]) -> str:
    """Row name for `name`, suffixed (_2, _3, ...) when another property already owns it.

    `taken` maps row name -> property name for rows already used on one shape.
    """
    base = sanitize_row_name(name)
    row, n = base, 2
    while row in taken and taken[row] != name:
        row = f"{base}_{n}"
        n += 1
    return row
