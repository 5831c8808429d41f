from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..canvas import Canvas, Handle
from ..config import Config
from ..report import ImportReport
from .stencil import TemplateResolver

log = logging.getLogger(__name__)


@dataclass
class BuildContext:
    """State shared by the builders for the duration of one import."""
    canvas: Canvas
    cfg: Config
    identities: Dict[str, Any] = field(default_factory=dict)
    report: ImportReport = field(default_factory=ImportReport)
    resolver: Optional[TemplateResolver] = None
    # id(shape handle) -> {row name: property name} for rows set during this import
    property_rows: Dict[int, Dict[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.resolver is None:
            self.resolver = TemplateResolver(self.canvas, self.cfg)

    def register(self, item_id: Optional[str], handle: Handle) -> None:
        if not item_id:
            return
        if item_id in self.identities:
            log.warning("Duplicate id %r: later object replaces the earlier one", item_id)
        self.identities[item_id] = handle

    def lookup(self, item_id: Optional[str]) -> Optional[Handle]:
        if not item_id:
            return None
        return self.identities.get(item_id)

    def rows_for(self, shape: Handle) -> Dict[str, str]:
        return self.property_rows.setdefault(id(shape), {})

    def discard(self, handle: Handle, label: str) -> None:
        self.property_rows.pop(id(handle), None)
        try:
            self.canvas.delete(handle)
        except Exception as e:
            log.warning("Could not remove partially built %s: %s", label, e)
