# json2visio/visio_adapter.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

try:
    import win32com.client  # type: ignore
except Exception:
    win32com = None  # type: ignore

from .canvas import (
    BEGIN,
    OBJTYPE_DYNAMIC,
    VIS_OPEN_DOCKED,
    VIS_SECTION_PROP,
    VIS_TAG_DEFAULT,
    Point,
)
from .errors import HostUnavailableError
from .utils import formula_quote

log = logging.getLogger(__name__)


@dataclass
class PropertyCell:
    shape: Any
    row: str

    @property
    def value_cell(self) -> str:
        return f"Prop.{self.row}"

    @property
    def label_cell(self) -> str:
        return f"Prop.{self.row}.Label"


class VisioCanvas:
    """Canvas on a live Visio instance. All pywin32 lives here."""
    def __init__(self, app: Any = None, visible: bool = True) -> None:
        self._app = app
        self._visible = visible

    def _ensure_app(self):
        if self._app is not None:
            return self._app
        if win32com is None:
            raise HostUnavailableError("pywin32 is required. Install with: pip install pywin32")
        log.info("Connecting to Visio...")
        try:
            app = win32com.client.Dispatch("Visio.Application")
        except Exception as e:
            raise HostUnavailableError(f"Could not start Visio: {e}") from e
        app.Visible = self._visible
        self._app = app
        return app

    # ---------- documents ----------
    def create_document(self, template: str):
        return self._ensure_app().Documents.Add(template or "")

    def first_page(self, doc):
        return doc.Pages.Item(1)

    def set_document_title(self, doc, title: str) -> None:
        doc.Title = title

    def open_documents(self) -> List[Tuple[str, str, Any]]:
        out: List[Tuple[str, str, Any]] = []
        for doc in self._ensure_app().Documents:
            out.append((doc.Name or "", doc.Title or "", doc))
        return out

    def open_stencil(self, name: str):
        return self._ensure_app().Documents.OpenEx(name, VIS_OPEN_DOCKED)

    def close_document(self, doc) -> None:
        doc.Close()

    def lookup_master(self, stencil, master_name: str):
        return stencil.Masters.Item(master_name)

    def resize_to_fit_contents(self, page) -> None:
        page.ResizeToFitContents()

    # ---------- shapes ----------
    def drop(self, page, master, x: float, y: float):
        return page.Drop(master, x, y)

    def draw_rectangle(self, page, x1: float, y1: float, x2: float, y2: float):
        return page.DrawRectangle(x1, y1, x2, y2)

    def set_shape_name(self, shape, name: str) -> None:
        shape.Name = name

    def set_shape_text(self, shape, text: str) -> None:
        shape.Text = text

    def delete(self, shape) -> None:
        shape.Delete()

    def pin(self, shape) -> Point:
        return (shape.CellsU("PinX").ResultIU, shape.CellsU("PinY").ResultIU)

    # ---------- custom properties ----------
    def property_cell(self, shape, row: str) -> Optional[PropertyCell]:
        cell = PropertyCell(shape, row)
        if not shape.CellExistsU(cell.value_cell, 0):
            return None
        return cell

    def add_property_row(self, shape, row: str) -> None:
        shape.AddNamedRow(VIS_SECTION_PROP, row, VIS_TAG_DEFAULT)

    def set_cell_value(self, cell: PropertyCell, text: str) -> None:
        cell.shape.CellsU(cell.value_cell).FormulaU = formula_quote(text)

    def set_cell_label(self, cell: PropertyCell, text: str) -> None:
        cell.shape.CellsU(cell.label_cell).FormulaU = formula_quote(text)

    # ---------- connectors ----------
    def draw_connector(self, page, begin: Point, end: Point):
        return page.DrawLine(begin[0], begin[1], end[0], end[1])

    def make_dynamic(self, connector) -> None:
        connector.CellsU("ObjType").FormulaU = OBJTYPE_DYNAMIC

    def glue(self, connector, end: str, shape) -> None:
        cell = "BeginX" if end == BEGIN else "EndX"
        connector.CellsU(cell).GlueTo(shape.CellsU("PinX"))
