"""
Canvas protocol: the operation set the builders need from a diagramming host.

`VisioCanvas` (visio_adapter.py) is the production implementation; the test
suite substitutes a recording double. Handles are opaque to the builders.
"""
from __future__ import annotations
from typing import Any, Iterable, Optional, Protocol, Tuple

Handle = Any
Point = Tuple[float, float]

# Visio automation constants (Visio type library values)
VIS_SECTION_PROP = 243        # visSectionProp
VIS_TAG_DEFAULT = 0           # visTagDefault
VIS_OPEN_DOCKED = 4           # visOpenDocked
OBJTYPE_DYNAMIC = "3"         # ObjType formula for routable connectors

BEGIN = "begin"
END = "end"


class Canvas(Protocol):
    # ---------- documents ----------
    def create_document(self, template: str) -> Handle: ...
    def first_page(self, doc: Handle) -> Handle: ...
    def set_document_title(self, doc: Handle, title: str) -> None: ...
    def open_documents(self) -> Iterable[Tuple[str, str, Handle]]: ...
    def open_stencil(self, name: str) -> Handle: ...
    def close_document(self, doc: Handle) -> None: ...
    def lookup_master(self, stencil: Handle, master_name: str) -> Handle: ...
    def resize_to_fit_contents(self, page: Handle) -> None: ...

    # ---------- shapes ----------
    def drop(self, page: Handle, master: Handle, x: float, y: float) -> Handle: ...
    def draw_rectangle(self, page: Handle, x1: float, y1: float, x2: float, y2: float) -> Handle: ...
    def set_shape_name(self, shape: Handle, name: str) -> None: ...
    def set_shape_text(self, shape: Handle, text: str) -> None: ...
    def delete(self, shape: Handle) -> None: ...
    def pin(self, shape: Handle) -> Point: ...

    # ---------- custom properties ----------
    def property_cell(self, shape: Handle, row: str) -> Optional[Handle]: ...
    def add_property_row(self, shape: Handle, row: str) -> None: ...
    def set_cell_value(self, cell: Handle, text: str) -> None: ...
    def set_cell_label(self, cell: Handle, text: str) -> None: ...

    # ---------- connectors ----------
    def draw_connector(self, page: Handle, begin: Point, end: Point) -> Handle: ...
    def make_dynamic(self, connector: Handle) -> None: ...
    def glue(self, connector: Handle, end: str, shape: Handle) -> None: ...
