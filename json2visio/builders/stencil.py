# json2visio/builders/stencil.py
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from ..canvas import Canvas, Handle
from ..config import Config

log = logging.getLogger(__name__)

# Strategy: (canvas, stencil_name, cfg) -> stencil document or None
Locate = Callable[[Canvas, str, Config], Optional[Handle]]


class StencilStrategy(NamedTuple):
    name: str
    locate: Locate
    opens: bool      # True when a hit is a document this import opened itself


STRATEGIES: List[StencilStrategy] = []


def strategy(name: str, opens: bool = False) -> Callable[[Locate], Locate]:
    def deco(fn: Locate) -> Locate:
        STRATEGIES.append(StencilStrategy(name, fn, opens))
        return fn
    return deco


@strategy("already open")
def find_open_stencil(canvas: Canvas, stencil_name: str, cfg: Config) -> Optional[Handle]:
    # Plain containment, first match wins.
    for name, title, doc in canvas.open_documents():
        if stencil_name in (name or "") or stencil_name in (title or ""):
            return doc
    return None


@strategy("open by name", opens=True)
def open_by_name(canvas: Canvas, stencil_name: str, cfg: Config) -> Optional[Handle]:
    return canvas.open_stencil(stencil_name)


@strategy("open with extension", opens=True)
def open_with_extension(canvas: Canvas, stencil_name: str, cfg: Config) -> Optional[Handle]:
    for ext in cfg.stencil_extensions:
        try:
            return canvas.open_stencil(stencil_name + ext)
        except Exception as e:
            log.debug("Stencil %r not opened: %s", stencil_name + ext, e)
    return None


class TemplateResolver:
    """
    Finds a stencil by trying each strategy in order, then drops the named
    master from it. Never raises: None tells the caller to draw a rectangle.
    """
    def __init__(self, canvas: Canvas, cfg: Config,
                 strategies: Optional[Sequence[StencilStrategy]] = None) -> None:
        self._canvas = canvas
        self._cfg = cfg
        self._strategies = list(STRATEGIES if strategies is None else strategies)
        self.opened: List[Tuple[str, Any]] = []
        # stencil name as requested -> document, for this import
        self._found: Dict[str, Any] = {}

    def find_stencil(self, stencil_name: str) -> Optional[Handle]:
        if stencil_name in self._found:
            return self._found[stencil_name]
        for s in self._strategies:
            try:
                doc = s.locate(self._canvas, stencil_name, self._cfg)
            except Exception as e:
                log.debug("Stencil %r: %s failed: %s", stencil_name, s.name, e)
                continue
            if doc is not None:
                if s.opens and doc not in [d for _, d in self.opened]:
                    self.opened.append((stencil_name, doc))
                self._found[stencil_name] = doc
                log.debug("Stencil %r found (%s)", stencil_name, s.name)
                return doc
        return None

    def resolve(self, page: Handle, stencil_name: str, master_name: str,
                x: float, y: float) -> Optional[Handle]:
        stencil = self.find_stencil(stencil_name)
        if stencil is None:
            log.debug("Could not load stencil %r", stencil_name)
            return None
        try:
            master = self._canvas.lookup_master(stencil, master_name)
            return self._canvas.drop(page, master, x, y)
        except Exception as e:
            log.debug("Could not load master %r from %r: %s", master_name, stencil_name, e)
            return None

    def release(self) -> int:
        released = 0
        for name, doc in self.opened:
            try:
                self._canvas.close_document(doc)
                released += 1
            except Exception as e:
                log.warning("Could not release stencil %r: %s", name, e)
        self.opened.clear()
        self._found.clear()
        return released
