# json2visio/builders/document.py
from __future__ import annotations
import logging
from typing import Any, Dict

from ..canvas import Canvas
from ..config import Config
from ..errors import DocumentAcquisitionError, Json2VisioError
from ..models import Document
from ..report import ImportReport
from .connector import ConnectorBuilder
from .context import BuildContext
from .shape import ShapeBuilder

log = logging.getLogger(__name__)


class DocumentBuilder:
    """
    Builds one Visio document from a Document model.

    Shapes are all built before any connector so that connector endpoints can be
    looked up by id regardless of the order they were declared in.
    """
    def __init__(self, canvas: Canvas, cfg: Config) -> None:
        self._canvas = canvas
        self._cfg = cfg
        self.identities: Dict[str, Any] = {}

    def _acquire(self, template: str):
        what = f"document from template {template!r}" if template else "blank document"
        try:
            doc = self._canvas.create_document(template)
        except Json2VisioError:
            raise
        except Exception as e:
            raise DocumentAcquisitionError(f"Could not create {what}: {e}") from e
        try:
            page = self._canvas.first_page(doc)
        except Exception as e:
            raise DocumentAcquisitionError(f"Could not get first page of {what}: {e}") from e
        return doc, page

    def build(self, document: Document) -> ImportReport:
        doc, page = self._acquire(document.template or "")

        self.identities.clear()
        ctx = BuildContext(self._canvas, self._cfg, identities=self.identities)
        report = ctx.report

        if document.name:
            try:
                self._canvas.set_document_title(doc, document.name)
                report.document_title = document.name
            except Exception as e:
                log.warning("Could not set document title: %s", report.add_failure("document", "title", e))

        try:
            for s in document.shapes:
                ShapeBuilder.build(ctx, page, s)

            for c in document.connectors:
                ConnectorBuilder.build(ctx, page, c)

            try:
                self._canvas.resize_to_fit_contents(page)
            except Exception as e:
                log.warning("Could not resize page: %s", report.add_failure("document", "page size", e))
        finally:
            report.stencils_opened = [name for name, _ in ctx.resolver.opened]
            if not self._cfg.keep_stencils:
                report.stencils_released = ctx.resolver.release()

        log.info("Built %d shape(s), %d connector(s), %d failure(s)",
                 report.shapes_created, report.connectors_created, len(report.failures))
        return report
