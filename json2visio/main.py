# json2visio/main.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .builders.document import DocumentBuilder
from .canvas import Canvas
from .config import Config
from .errors import Json2VisioError, SourceReadError
from .models import document_from_json
from .report import ImportReport
from .visio_adapter import VisioCanvas

log = logging.getLogger(__name__)


@dataclass
class ImportResult:
    ok: bool
    report: Optional[ImportReport] = None
    error: Optional[Json2VisioError] = None


def read_source(path: Union[str, Path]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Error reading JSON file {str(path)!r}: {e}") from e


class JsonImportService:
    """
    Entry points for an import. Fatal failures come back as ImportResult.error;
    per-item failures are listed in the report and never flip `ok`.
    """
    def __init__(self, canvas: Canvas, cfg: Optional[Config] = None) -> None:
        self._cfg = cfg or Config()
        self.builder = DocumentBuilder(canvas, self._cfg)

    def import_from_file(self, path: Union[str, Path]) -> ImportResult:
        log.info("Importing %s", path)
        try:
            text = read_source(path)
        except SourceReadError as e:
            return self._failed(e)
        return self.import_from_json(text)

    def import_from_json(self, text: str) -> ImportResult:
        try:
            # Parse fully before touching the canvas.
            document = document_from_json(text)
            report = self.builder.build(document)
        except Json2VisioError as e:
            return self._failed(e)
        return ImportResult(ok=True, report=report)

    @staticmethod
    def _failed(error: Json2VisioError) -> ImportResult:
        log.error("Import failed: %s", error)
        return ImportResult(ok=False, error=error)


def run(cfg: Config, canvas: Optional[Canvas] = None) -> ImportResult:
    if canvas is None:
        canvas = VisioCanvas(visible=cfg.visible)
    service = JsonImportService(canvas, cfg)
    if cfg.source is not None:
        return service.import_from_file(cfg.source)
    return service.import_from_json(cfg.json_text or "")
