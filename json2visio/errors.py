# json2visio/errors.py
from __future__ import annotations
from dataclasses import dataclass


class Json2VisioError(Exception):
    """Base class for failures that abort a whole import."""


class SourceReadError(Json2VisioError):
    pass


class DocumentParseError(Json2VisioError):
    pass


class DocumentAcquisitionError(Json2VisioError):
    pass


class HostUnavailableError(Json2VisioError):
    pass


@dataclass
class ItemFailure:
    kind: str       # shape | connector | property | document
    label: str      # shape name/id, "from -> to", "shape.prop"
    message: str

    def __str__(self) -> str:
        return f"{self.kind} {self.label!r}: {self.message}"
