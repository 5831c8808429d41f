from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ItemFailure


@dataclass
class ImportReport:
    """
    Outcome of one import. Pure data + string building; only the CLI prints it.
    """
    document_title: Optional[str] = None
    shapes_created: int = 0
    shapes_from_template: int = 0
    shapes_fallback: int = 0
    connectors_created: int = 0
    connectors_skipped: int = 0
    stencils_opened: List[str] = field(default_factory=list)
    stencils_released: int = 0
    failures: List[ItemFailure] = field(default_factory=list)

    def add_failure(self, kind: str, label: str, error: BaseException) -> ItemFailure:
        failure = ItemFailure(kind=kind, label=label, message=str(error) or type(error).__name__)
        self.failures.append(failure)
        return failure

    def failures_of(self, kind: str) -> List[ItemFailure]:
        return [f for f in self.failures if f.kind == kind]

    def text(self) -> str:
        lines = [f"Imported {self.document_title!r}" if self.document_title else "Imported diagram"]
        lines.append(f"  shapes:     {self.shapes_created} created "
                     f"({self.shapes_from_template} from stencil, {self.shapes_fallback} drawn)")
        lines.append(f"  connectors: {self.connectors_created} created, {self.connectors_skipped} skipped")
        if self.stencils_opened:
            lines.append(f"  stencils:   {', '.join(self.stencils_opened)} "
                         f"({self.stencils_released} released)")
        if self.failures:
            kinds = dict.fromkeys(f.kind for f in self.failures)
            by_kind = ", ".join(f"{len(self.failures_of(k))} {k}" for k in kinds)
            lines.append(f"  failures:   {len(self.failures)} ({by_kind})")
            lines.extend(f"    - {f}" for f in self.failures)
        return "\n".join(lines) + "\n"
