from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path


@dataclass
class Config:
    source: Optional[Path] = None        # FILE positional
    json_text: Optional[str] = None      # --json
    visible: bool = True                 # --hidden turns it off
    keep_stencils: bool = False          # --keep-stencils
    stencil_extensions: List[str] = field(default_factory=lambda: [".vss"])  # --stencil-ext
    report: bool = True                  # --no-report turns it off
    log_level: str = "WARNING"           # --log-level / -v
