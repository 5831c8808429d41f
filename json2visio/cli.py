from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .main import run


def _csv_or_multi(values: List[str]) -> List[str]:
    out: List[str] = []
    for v in values:
        if "," in v:
            out.extend(x.strip() for x in v.split(",") if x.strip())
        else:
            s = v.strip()
            if s:
                out.append(s)
    return out


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="json2visio",
        description="Build a Visio diagram from a JSON description of shapes and connectors.",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("source", nargs="?", type=Path, default=None,
                     help="JSON file to import.")
    src.add_argument("--json", dest="json_text", type=str, default=None,
                     help="JSON text to import instead of a file.")
    p.add_argument("--stencil-ext", action="append", default=[],
                   metavar="EXT[,EXT...]",
                   help="Extensions tried when a stencil does not open by name (repeat or CSV; default .vss).")
    p.add_argument("--keep-stencils", action="store_true",
                   help="Leave stencils opened during the import open afterwards.")
    p.add_argument("--hidden", action="store_true",
                   help="Do not make the Visio window visible.")
    p.add_argument("--no-report", action="store_true",
                   help="Do not print the import summary.")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Shorthand for --log-level INFO.")
    p.add_argument("--log-level", type=str, default=None,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default WARNING).")
    return p


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    cfg = Config(
        source=ns.source,
        json_text=ns.json_text,
        visible=not ns.hidden,
        keep_stencils=ns.keep_stencils,
        stencil_extensions=_csv_or_multi(ns.stencil_ext) or [".vss"],
        report=not ns.no_report,
        log_level=ns.log_level or ("INFO" if ns.verbose else "WARNING"),
    )
    configure_logging(cfg.log_level)

    result = run(cfg)
    if not result.ok:
        print(f"json2visio: {result.error}", file=sys.stderr)
        return 1
    if cfg.report and result.report is not None:
        sys.stdout.write(result.report.text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
