"""
json2visio package – JSON → Visio diagram importer.

Responsibilities:
 - COM access isolated in visio_adapter.py, behind the Canvas protocol (canvas.py)
 - Pure data models and JSON parsing in models.py
 - Per-item construction in builders/* (shape, connector, properties, stencil)
 - Document-level orchestration in builders/document.py
 - Import entry points in main.py, CLI wiring in cli.py
"""
__all__ = [
    "builders",
    "canvas",
    "cli",
    "config",
    "errors",
    "main",
    "models",
    "report",
    "utils",
    "visio_adapter",
]
