from __future__ import annotations

import pytest

from fakes import FakeCanvas
from json2visio.builders.context import BuildContext
from json2visio.config import Config


@pytest.fixture
def cfg() -> Config:
    return Config()


@pytest.fixture
def canvas() -> FakeCanvas:
    return FakeCanvas()


@pytest.fixture
def stencil_canvas() -> FakeCanvas:
    """Canvas whose host can open the Basic Shapes stencil with the .vss suffix."""
    return FakeCanvas(library={"Basic Shapes.vss": ["Rectangle", "Ellipse"]})


@pytest.fixture
def ctx(canvas, cfg) -> BuildContext:
    return BuildContext(canvas, cfg)


@pytest.fixture
def page(canvas):
    doc = canvas.create_document("")
    return canvas.first_page(doc)
