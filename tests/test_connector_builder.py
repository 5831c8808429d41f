"""Tests for ConnectorBuilder: id lookup, gluing, silent skip, failure isolation."""
from __future__ import annotations

import pytest

from json2visio.builders.connector import ConnectorBuilder
from json2visio.models import Connector


@pytest.fixture
def pair(ctx, canvas, page):
    a = canvas.draw_rectangle(page, 0, 0, 1, 0.5)
    b = canvas.draw_rectangle(page, 2, 0, 3, 0.5)
    ctx.register("a", a)
    ctx.register("b", b)
    return a, b


class TestBuild:
    def test_glues_both_ends(self, ctx, page, pair):
        a, b = pair
        conn = ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="b"))
        assert conn.glued == {"begin": a, "end": b}
        assert conn.dynamic is True

    def test_initial_geometry_runs_pin_to_pin(self, ctx, canvas, page, pair):
        ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="b"))
        [(_, begin, end)] = canvas.ops("draw_connector")
        assert begin == (0.5, 0.25)
        assert end == (2.5, 0.25)

    def test_dynamic_before_glue(self, ctx, canvas, page, pair):
        ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="b"))
        ops = [name for name, _ in canvas.calls if name in ("make_dynamic", "glue")]
        assert ops == ["make_dynamic", "glue", "glue"]

    def test_text(self, ctx, page, pair):
        conn = ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="b", text="flows to"))
        assert conn.text == "flows to"

    def test_registers_own_id(self, ctx, page, pair):
        conn = ConnectorBuilder.build(ctx, page, Connector(id="c1", from_shape="a", to_shape="b"))
        assert ctx.identities["c1"] is conn

    def test_connector_can_target_a_registered_connector(self, ctx, page, pair):
        first = ConnectorBuilder.build(ctx, page, Connector(id="c1", from_shape="a", to_shape="b"))
        second = ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="c1"))
        assert second.glued["end"] is first

    def test_counts(self, ctx, page, pair):
        ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="b"))
        ConnectorBuilder.build(ctx, page, Connector(from_shape="b", to_shape="a"))
        assert ctx.report.connectors_created == 2


class TestSilentSkip:
    @pytest.mark.parametrize("src, dst", [("a", "zz"), ("zz", "b"), (None, "b"), ("a", None), ("", "")])
    def test_dangling_reference_is_skipped(self, ctx, canvas, page, pair, src, dst):
        assert ConnectorBuilder.build(ctx, page, Connector(from_shape=src, to_shape=dst)) is None
        assert canvas.ops("draw_connector") == []
        assert ctx.report.failures == []
        assert ctx.report.connectors_skipped == 1

    def test_skip_is_not_logged_as_warning(self, ctx, page, pair, caplog):
        ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="missing"))
        assert not [r for r in caplog.records if r.levelname == "WARNING"]


class TestFailureIsolation:
    def test_glue_failure_reported_by_endpoints(self, ctx, canvas, page, pair):
        canvas.fail_on("glue")
        assert ConnectorBuilder.build(ctx, page, Connector(id="c1", from_shape="a", to_shape="b")) is None
        [failure] = ctx.report.failures
        assert (failure.kind, failure.label) == ("connector", "a -> b")

    def test_failed_connector_dropped(self, ctx, canvas, page, pair):
        canvas.fail_on("make_dynamic")
        ConnectorBuilder.build(ctx, page, Connector(id="c1", from_shape="a", to_shape="b"))
        assert "c1" not in ctx.identities
        assert page.connectors == []
        assert ctx.report.connectors_created == 0

    def test_draw_failure_needs_no_cleanup(self, ctx, canvas, page, pair):
        canvas.fail_on("draw_connector")
        ConnectorBuilder.build(ctx, page, Connector(from_shape="a", to_shape="b"))
        assert canvas.ops("delete") == []
