from __future__ import annotations
import logging
from typing import Optional

from ..canvas import BEGIN, END, Handle
from ..models import Connector
from .context import BuildContext

log = logging.getLogger(__name__)


class ConnectorBuilder:
    @staticmethod
    def build(ctx: BuildContext, page: Handle, connector: Connector) -> Optional[Handle]:
        src = ctx.lookup(connector.from_shape)
        dst = ctx.lookup(connector.to_shape)
        if src is None or dst is None:
            # Dangling reference (often a shape that failed): skip, no failure.
            log.debug("Skipping connector %s: endpoint not created", connector.label)
            ctx.report.connectors_skipped += 1
            return None

        canvas = ctx.canvas
        handle = None
        try:
            handle = canvas.draw_connector(page, canvas.pin(src), canvas.pin(dst))
            canvas.make_dynamic(handle)
            canvas.glue(handle, BEGIN, src)
            canvas.glue(handle, END, dst)
            if connector.text:
                canvas.set_shape_text(handle, connector.text)
        except Exception as e:
            failure = ctx.report.add_failure("connector", connector.label, e)
            log.warning("Error creating %s", failure)
            if handle is not None:
                ctx.discard(handle, f"connector {connector.label}")
            return None

        ctx.register(connector.id, handle)
        ctx.report.connectors_created += 1
        return handle
