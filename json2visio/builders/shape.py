from __future__ import annotations
import logging
from typing import Optional

from ..canvas import Handle
from ..models import Shape
from .context import BuildContext
from .properties import set_property

log = logging.getLogger(__name__)


class ShapeBuilder:
    @staticmethod
    def build(ctx: BuildContext, page: Handle, shape: Shape) -> Optional[Handle]:
        canvas = ctx.canvas
        label = shape.label or "(unnamed)"
        handle = None
        from_template = False
        try:
            if shape.stencil and shape.master:
                handle = ctx.resolver.resolve(page, shape.stencil, shape.master, shape.x, shape.y)
                from_template = handle is not None
            if handle is None:
                handle = canvas.draw_rectangle(page, shape.x, shape.y,
                                               shape.x + shape.width, shape.y + shape.height)
            if handle is None:
                return None

            if shape.name:
                canvas.set_shape_name(handle, shape.name)
            if shape.text:
                canvas.set_shape_text(handle, shape.text)
            for name, value in shape.properties.items():
                set_property(ctx, handle, name, value, owner=label)
        except Exception as e:
            failure = ctx.report.add_failure("shape", label, e)
            log.warning("Error creating %s", failure)
            if handle is not None:
                ctx.discard(handle, f"shape {label!r}")
            return None

        # Registered only once fully built.
        ctx.register(shape.id, handle)
        report = ctx.report
        report.shapes_created += 1
        if from_template:
            report.shapes_from_template += 1
        else:
            report.shapes_fallback += 1
        return handle
