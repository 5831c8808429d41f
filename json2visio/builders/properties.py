from __future__ import annotations
import logging
from typing import Any

from ..canvas import Handle
from ..utils import unique_row_name, value_text
from .context import BuildContext

log = logging.getLogger(__name__)


def set_property(ctx: BuildContext, shape: Handle, name: str, value: Any, owner: str = "") -> bool:
    """Create the custom property row if absent, then set its value and label.

    Repeating the call converges on a single property. A name that sanitizes
    to a row another property already owns on this shape gets a numbered row.
    Failures are recorded in the report and logged; the caller carries on with
    the rest of the shape.
    """
    canvas = ctx.canvas
    rows = ctx.rows_for(shape)
    row = unique_row_name(name, rows)
    try:
        cell = canvas.property_cell(shape, row)
        if cell is None:
            canvas.add_property_row(shape, row)
            cell = canvas.property_cell(shape, row)
            if cell is None:
                raise LookupError(f"row Prop.{row} missing after AddNamedRow")
        canvas.set_cell_value(cell, value_text(value))
        canvas.set_cell_label(cell, name)
        rows[row] = name
    except Exception as e:
        failure = ctx.report.add_failure("property", f"{owner}.{name}" if owner else name, e)
        log.warning("Could not set %s", failure)
        return False
    return True
