"""Panel primitives: scrollable text viewports and single-line editors."""

from .line_edit import LineEditor
from .panel import Panel, PanelPositionError

__all__ = ["LineEditor", "Panel", "PanelPositionError"]
