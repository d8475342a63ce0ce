"""
Schema Diagram Module
"""
from .builder import build_er_diagram
from .provider import (
    DiagramRenderer,
    DiagramRenderError,
    DiagramView,
    escape_html,
    render_diagram,
)

__all__ = [
    "build_er_diagram",
    "DiagramRenderer",
    "DiagramRenderError",
    "DiagramView",
    "escape_html",
    "render_diagram",
]
