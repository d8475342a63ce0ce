"""
Diagram Rendering Boundary

The navigator never interprets diagram source. A renderer turns it into an
artifact (typically SVG); if there is no renderer, or it fails, the escaped
source is shown in a `<pre class="mermaid">` block instead.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

import structlog

logger = structlog.get_logger(__name__)

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
})


class DiagramRenderError(Exception):
    """Renderer could not produce an artifact"""


class DiagramRenderer(Protocol):
    def render(self, source: str) -> str:
        """Return the rendered artifact or raise DiagramRenderError"""
        ...


@dataclass(frozen=True)
class DiagramView:
    """Rendered artifact, or the fallback markup when rendering failed"""
    source: str
    artifact: Optional[str] = None
    fallback: Optional[str] = None
    error: Optional[str] = None
    
    @property
    def rendered(self) -> bool:
        return self.artifact is not None
    
    @property
    def content(self) -> str:
        return self.artifact if self.artifact is not None else (self.fallback or "")


def escape_html(text: str) -> str:
    """Escape &, <, > and double quotes"""
    return text.translate(_HTML_ESCAPES)


def fallback_markup(source: str) -> str:
    return f'<pre class="mermaid">{escape_html(source)}</pre>'


def render_diagram(source: str, renderer: Optional[DiagramRenderer] = None) -> DiagramView:
    """
    Render diagram source, falling back to the raw text.
    
    Args:
        source: Diagram description text
        renderer: Rendering collaborator; None always yields the fallback
        
    Returns:
        DiagramView with `artifact` set on success, `fallback` otherwise
    """
    if renderer is None:
        return DiagramView(source=source, fallback=fallback_markup(source))
    
    try:
        artifact = renderer.render(source)
    except DiagramRenderError as e:
        logger.warning("Diagram rendering failed, showing source", error=str(e))
        return DiagramView(source=source, fallback=fallback_markup(source), error=str(e))
    
    return DiagramView(source=source, artifact=artifact)
