from nestcss.render.context import RenderContext, UnresolvedVariable
from nestcss.render.renderer import RenderResult, render, render_document

__all__ = ["render", "render_document", "RenderResult", "RenderContext", "UnresolvedVariable"]
