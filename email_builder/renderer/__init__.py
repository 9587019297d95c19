"""Renderers — preview (regex, local) et serveur (Jinja2, authoritative)."""
from .base import Renderer
from .fragments import render_section, render_sections
from .grammar import count_blocks, validate_layout, substitute_scalars, split_block
from .preview import PreviewRenderer, render_preview
from .server import ServerRenderer, render_email, build_environment

__all__ = [
    "Renderer",
    "render_section", "render_sections",
    "count_blocks", "validate_layout", "substitute_scalars", "split_block",
    "PreviewRenderer", "render_preview",
    "ServerRenderer", "render_email", "build_environment",
]
