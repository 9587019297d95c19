"""
Protocol Renderer — interface commune aux renderers (preview, serveur).
"""
from typing import Protocol, runtime_checkable

from ..core.schemas import EmailConfig


@runtime_checkable
class Renderer(Protocol):
    def render(self, layout: str, config: EmailConfig) -> str: ...
