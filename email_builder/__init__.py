"""
Email Template Maker — composition d'emails par sections + double rendu HTML.

Usage (session d'édition):
    >>> from email_builder import EmailBuilder
    >>> builder = EmailBuilder(layout=layout_html)
    >>> sec = builder.add_section("cta")
    >>> builder.update_section(sec.id, "url", "https://example.com")
    >>> html = builder.preview()

Usage (fonctions pures + rendu serveur):
    >>> from email_builder import EmailConfig, add_section, render_email
    >>> config = EmailConfig(sections=add_section([], "text"))
    >>> html = render_email(layout_html, config)
"""

from .sections import (
    BaseSection, TextSection, ImageSection, CTASection,
    SectionUnion, SECTION_KINDS,
)
from .core import (
    EmailConfig, default_config,
    add_section, update_section, remove_section, reorder_sections,
)
from .renderer import (
    render_section, render_sections,
    PreviewRenderer, render_preview,
    ServerRenderer, render_email,
)
from .errors import LayoutError, BackendError
from .client import BackendClient
from .builder import EmailBuilder

__version__ = "1.0.0"

__all__ = [
    # sections
    "BaseSection", "TextSection", "ImageSection", "CTASection",
    "SectionUnion", "SECTION_KINDS",
    # modèle + opérations
    "EmailConfig", "default_config",
    "add_section", "update_section", "remove_section", "reorder_sections",
    # rendu
    "render_section", "render_sections",
    "PreviewRenderer", "render_preview",
    "ServerRenderer", "render_email",
    # session
    "EmailBuilder", "BackendClient",
    "LayoutError", "BackendError",
]
