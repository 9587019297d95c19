"""
Fragments HTML par type de section — table partagée par les deux renderers
(preview et serveur), pour limiter la divergence entre les deux rendus.
"""
from typing import Sequence

from ..sections import BaseSection, DEFAULT_CTA_LABEL

_BLOCK_STYLE = "margin-bottom:1rem;"
_BUTTON_STYLE = (
    "display:inline-block; padding:0.75rem 1.25rem; background:#007bff; "
    "color:#fff; text-decoration:none; border-radius:4px;"
)


def render_text(sec: BaseSection) -> str:
    return f'<div style="{_BLOCK_STYLE}">{sec.content or ""}</div>'


def render_image(sec: BaseSection) -> str:
    # URL vide → <img src=""> (image cassée), jamais de src absent
    return f'<div style="{_BLOCK_STYLE}"><img src="{sec.url or ""}" style="max-width:100%;" /></div>'


def render_cta(sec: BaseSection) -> str:
    return f"""<div style="text-align:center; {_BLOCK_STYLE}">
  <a href="{sec.url or "#"}" style="{_BUTTON_STYLE}">
    {sec.content or DEFAULT_CTA_LABEL}
  </a>
</div>"""


_RENDERERS = {
    "text":  render_text,
    "image": render_image,
    "cta":   render_cta,
}


def render_section(sec: BaseSection) -> str:
    """Dispatch vers le fragment du type ; type inconnu → chaîne vide."""
    renderer = _RENDERERS.get(sec.type)
    if renderer is None:
        return ""
    return renderer(sec)


def render_sections(sections: Sequence[BaseSection]) -> str:
    """Concatène les fragments dans l'ordre des sections (séparés par \\n)."""
    return "\n".join(render_section(sec) for sec in sections)
