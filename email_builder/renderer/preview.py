"""
Renderer preview — rendu local, synchrone, approximatif.

Pas de moteur de template : substitution des placeholders scalaires par regex
puis remplacement du bloc répété (et de tout le markup de contrôle qu'il
contient) par la concaténation des fragments de sections. Le markup de contrôle
hors du bloc est laissé tel quel.
"""
from ..core.schemas import EmailConfig
from .fragments import render_sections
from .grammar import split_block, substitute_scalars, validate_layout


class PreviewRenderer:
    """Renderer preview (implémente le Protocol Renderer)."""

    def render(self, layout: str, config: EmailConfig) -> str:
        return render_preview(layout, config)


def render_preview(layout: str, config: EmailConfig) -> str:
    """
    Génère le HTML de prévisualisation.

    Args:
        layout: Source du layout (vide tant qu'il n'est pas chargé)
        config: Email courant

    Returns:
        HTML (non échappé — layout et contenus sont considérés de confiance)
    """
    if not layout:
        return ""
    validate_layout(layout)

    scalars = config.scalars()
    parts = split_block(layout)
    if parts is None:
        return substitute_scalars(layout, scalars)

    before, after = parts
    # Les scalaires sont substitués hors du bloc uniquement : le contenu des
    # sections est inséré tel quel
    return (
        substitute_scalars(before, scalars)
        + render_sections(config.sections)
        + substitute_scalars(after, scalars)
    )
