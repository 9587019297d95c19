"""
Renderer serveur — rendu authoritative (fichier téléchargé) via Jinja2.

Le layout est évalué avec conditions et boucles : chaque itération du bloc
`{% for section in sections %}` est liée aux champs d'une section + son type.

Helpers enregistrés dans l'environnement :
  test   `kind`          → {% if section is kind "cta" %}
  filtre `section_html`  → {{ section | section_html }} (table de fragments partagée)
"""
from jinja2 import DebugUndefined, Environment

from ..core.schemas import EmailConfig
from ..errors import LayoutError
from .fragments import render_section
from .grammar import validate_layout


def _is_kind(section, kind: str) -> bool:
    return getattr(section, "type", None) == kind


def build_environment() -> Environment:
    """
    Environnement Jinja2 : pas d'autoescape (HTML de confiance).
    DebugUndefined : un placeholder inconnu ({{ preheader }}) reste en texte,
    un accès à un attribut d'une valeur indéfinie lève une erreur.
    """
    env = Environment(autoescape=False, undefined=DebugUndefined, keep_trailing_newline=True)
    env.tests["kind"] = _is_kind
    env.filters["section_html"] = render_section
    return env


_ENV = build_environment()


class ServerRenderer:
    """Renderer serveur (implémente le Protocol Renderer)."""

    def __init__(self, env: Environment | None = None):
        self.env = env or _ENV

    def render(self, layout: str, config: EmailConfig) -> str:
        return render_email(layout, config, env=self.env)


def render_email(layout: str, config: EmailConfig, env: Environment | None = None) -> str:
    """
    Évalue le layout pour `config` et retourne le document complet.

    Raises:
        LayoutError: layout mal formé ou binding manquant — aucun rendu partiel
    """
    validate_layout(layout)
    env = env or _ENV
    context = {**config.scalars(), "sections": list(config.sections)}
    try:
        template = env.from_string(layout)
        # render() construit la chaîne complète avant de la retourner
        return template.render(**context)
    except Exception as exc:
        raise LayoutError(f"Rendu du layout impossible : {exc}") from exc
