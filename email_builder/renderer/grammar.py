"""
Grammaire du layout — partagée par le renderer preview et le renderer serveur.

Placeholders scalaires  : {{bgColor}}, {{textColor}}, {{title}}, {{footer}}
Bloc répété (unique)    : {% for section in sections %} … {% endfor %}
Helper d'égalité        : {% if section is kind "cta" %} … {% endif %}

Le bloc répété doit apparaître une seule fois : plusieurs occurrences sont
rejetées (LayoutError) au lieu de ne remplacer que la première.
"""
import logging
import re
from typing import Mapping

from ..errors import LayoutError

log = logging.getLogger(__name__)

SCALAR_NAMES = ("bgColor", "textColor", "title", "footer")

SCALAR_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")
BLOCK_BEGIN    = re.compile(r"\{%-?\s*for\s+section\s+in\s+sections\s*-?%\}")
BLOCK_END      = re.compile(r"\{%-?\s*endfor\s*-?%\}")
# Bloc complet : début → premier endfor (non-greedy, multi-lignes)
BLOCK_PATTERN  = re.compile(BLOCK_BEGIN.pattern + r"[\s\S]*?" + BLOCK_END.pattern)


def count_blocks(layout: str) -> int:
    """Nombre de blocs répétés {% for section in sections %} dans le layout."""
    return len(BLOCK_BEGIN.findall(layout or ""))


def validate_layout(layout: str) -> int:
    """
    Vérifie la précondition « un seul bloc répété ».
    Retourne le nombre de blocs (0 ou 1) ; lève LayoutError au-delà.
    """
    n = count_blocks(layout)
    if n > 1:
        raise LayoutError(f"Le layout contient {n} blocs répétés (1 attendu)")
    if n == 1 and not BLOCK_PATTERN.search(layout):
        raise LayoutError("Bloc répété sans {% endfor %} correspondant")
    if n == 0 and layout:
        log.warning("Layout sans bloc répété — les sections ne seront pas rendues")
    return n


def substitute_scalars(layout: str, values: Mapping[str, str]) -> str:
    """
    Remplace les placeholders scalaires par leur valeur (sans échappement).
    Les placeholders sans correspondance sont laissés intacts.
    """
    if not layout:
        return layout

    def replacer(match):
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return str(values[name])

    return SCALAR_PATTERN.sub(replacer, layout)


def split_block(layout: str) -> tuple[str, str] | None:
    """
    Découpe le layout autour du bloc répété : (avant, après).
    None si le layout ne contient pas de bloc.
    """
    match = BLOCK_PATTERN.search(layout or "")
    if not match:
        return None
    return layout[:match.start()], layout[match.end():]
