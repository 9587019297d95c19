"""
Source du layout — lecture du fichier LAYOUT_PATH (lazy, mis en cache).
Le layout est supposé statique pour la durée d'une session.
"""
import logging

from .config import layout_path

log = logging.getLogger(__name__)

_LAYOUT_CACHE: dict = {}


def load_layout() -> str:
    """Retourne le texte brut du layout, tel quel."""
    path = layout_path()
    key = str(path)
    if key not in _LAYOUT_CACHE:
        _LAYOUT_CACHE[key] = path.read_text(encoding="utf-8")
        log.info("Layout chargé : %s", path)
    return _LAYOUT_CACHE[key]


def reload_cache():
    """Force la relecture du layout (utile en dev)."""
    _LAYOUT_CACHE.clear()
