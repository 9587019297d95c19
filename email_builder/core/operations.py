"""
Opérations sur la liste ordonnée des sections.

Fonctions pures : chaque opération retourne une NOUVELLE liste, l'entrée
n'est jamais modifiée. L'appelant (EmailBuilder) adopte le résultat comme
nouvel état courant.

  add_section(sections, kind)                      -> list
  update_section(sections, section_id, field, value) -> list
  remove_section(sections, section_id)             -> list
  reorder_sections(sections, from_index, to_index) -> list
"""
import uuid
from typing import Iterable, List, Optional, Sequence

from ..sections import BaseSection, SECTION_REGISTRY

# Champs qu'un update peut remplacer ; id et type sont figés à la création
UPDATABLE_FIELDS = ("content", "url")
PROTECTED_FIELDS = ("id", "type")


def new_section_id(existing: Iterable[str] = ()) -> str:
    """Génère un jeton d'identité absent de `existing` (uuid4)."""
    taken = set(existing)
    sid = str(uuid.uuid4())
    while sid in taken:
        sid = str(uuid.uuid4())
    return sid


def add_section(sections: Sequence[BaseSection], kind: str) -> List[BaseSection]:
    """
    Ajoute une section `kind` en fin de liste, avec les valeurs par défaut du type.

    Args:
        sections: Liste courante
        kind:     "text" | "image" | "cta"

    Returns:
        Nouvelle liste (len + 1), la nouvelle section en dernier
    """
    section_cls = SECTION_REGISTRY.get(kind)
    if section_cls is None:
        raise ValueError(f"Type de section inconnu : {kind!r}. Types : {list(SECTION_REGISTRY)}")
    section = section_cls(id=new_section_id(s.id for s in sections))
    return [*sections, section]


def update_section(
    sections: Sequence[BaseSection],
    section_id: str,
    field: str,
    value: str,
) -> List[BaseSection]:
    """
    Remplace `field` par `value` sur la section `section_id`.
    Id absent → copie inchangée (no-op silencieux).
    """
    if field in PROTECTED_FIELDS:
        raise ValueError(f"Champ non modifiable : {field!r}")
    if field not in UPDATABLE_FIELDS:
        raise ValueError(f"Champ inconnu : {field!r}. Champs : {list(UPDATABLE_FIELDS)}")

    updated = []
    for sec in sections:
        if sec.id == section_id:
            # Revalidation complète plutôt que model_copy (qui ne valide pas)
            sec = type(sec).model_validate({**sec.model_dump(), field: value})
        updated.append(sec)
    return updated


def remove_section(sections: Sequence[BaseSection], section_id: str) -> List[BaseSection]:
    """Retire la section `section_id` ; no-op si absente."""
    return [sec for sec in sections if sec.id != section_id]


def reorder_sections(
    sections: Sequence[BaseSection],
    from_index: int,
    to_index: Optional[int],
) -> List[BaseSection]:
    """
    Déplace l'élément `from_index` vers `to_index` (les éléments intermédiaires glissent).
    `to_index=None` → drag annulé, liste inchangée.
    """
    items = list(sections)
    if to_index is None:
        return items
    size = len(items)
    for name, idx in (("from_index", from_index), ("to_index", to_index)):
        if not 0 <= idx < size:
            raise IndexError(f"{name}={idx} hors bornes [0, {size})")
    moved = items.pop(from_index)
    items.insert(to_index, moved)
    return items
