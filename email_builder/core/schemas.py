"""
Schémas Pydantic pour email_builder.
Structure : EmailConfig → sections (ordonnées) → Section (text | image | cta)

Le format JSON échangé avec le frontend utilise les noms camelCase
(bgColor, textColor) — ce sont aussi les noms des placeholders du layout.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..sections import SectionUnion

DEFAULT_BG_COLOR   = "#ffffff"
DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_TITLE      = "Title"
DEFAULT_FOOTER     = "© 2025 My Company"


class EmailConfig(BaseModel):
    """Email en cours de composition (champs scalaires + sections ordonnées)."""
    model_config = ConfigDict(populate_by_name=True)

    bg_color: str = Field(default=DEFAULT_BG_COLOR, alias="bgColor")
    text_color: str = Field(default=DEFAULT_TEXT_COLOR, alias="textColor")
    title: str = DEFAULT_TITLE
    footer: str = DEFAULT_FOOTER
    sections: List[SectionUnion] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_section_ids(self):
        seen = set()
        for sec in self.sections:
            if sec.id in seen:
                raise ValueError(f"id de section dupliqué : {sec.id!r}")
            seen.add(sec.id)
        return self

    def scalars(self) -> dict:
        """Champs scalaires indexés par nom de placeholder ({{bgColor}}, {{title}}…)."""
        return {
            "bgColor":   self.bg_color,
            "textColor": self.text_color,
            "title":     self.title,
            "footer":    self.footer,
        }

    def to_wire(self) -> dict:
        """Payload JSON tel qu'attendu par le backend (clés camelCase)."""
        return self.model_dump(by_alias=True, mode="json")


# Champs modifiables via EmailBuilder.set_field (nom python ou nom wire)
SCALAR_FIELDS = {
    "bg_color":   "bg_color",
    "bgColor":    "bg_color",
    "text_color": "text_color",
    "textColor":  "text_color",
    "title":      "title",
    "footer":     "footer",
}


def default_config() -> EmailConfig:
    """Config de départ d'une session (fond blanc, texte noir, aucune section)."""
    return EmailConfig()
