"""
Section de base pour email_builder.
Chaque section porte un id stable + un type discriminant.
"""
from pydantic import BaseModel, ConfigDict, Field


class BaseSection(BaseModel):
    """Section de base (classe parente de toutes les sections d'email)."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Jeton d'identité, stable pendant la session")
    type: str
    content: str = ""
    url: str = ""
