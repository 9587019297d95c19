"""Section Text — fragment HTML prêt à insérer (produit par l'éditeur rich-text)."""
from typing import Literal
from .base import BaseSection


class TextSection(BaseSection):
    type: Literal["text"] = "text"
    content: str = ""
