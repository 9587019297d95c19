"""Section Image — URL vide tant que l'upload n'est pas terminé."""
from typing import Literal
from .base import BaseSection


class ImageSection(BaseSection):
    type: Literal["image"] = "image"
    url: str = ""
