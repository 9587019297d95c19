"""Section CTA — bouton call-to-action (label + lien)."""
from typing import Literal
from .base import BaseSection

DEFAULT_CTA_LABEL = "Click Me"


class CTASection(BaseSection):
    type: Literal["cta"] = "cta"
    content: str = DEFAULT_CTA_LABEL
    url: str = ""
