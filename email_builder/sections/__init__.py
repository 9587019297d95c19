"""
Sections — exports publics + SectionUnion discriminé.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseSection
from .text import TextSection
from .image import ImageSection
from .cta import CTASection, DEFAULT_CTA_LABEL

# Union discriminée par type — utilisable dans Pydantic avec discriminator
SectionUnion = Annotated[
    Union[
        TextSection,
        ImageSection,
        CTASection,
    ],
    Field(discriminator="type"),
]

SECTION_REGISTRY: dict = {
    "text":  TextSection,
    "image": ImageSection,
    "cta":   CTASection,
}

SECTION_KINDS = tuple(SECTION_REGISTRY)

__all__ = [
    "BaseSection",
    "TextSection",
    "ImageSection",
    "CTASection",
    "DEFAULT_CTA_LABEL",
    "SectionUnion",
    "SECTION_REGISTRY",
    "SECTION_KINDS",
]
