"""Core module pour email_builder — modèle + opérations sur les sections."""
from .schemas import EmailConfig, SCALAR_FIELDS, default_config
from .operations import (
    new_section_id,
    add_section,
    update_section,
    remove_section,
    reorder_sections,
)

__all__ = [
    "EmailConfig",
    "SCALAR_FIELDS",
    "default_config",
    "new_section_id",
    "add_section",
    "update_section",
    "remove_section",
    "reorder_sections",
]
