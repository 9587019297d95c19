"""
API publique d'email_builder — contrôleur de la session d'édition.

L'état (EmailConfig courant + layout) appartient à une instance EmailBuilder ;
chaque opération délègue à une fonction pure de core.operations puis adopte
la nouvelle valeur.
"""
import logging
from pathlib import Path
from typing import Optional

from .client import BackendClient
from .config import DOWNLOAD_FILENAME
from .core import operations
from .core.schemas import EmailConfig, SCALAR_FIELDS, default_config
from .errors import BackendError
from .renderer.preview import render_preview
from .sections import BaseSection

log = logging.getLogger(__name__)


class EmailBuilder:
    """
    Session d'édition d'un email.

    Usage:
        >>> builder = EmailBuilder(layout=layout_html)
        >>> sec = builder.add_section("text")
        >>> builder.update_section(sec.id, "content", "<p>Hello</p>")
        >>> html = builder.preview()
    """

    def __init__(self, layout: str = "", client: BackendClient | None = None,
                 config: EmailConfig | None = None):
        """
        Args:
            layout: Source du layout (vide tant que load_layout() n'a pas réussi)
            client: Client backend (créé à la demande si absent)
            config: Email de départ (défaut : config par défaut)
        """
        self.layout = layout
        self.config = config or default_config()
        self._client = client

    @property
    def client(self) -> BackendClient:
        if self._client is None:
            self._client = BackendClient()
        return self._client

    @property
    def sections(self) -> list[BaseSection]:
        return list(self.config.sections)

    def _adopt(self, sections: list[BaseSection]):
        self.config = self.config.model_copy(update={"sections": sections})

    # ── Champs scalaires ─────────────────────────────────────────────────────

    def set_field(self, name: str, value: str):
        """Met à jour bgColor / textColor / title / footer (nom python ou wire)."""
        attr = SCALAR_FIELDS.get(name)
        if attr is None:
            raise ValueError(f"Champ inconnu : {name!r}")
        self.config = self.config.model_copy(update={attr: value})

    # ── Sections ─────────────────────────────────────────────────────────────

    def add_section(self, kind: str) -> BaseSection:
        """Ajoute une section en fin de liste et la retourne."""
        sections = operations.add_section(self.config.sections, kind)
        self._adopt(sections)
        return sections[-1]

    def update_section(self, section_id: str, field: str, value: str):
        self._adopt(operations.update_section(self.config.sections, section_id, field, value))

    def remove_section(self, section_id: str):
        self._adopt(operations.remove_section(self.config.sections, section_id))

    def move_section(self, from_index: int, to_index: Optional[int]):
        """Fin de drag : to_index None = drag annulé."""
        self._adopt(operations.reorder_sections(self.config.sections, from_index, to_index))

    def get_section(self, section_id: str) -> Optional[BaseSection]:
        return next((s for s in self.config.sections if s.id == section_id), None)

    # ── Rendu ────────────────────────────────────────────────────────────────

    def preview(self) -> str:
        """Rendu preview local de l'état courant."""
        return render_preview(self.layout, self.config)

    # ── Échanges backend (échec → log, état inchangé) ────────────────────────

    def load_layout(self) -> bool:
        try:
            self.layout = self.client.fetch_layout()
        except BackendError as e:
            log.error("Chargement du layout impossible : %s", e)
            return False
        return True

    def upload_image(self, section_id: str, filename: str, data: bytes) -> bool:
        """
        Upload une image et enregistre l'URL retournée sur la section `section_id`.

        Returns:
            True si l'URL a été enregistrée, False si l'upload a échoué
        """
        try:
            url = self.client.upload_image(filename, data)
        except BackendError as e:
            log.error("Upload image impossible (section %s) : %s", section_id, e)
            return False
        # Dernière réponse gagnante si plusieurs uploads se chevauchent
        self.update_section(section_id, "url", url)
        return True

    def save_config(self) -> bool:
        try:
            message = self.client.save_config(self.config)
        except BackendError as e:
            log.error("Sauvegarde de la config impossible : %s", e)
            return False
        log.info("Config sauvegardée : %s", message)
        return True

    def download(self, dest_dir: str | Path = ".") -> Optional[Path]:
        """
        Demande le rendu final au backend et l'écrit dans `dest_dir/emailTemplate.html`.

        Returns:
            Chemin du fichier écrit, None si le rendu a échoué
        """
        try:
            content = self.client.render(self.config)
        except BackendError as e:
            log.error("Téléchargement du template impossible : %s", e)
            return None
        dest = Path(dest_dir) / DOWNLOAD_FILENAME
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(content)
        log.info("Template écrit : %s (%d octets)", dest, len(content))
        return dest
