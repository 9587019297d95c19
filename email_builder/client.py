"""
Client HTTP du backend email_builder (côté éditeur).

  fetch_layout()               GET  /getEmailLayout            → layout brut
  upload_image(filename, data) POST /uploadImage               → URL publique
  save_config(config)          POST /uploadEmailConfig         → message d'ack
  render(config)               POST /renderAndDownloadTemplate → HTML (bytes)

Un seul échange par action, pas de retry : tout échec lève BackendError.
"""
import logging

import requests as http

from .config import backend_timeout, backend_url
from .core.schemas import EmailConfig
from .errors import BackendError

log = logging.getLogger(__name__)


class BackendClient:
    """Client du backend (layout, upload, sauvegarde, rendu final)."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None,
                 session: http.Session | None = None):
        self.base_url = (base_url or backend_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else backend_timeout()
        self.session = session or http.Session()

    def _request(self, method: str, path: str, **kwargs) -> http.Response:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except http.RequestException as e:
            raise BackendError(f"{method} {path} : {e}") from e
        if not resp.ok:
            raise BackendError(f"{method} {path} → HTTP {resp.status_code}", status_code=resp.status_code)
        return resp

    def _json_field(self, method: str, path: str, key: str, **kwargs):
        """Requête + lecture de `key` dans le corps JSON ; corps invalide → BackendError."""
        resp = self._request(method, path, **kwargs)
        try:
            return resp.json()[key]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise BackendError(f"{method} {path} : réponse invalide ({e!r})", status_code=resp.status_code) from e

    def fetch_layout(self) -> str:
        return self._json_field("GET", "/getEmailLayout", "layout")

    def upload_image(self, filename: str, data: bytes) -> str:
        """Envoie un fichier image, retourne l'URL publique renvoyée par le backend."""
        url = self._json_field("POST", "/uploadImage", "imageUrl", files={"image": (filename, data)})
        if not url:
            raise BackendError("POST /uploadImage : réponse sans imageUrl")
        return url

    def save_config(self, config: EmailConfig) -> str:
        return self._json_field("POST", "/uploadEmailConfig", "message", json=config.to_wire())

    def render(self, config: EmailConfig) -> bytes:
        """Rendu authoritative ; retourne le HTML brut à enregistrer sans traitement."""
        return self._request("POST", "/renderAndDownloadTemplate", json=config.to_wire()).content
