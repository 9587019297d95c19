"""
Configuration — variables d'environnement, lues à l'appel (surchargeables en test).

  LAYOUT_PATH      layout email (défaut : templates/layout.html du package)
  UPLOADS_DIR      stockage des images uploadées (défaut : ./uploads)
  BACKEND_URL      URL du backend pour BackendClient (défaut : http://localhost:3000)
  BACKEND_TIMEOUT  timeout HTTP en secondes (défaut : 10)
  PORT             port uvicorn (défaut : 3000)
"""
import os
from pathlib import Path

_DEFAULT_LAYOUT = Path(__file__).parent / "templates" / "layout.html"

DOWNLOAD_FILENAME = "emailTemplate.html"


def layout_path() -> Path:
    return Path(os.getenv("LAYOUT_PATH", str(_DEFAULT_LAYOUT)))


def uploads_dir() -> Path:
    return Path(os.getenv("UPLOADS_DIR", "uploads"))


def backend_url() -> str:
    return os.getenv("BACKEND_URL", "http://localhost:3000").rstrip("/")


def backend_timeout() -> float:
    return float(os.getenv("BACKEND_TIMEOUT", "10"))


def port() -> int:
    return int(os.getenv("PORT", "3000"))
