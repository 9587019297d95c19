"""
Rendu des emails.
  POST /renderAndDownloadTemplate → HTML authoritative en pièce jointe (emailTemplate.html)
  POST /previewEmail              → HTML preview (même renderer que l'éditeur)
"""
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, Response

from ...config import DOWNLOAD_FILENAME
from ...core.schemas import EmailConfig
from ...errors import LayoutError
from ...layout import load_layout
from ...renderer.preview import render_preview
from ...renderer.server import render_email

log = logging.getLogger(__name__)

router = APIRouter(tags=["Render"])


@router.post("/renderAndDownloadTemplate", summary="Rend l'email final en fichier HTML")
def render_and_download(config: EmailConfig) -> Response:
    try:
        merged = render_email(load_layout(), config)
    except (LayoutError, OSError) as e:
        log.exception("Erreur de rendu : %s", e)
        raise HTTPException(500, "Render error")
    return Response(
        content=merged,
        media_type="text/html",
        headers={"Content-Disposition": f"attachment; filename={DOWNLOAD_FILENAME}"},
    )


@router.post("/previewEmail", response_class=HTMLResponse, summary="Prévisualisation rapide")
def preview_email(config: EmailConfig) -> HTMLResponse:
    try:
        html = render_preview(load_layout(), config)
    except (LayoutError, OSError) as e:
        log.exception("Erreur de preview : %s", e)
        raise HTTPException(500, "Preview error")
    return HTMLResponse(content=html)
