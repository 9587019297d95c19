"""
Upload d'images pour les sections image.
  POST /uploadImage (multipart, champ "image") → {"imageUrl": "<base>/uploads/<fichier>"}
  GET  /uploads/{fichier}  → fichier uploadé
"""
import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse

from ...config import uploads_dir

log = logging.getLogger(__name__)

router = APIRouter(tags=["Upload"])


def _upload_file(file: UploadFile) -> str:
    """Sauvegarde le fichier sous un nom aléatoire, retourne ce nom."""
    dest_dir = uploads_dir()
    dest_dir.mkdir(parents=True, exist_ok=True)
    filename = uuid.uuid4().hex + Path(file.filename or "").suffix.lower()
    content = file.file.read()
    (dest_dir / filename).write_bytes(content)
    log.info("Image uploadée : %s (%d octets)", filename, len(content))
    return filename


@router.post("/uploadImage")
def upload_image(request: Request, image: UploadFile = File(None)):
    if not image or not image.filename:
        raise HTTPException(400, "No file uploaded")
    filename = _upload_file(image)
    # URL publique : même schéma/hôte que la requête
    return {"imageUrl": f"{str(request.base_url).rstrip('/')}/uploads/{filename}"}


@router.get("/uploads/{filename}")
def get_upload(filename: str):
    # Path(...).name : pas de sortie du répertoire d'uploads
    path = uploads_dir() / Path(filename).name
    if not path.is_file():
        raise HTTPException(404, "Not found")
    return FileResponse(str(path))
