"""
Sauvegarde de la config (démo : simple log, aucune relecture possible).
  POST /uploadEmailConfig → {"message": "..."}
"""
import logging

from fastapi import APIRouter

from ...core.schemas import EmailConfig

log = logging.getLogger(__name__)

router = APIRouter(tags=["Config"])


@router.post("/uploadEmailConfig")
def upload_email_config(config: EmailConfig):
    log.info("Email Config: %s", config.model_dump_json(by_alias=True))
    return {"message": "Config saved (logged to console)!"}
