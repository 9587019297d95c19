"""
Route layout — source brute pour le rendu preview côté client.
  GET /getEmailLayout → {"layout": "..."}
"""
import logging

from fastapi import APIRouter, HTTPException

from ...layout import load_layout

log = logging.getLogger(__name__)

router = APIRouter(tags=["Layout"])


@router.get("/getEmailLayout")
def get_email_layout():
    try:
        return {"layout": load_layout()}
    except OSError as e:
        log.error("Layout illisible : %s", e)
        raise HTTPException(500, "Layout unavailable")
