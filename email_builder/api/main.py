"""
Email Template Maker — FastAPI app
Démarrer : uvicorn email_builder.api.main:app --reload --port 3000
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import email_config, layout, render, upload

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Email Template Maker", version="1.0.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(layout.router)
app.include_router(upload.router)
app.include_router(email_config.router)
app.include_router(render.router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "email_builder", "version": "1.0.0"}
