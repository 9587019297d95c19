"""Démarrage direct : python -m email_builder"""
import uvicorn

from .config import port

if __name__ == "__main__":
    uvicorn.run("email_builder.api.main:app", host="0.0.0.0", port=port())
