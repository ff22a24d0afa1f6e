"""
proto_blocks — app FastAPI autonome (preview des blocs pour l'éditeur).
Démarrer : uvicorn proto_blocks.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI

from . import __version__
from .router import router


def create_app() -> FastAPI:
    """App minimale montant le router proto_blocks."""
    application = FastAPI(title="Proto Blocks — rendu des blocs", version=__version__, docs_url="/docs")
    application.include_router(router)
    return application


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
app = create_app()
