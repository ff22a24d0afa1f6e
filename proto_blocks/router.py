"""
Router FastAPI — endpoints proto_blocks.

GET  /proto-blocks/v1/blocks                → liste des blocs + JSON schemas
GET  /proto-blocks/v1/blocks/{name}         → schema d'un bloc
GET  /proto-blocks/v1/blocks/{name}/view.js → script de vue du bloc (s'il en a un)
POST /proto-blocks/v1/preview               → {"html": ...} rendu en mode preview
POST /proto-blocks/v1/blocks/{name}/render  → HTMLResponse (rendu live)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .core.i18n import translate
from .registry import UnknownBlock, catalog, get_block_type, render

log = logging.getLogger(__name__)

router = APIRouter(prefix="/proto-blocks/v1", tags=["proto_blocks"])


class RenderRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    attributes: Dict[str, Any] = Field(default_factory=dict)
    inner_content: str = ""
    supports: Dict[str, Any] = Field(default_factory=dict)
    lang: Optional[str] = None


class PreviewRequest(RenderRequest):
    template: str


def _not_found(message: str, lang: Optional[str] = None) -> JSONResponse:
    return JSONResponse({"error": translate(message, lang)}, status_code=404)


@router.get("/blocks", summary="Liste les blocs disponibles et leurs schemas")
def list_blocks() -> JSONResponse:
    return JSONResponse({"blocks": catalog()})


@router.get("/blocks/{name}", summary="Schema des attributs d'un bloc")
def block_settings(name: str) -> JSONResponse:
    try:
        block_type = get_block_type(name)
    except UnknownBlock:
        return _not_found("Block not found.")
    return JSONResponse({
        "name":   name,
        "title":  block_type.title,
        "schema": block_type.model.model_json_schema(),
    })


@router.get("/blocks/{name}/view.js", summary="Script de vue d'un bloc")
def block_view_script(name: str) -> Response:
    try:
        block_type = get_block_type(name)
    except UnknownBlock:
        return _not_found("Block not found.")
    if not block_type.view_script:
        return _not_found("Block not found.")
    return Response(content=block_type.view_script, media_type="application/javascript")


@router.post("/preview", summary="Rend un bloc en mode preview (éditeur)")
def preview(payload: PreviewRequest) -> JSONResponse:
    """Reçoit template + attributs, retourne le HTML placeholder de l'éditeur."""
    try:
        html = render(
            payload.template,
            payload.attributes,
            inner_content=payload.inner_content,
            is_preview=True,
            supports=payload.supports,
            lang=payload.lang,
        )
    except UnknownBlock:
        log.warning("Preview : bloc inconnu %s", payload.template)
        return _not_found("Block template not found.", payload.lang)
    return JSONResponse({"html": html})


@router.post("/blocks/{name}/render", response_class=HTMLResponse, summary="Rend un bloc (live)")
def render_live(name: str, payload: RenderRequest) -> Response:
    try:
        html = render(
            name,
            payload.attributes,
            inner_content=payload.inner_content,
            is_preview=False,
            supports=payload.supports,
            lang=payload.lang,
        )
    except UnknownBlock:
        return _not_found("Block not found.", payload.lang)
    return HTMLResponse(content=html)
