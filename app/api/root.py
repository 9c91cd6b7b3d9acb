"""
GET /
Renders the "root" template with the whole document: every part and its bugs.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api.deps import get_renderer, get_store
from app.core.constants import ROOT_TEMPLATE
from app.services.document_store import DocumentStore
from app.services.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def list_bugs(
    store: DocumentStore = Depends(get_store),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    with store.lock:
        html = renderer.render(ROOT_TEMPLATE, db=store.document)
    return HTMLResponse(html)
