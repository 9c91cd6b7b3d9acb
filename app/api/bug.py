"""
GET /bug?id=<int>
Renders the "bug" template for one bug together with the user list.

A missing ``id`` or an id no bug has yields an empty 200 response.
A non-integer ``id`` fails the request.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_renderer, get_store
from app.api.forms import form_value, parse_int
from app.core.constants import BUG_TEMPLATE
from app.services.document_store import DocumentStore
from app.services.template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)

router = APIRouter()


def _render_bug(store: DocumentStore, renderer: TemplateRenderer, bug_id: int) -> Optional[str]:
    with store.lock:
        bug = store.find_bug(bug_id)
        if bug is None:
            logger.info("Bug %d not found", bug_id)
            return None
        return renderer.render(BUG_TEMPLATE, bug=bug, users=store.document.users)


@router.api_route("/bug", methods=["GET", "POST"], response_class=HTMLResponse)
async def view_bug(
    request: Request,
    store: DocumentStore = Depends(get_store),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    raw_id = await form_value(request, "id")
    if not raw_id:
        return Response()
    bug_id = parse_int(raw_id, "id")

    html = await run_in_threadpool(_render_bug, store, renderer, bug_id)
    if html is None:
        return Response()
    return HTMLResponse(html)
