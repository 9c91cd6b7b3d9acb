"""
POST /newBug?partId=<int>
Form field: subject.

Creates a bug in the part with the document's next id, saves, and redirects
(303) to /bug?id=<new id>. A missing ``partId`` or an unknown part yields an
empty 200 response; a non-integer ``partId`` fails the request.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_store
from app.api.forms import form_value, parse_int
from app.models.bug import Bug
from app.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_bug(store: DocumentStore, part_id: int, subject: str) -> Optional[Bug]:
    with store.lock:
        part = store.find_part(part_id)
        if part is None:
            logger.warning("New bug ignored: part %d not found", part_id)
            return None
        return store.create_bug(part, subject)


@router.api_route("/newBug", methods=["GET", "POST"])
async def create_bug(request: Request, store: DocumentStore = Depends(get_store)):
    raw_id = await form_value(request, "partId")
    if not raw_id:
        return Response()
    part_id = parse_int(raw_id, "partId")
    subject = await form_value(request, "subject")

    bug = await run_in_threadpool(_create_bug, store, part_id, subject)
    if bug is None:
        return Response()
    return RedirectResponse(f"/bug?id={bug.id}", status_code=303)
