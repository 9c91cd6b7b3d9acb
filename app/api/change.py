"""
POST /change?id=<int>
Form fields: subject, status (int), who, comment.

Appends a change to the bug, overwrites its subject, saves the document and
redirects (303) to /bug?id=<int>.

No-ops (empty 200, nothing saved):
    - id missing
    - no bug with that id
    - subject missing
Failures (request aborted, nothing mutated):
    - id or status not an integer
"""
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_store
from app.api.forms import form_value, parse_int
from app.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _apply_change(
    store: DocumentStore,
    bug_id: int,
    subject: str,
    raw_status: str,
    who: str,
    comment: str,
) -> bool:
    with store.lock:
        bug = store.find_bug(bug_id)
        if bug is None:
            logger.info("Change ignored: bug %d not found", bug_id)
            return False
        if not subject:
            logger.info("Change ignored: no subject for bug %d", bug_id)
            return False
        status = parse_int(raw_status, "status")
        store.append_change(bug, subject, status, who, comment)
    return True


@router.api_route("/change", methods=["GET", "POST"])
async def append_change(request: Request, store: DocumentStore = Depends(get_store)):
    raw_id = await form_value(request, "id")
    if not raw_id:
        return Response()
    bug_id = parse_int(raw_id, "id")

    subject = await form_value(request, "subject")
    raw_status = await form_value(request, "status")
    who = await form_value(request, "who")
    comment = await form_value(request, "comment")

    applied = await run_in_threadpool(
        _apply_change, store, bug_id, subject, raw_status, who, comment
    )
    if not applied:
        return Response()
    return RedirectResponse(f"/bug?id={bug_id}", status_code=303)
