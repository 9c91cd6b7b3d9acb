import uvicorn
import time
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.root import router as root_router
from app.api.bug import router as bug_router
from app.api.change import router as change_router
from app.api.new_bug import router as new_bug_router
from app.core import config
from app.services.document_store import DocumentStore
from app.services.template_renderer import TemplateRenderer
from app.utils.logging_config import setup_logging

# Initialize logging
setup_logging(level=config.LOG_LEVEL, log_dir=config.LOG_DIR)
logger = logging.getLogger("main")


# ---------------------------------------------------------------------------
# Logging Middleware
# ---------------------------------------------------------------------------
class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Incoming: {request.method} {request.url.path} from {client_host}")

        try:
            response = await call_next(request)
            process_time = (time.time() - start_time) * 1000
            logger.info(
                f"Outgoing: {request.method} {request.url.path} - "
                f"Status: {response.status_code} - "
                f"Time: {process_time:.2f}ms"
            )
            return response
        except Exception as e:
            logger.error(f"Request failed: {request.method} {request.url.path} - Error: {str(e)}")
            raise


def create_app(
    store: Optional[DocumentStore] = None,
    renderer: Optional[TemplateRenderer] = None,
    static_dir: Optional[str] = None,
) -> FastAPI:
    """
    Build the application around one document store.

    When ``store`` is None the lifespan loads config.BUGS_FILE; failing to
    read or decode it aborts startup. ``static_dir`` defaults to
    config.STATIC_DIR.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is None:
            doc_store = DocumentStore(
                config.BUGS_FILE,
                backup_suffix=config.BUGS_BACKUP_SUFFIX,
                temp_name=config.BUGS_TEMP_FILE,
            )
            try:
                doc_store.load()
            except Exception:
                logger.critical("Cannot load %s", doc_store.path, exc_info=True)
                raise
            app.state.store = doc_store
        else:
            app.state.store = store
        app.state.renderer = renderer or TemplateRenderer(config.TEMPLATE_DIR)
        yield

    app = FastAPI(title="Bug Tracker", lifespan=lifespan)
    app.add_middleware(LoggingMiddleware)

    @app.get("/health")
    def health_check(request: Request):
        doc_store: DocumentStore = request.app.state.store
        with doc_store.lock:
            return {
                "status": "ok",
                "bugs": doc_store.document.bug_count(),
                "next_id": doc_store.document.next_id,
            }

    app.include_router(root_router, tags=["Bugs"])
    app.include_router(bug_router, tags=["Bugs"])
    app.include_router(change_router, tags=["Bugs"])
    app.include_router(new_bug_router, tags=["Bugs"])
    app.mount(
        "/static",
        StaticFiles(directory=static_dir or config.STATIC_DIR, check_dir=False),
        name="static",
    )

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)
