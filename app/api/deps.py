"""
Dependencies
============
Hand the process-wide store and renderer (set on ``app.state`` by the
lifespan in main.py) to route handlers.
"""
from fastapi import Request

from app.services.document_store import DocumentStore
from app.services.template_renderer import TemplateRenderer


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.renderer
