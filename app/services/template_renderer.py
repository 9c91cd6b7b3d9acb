"""
Template Renderer
=================
Renders ``<template_dir>/<name>.template`` with Jinja2.

The file is read and compiled again on every call, so edits to a template
show up on the next request without a restart. Undefined names are errors
(StrictUndefined): a template asking for a field the data does not have
fails the request instead of rendering blank.

Filters available to templates:
    status_name  — 2 -> "fixed"; unknown codes render as the number
    timestamp    — datetime -> "2026-10-19 14:05"

Globals:
    statuses     — the code -> label mapping, for building <select> options
"""
import logging
import os
from datetime import datetime
from typing import Any, Optional

import jinja2

from app.core.constants import STATUS_NAMES, TEMPLATE_EXTENSION

logger = logging.getLogger(__name__)


def status_name(status: int) -> str:
    return STATUS_NAMES.get(status, str(status))


def format_timestamp(when: Optional[datetime]) -> str:
    if when is None:
        return ""
    return when.strftime("%Y-%m-%d %H:%M")


class TemplateRenderer:

    def __init__(self, template_dir: str) -> None:
        self.template_dir = template_dir
        self._env = jinja2.Environment(
            autoescape=True,
            undefined=jinja2.StrictUndefined,
        )
        self._env.filters["status_name"] = status_name
        self._env.filters["timestamp"] = format_timestamp
        self._env.globals["statuses"] = STATUS_NAMES

    def template_path(self, name: str) -> str:
        return os.path.join(self.template_dir, name + TEMPLATE_EXTENSION)

    def load(self, name: str) -> jinja2.Template:
        """
        Read and compile one template.

        Raises
        ------
        OSError
            The template file cannot be read.
        jinja2.TemplateSyntaxError
            The template does not compile.
        """
        path = self.template_path(name)
        with open(path, encoding="utf-8") as f:
            source = f.read()
        return self._env.from_string(source)

    def render(self, name: str, **context: Any) -> str:
        template = self.load(name)
        html = template.render(**context)
        logger.debug("Rendered template %s (%d chars)", name, len(html))
        return html
