"""
Form Values
===========
Request parameter lookup shared by all handlers.

A value is taken from the urlencoded / multipart body first and from the
query string second, so ``POST /change?id=3`` with ``subject=...`` in the
body resolves both. A missing parameter is the empty string, which the
handlers treat as "not supplied".
"""
import re

from fastapi import Request

_BODY_METHODS = ("POST", "PUT", "PATCH")

# Optional sign and ASCII digits only: no spaces, underscores or other scripts.
_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


async def form_value(request: Request, name: str) -> str:
    if request.method in _BODY_METHODS:
        form = await request.form()
        values = [v for v in form.getlist(name) if isinstance(v, str)]
        if values:
            return values[0]
    return request.query_params.get(name, "")


def parse_int(raw: str, name: str) -> int:
    """Convert a numeric form value; a malformed one fails the request."""
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"form value {name!r} is not an integer: {raw!r}")
    return int(raw)
