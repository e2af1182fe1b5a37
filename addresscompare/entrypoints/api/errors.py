# addresscompare/entrypoints/api/errors.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...schemas import REQUIRED_MESSAGES, ErrorOut

log = logging.getLogger(__name__)

_REQUIRED_TYPES = {"missing", "string_too_short"}


def _message(err: dict[str, Any]) -> str:
    loc = tuple(err.get("loc") or ())
    field = str(loc[-1]) if len(loc) > 1 else None
    etype = err.get("type")

    if etype == "json_invalid" or field is None:
        return "Invalid JSON body"
    if field in REQUIRED_MESSAGES and etype in _REQUIRED_TYPES:
        return REQUIRED_MESSAGES[field]
    if etype == "value_error":
        ctx = err.get("ctx") or {}
        return str(ctx.get("error", err.get("msg", "")))
    return f"{field}: {err.get('msg', 'invalid value')}"


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorOut(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers={"Cache-Control": "no-store"})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    FastAPI answers 422 with its own shape; callers of this API expect
    400 with {"error", "details"}.
    """
    errors = list(exc.errors())

    if any(tuple(e.get("loc") or ()) == ("body",) and e.get("type") == "missing" for e in errors):
        log.info("rejected %s %s: no body", request.method, request.url.path)
        return error_response(400, "No request body provided")

    messages: list[str] = []
    for e in errors:
        m = _message(e)
        if m not in messages:
            messages.append(m)

    fields = sorted({e["loc"][-1] for e in errors if len(e.get("loc") or ()) > 1 and isinstance(e["loc"][-1], str)})
    log.info("rejected %s %s: invalid fields=%s", request.method, request.url.path, fields)
    return error_response(400, "Validation error", ", ".join(messages))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
