"""Render every API failure as a flat {"error": message} payload"""

from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Collapse pydantic errors into one client-facing message.

    Malformed JSON wins, then program selection errors (their own messages),
    then the first field error as "validation error: <field>: <reason>".
    """
    if not errors:
        return "invalid input"

    for error in errors:
        if error.get("type") == "json_invalid":
            return "invalid json"

    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if loc == ["program"] and error.get("type") == "value_error":
            ctx = error.get("ctx") or {}
            return str(ctx.get("error", error.get("msg", "invalid program")))

    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if not loc:
        return f"validation error: {first.get('msg')}"
    return f"validation error: {loc}: {first.get('msg')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": describe_validation_errors(exc.errors())})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
