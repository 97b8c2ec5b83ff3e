"""Exception handlers: map the error taxonomy onto the ``{"error": ...}`` envelope.

| Failure                         | Status |
|---------------------------------|--------|
| HTTPException (e.g. not found)  | as raised |
| EntityValidationError           | 400    |
| malformed JSON / schema errors  | 400    |
| anything else                   | 500    |
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from catalog_api.domain.exceptions import EntityValidationError

logger = logging.getLogger(__name__)

INVALID_JSON = "Invalid JSON"
INTERNAL_ERROR = "Internal server error"


def api_error(
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the uniform error envelope."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_request_errors(exc: RequestValidationError) -> str:
    errors = exc.errors()
    for err in errors:
        if err.get("type") == "json_invalid":
            return INVALID_JSON
        # empty request body
        if err.get("type") == "missing" and tuple(err.get("loc", ())) == ("body",):
            return INVALID_JSON

    parts = []
    for err in errors:
        # strip the request-part prefix from locations like ("body", "price")
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts)


async def _http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # keeps e.g. the Allow header of a 405
    return api_error(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


async def _entity_validation_handler(request: Request, exc: EntityValidationError) -> JSONResponse:
    return api_error(str(exc))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_request_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return api_error(message)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return api_error(INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to the application."""
    app.add_exception_handler(HTTPException, _http_exception_handler)
    app.add_exception_handler(EntityValidationError, _entity_validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
