"""Centralized exception handlers for FastAPI apps using the library.

Register with register_exception_handlers(app). Maps library exceptions to
JSON:API error documents (`{"errors": [...]}`).
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request

from jsonapi_core.core.config import get_settings
from jsonapi_core.core.responses import JsonApiResponse
from jsonapi_core.domain.exceptions import JsonApiException
from jsonapi_core.schemas.relationship import ErrorDocument, ErrorObject

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
}


def _error_response(status: int, code: str, detail: str | None, meta: dict | None = None) -> JsonApiResponse:
    document = ErrorDocument(
        errors=[
            ErrorObject(
                status=str(status),
                code=code,
                title=HTTPStatus(status).phrase,
                detail=detail,
                meta=meta or None,
            )
        ]
    )
    return JsonApiResponse(
        status_code=status,
        content=document.model_dump(exclude_none=True),
    )


def _jsonapi_exception_handler(request: Request, exc: JsonApiException) -> JsonApiResponse:
    """Return a JSON:API error document with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    logger.info("Rejected request with %s: %s", exc.error_code, exc.message)
    meta = exc.details if get_settings().expose_error_details else None
    return _error_response(status, exc.error_code, exc.message, meta)


def _generic_exception_handler(request: Request, exc: Exception) -> JsonApiResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", detail)


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: JsonApiException (and
    subclasses), generic Exception.
    """
    app.add_exception_handler(JsonApiException, _jsonapi_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
