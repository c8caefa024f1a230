"""Error Handlers — map every failure onto the `{"error": "<message>"}` body.

Invariants:
    - `error` is always the human-readable message string; code, field and
      details travel as sibling keys
    - A wrong-typed or missing body reports the same message the domain
      validator would ("Age must be between 18 and 100", "Missing required
      fields", ...); query-string problems report "Invalid request data"
    - 5xx bodies never carry internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from insurance_advisor.core.errors import AdvisorError, ErrorSeverity
from insurance_advisor.core.validate_inputs import (
    INVALID_REQUEST_MESSAGE, MISSING_FIELDS_MESSAGE, message_for_invalid_field,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(AdvisorError, handle_advisor_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_advisor_error(request: Request, exc: AdvisorError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    errors = exc.errors()
    message, field = summarize_validation_errors(errors)
    logger.warning(
        f"Rejected request on {request.url.path}: {message}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    content = {
        "error": message,
        "code": "VALIDATION_ERROR",
        "category": "validation",
        "severity": ErrorSeverity.ERROR.value,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    }
    if field:
        content["field"] = field
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": INTERNAL_ERROR_MESSAGE,
            "code": "INTERNAL_ERROR",
            "category": "internal",
            "severity": ErrorSeverity.CRITICAL.value,
        },
    )


def summarize_validation_errors(errors) -> tuple[str, str | None]:
    """Pick the client-facing message (and field) for Pydantic errors.

    Only the first body error counts. A body that is absent or not a JSON
    object has no usable fields, which reads as missing fields.
    """
    for e in errors:
        loc = e["loc"]
        if not loc or loc[0] != "body":
            continue
        if e["type"] == "json_invalid":
            return INVALID_REQUEST_MESSAGE, None
        if len(loc) == 1:
            return MISSING_FIELDS_MESSAGE, None
        field = str(loc[1])
        return message_for_invalid_field(field), field
    return INVALID_REQUEST_MESSAGE, None
