# gradebook/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from gradebook.core.exceptions import BaseAPIException
from gradebook.core.logging import logger

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


# 1. Errors raised on purpose by the application
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    content = {"message": exc.message, "code": exc.code}
    if exc.field:
        content["field"] = exc.field
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


# 2. Validation errors raised by pydantic when the client sends bad input.
# Only the first error is reported, as {message, field}.
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request", "field": ""},
        )

    first = errors[0]
    loc = list(first.get("loc", ()))
    if loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    # A malformed JSON body reports a character offset, not a field name
    if loc and not isinstance(loc[0], str):
        loc = []
    field = ".".join(str(part) for part in loc)
    message = first.get("msg", "Invalid value")

    logger.info(f"Validation failed on {request.method} {request.url.path}: {field}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message, "field": field},
    )


# 3. Standard HTTP errors (unknown URL, wrong method, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# 4. Everything else: bugs, database integrity errors, library failures
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
