from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError


from showroom.utils.exception_utils import DetailedHTTPException
from showroom.utils.logger_utils import get_logger


logger = get_logger(__name__)


def _first_error_message(errors: list) -> str:
    """
    Build a readable message from the first pydantic error entry.

    Args:
        errors: Error list as produced by pydantic / FastAPI

    Returns:
        Human readable message
    """
    if not errors:
        return "Invalid request"
    error = errors[0]
    location = ".".join(
        str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")
    )
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def custom_http_exception_handler(request: Request, exc: DetailedHTTPException):
    """
    Handles custom HTTP exceptions with structured response and logging.

    Args:
        request: Incoming HTTP request
        exc: Detailed HTTP exception instance
    """
    logger.warning(
        f"HTTPException: {exc.status_code} {exc.detail} for {request.method} {request.url}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Maps request validation failures to a 400 response.

    Args:
        request: Incoming HTTP request
        exc: Validation error raised by FastAPI
    """
    detail = _first_error_message(list(exc.errors()))
    logger.warning(f"ValidationError: {detail} for {request.method} {request.url}")
    return JSONResponse(status_code=400, content={"detail": detail})


async def duplicate_key_exception_handler(request: Request, exc: DuplicateKeyError):
    """
    Handles unique index violations raised by MongoDB.

    Args:
        request: Incoming HTTP request
        exc: DuplicateKeyError instance
    """
    logger.warning(f"DuplicateKeyError: {exc} for {request.method} {request.url}")
    return JSONResponse(
        status_code=400,
        content={"detail": "This entry already exists or violates a constraint."},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Handles unexpected server exceptions with generic error response and logging.

    Args:
        request: Incoming HTTP request
        exc: Exception instance
    """
    logger.error(
        f"UnhandledException: {exc} for {request.method} {request.url}", exc_info=True
    )
    return JSONResponse(
        status_code=500, content={"detail": "An internal server error occurred."}
    )
