"""
FastAPI exception handlers.

Every error body has the shape {"message": ...}; validation errors add "errors".
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from email_classifier.classification.exceptions import ClassificationError

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = (
    "OpenAI API key not configured. Please set OPENAI_API_KEY environment variable."
)


async def classification_error_handler(request: Request, exc: ClassificationError) -> JSONResponse:
    """
    Handle remote classification failures.
    
    Credential failures map to 401, everything else to 500.
    """
    if exc.is_credential_error:
        logger.error("Classification failed: credential rejected", extra={"kind": exc.kind.value})
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": MISSING_API_KEY_MESSAGE},
        )
    
    logger.error("Classification failed", extra={"kind": exc.kind.value})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.message},
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle invalid request bodies (e.g. email text below the minimum length).
    
    Maps to 400 Bad Request.
    """
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.warning("Invalid request", extra={"errors": errors})
    
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid email content", "errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException detail as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An unexpected error occurred"},
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ClassificationError: classification_error_handler,
    RequestValidationError: request_validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: generic_error_handler,
}
