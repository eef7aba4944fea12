"""
API error types for BhashaBazaar

Provides:
- BhashaBazaarException and its HTTP-facing subclasses
- The JSON error body shared by every failing endpoint
- The FastAPI handler that renders it
- raise_* shortcuts used by the routers

The voice core (detector, extractor, parser, translator) never raises;
these exceptions belong to the HTTP layer and to startup validation.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

__all__ = [
    "BhashaBazaarException",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
    "create_error_response",
    "bhashabazaar_exception_handler",
    "field_error",
    "raise_validation_error",
    "raise_not_found",
    "ERROR_STATUS_CODES",
]


class BhashaBazaarException(Exception):
    """Base error; subclasses pin error_code, status_code and a default message"""

    error_code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "Internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        self.status_code = status_code or self.status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.error_code, "message": self.message, "details": self.details}


class ValidationError(BhashaBazaarException):
    """Bad request data: blank or oversized transcript, unsupported language tag"""
    error_code = "VALIDATION_ERROR"
    status_code = 400
    default_message = "Validation failed"


class NotFoundError(BhashaBazaarException):
    error_code = "NOT_FOUND"
    status_code = 404
    default_message = "Resource not found"


class ConfigurationError(BhashaBazaarException):
    """Broken static tables or settings, detected at startup"""
    error_code = "CONFIGURATION_ERROR"
    status_code = 500
    default_message = "Configuration error"


ERROR_STATUS_CODES: Dict[str, int] = {
    cls.error_code: cls.status_code
    for cls in (BhashaBazaarException, ValidationError, NotFoundError, ConfigurationError)
}


# =============================================================================
# Rendering
# =============================================================================

def create_error_response(error: BhashaBazaarException) -> JSONResponse:
    """{"success": false, "error": {code, message, details}, "timestamp"}"""
    log = logger.error if error.status_code >= 500 else logger.warning
    log(f"{error.error_code} ({error.status_code}): {error.message}", extra={"error_code": error.error_code})

    return JSONResponse(
        status_code=error.status_code,
        content={
            "success": False,
            "error": error.to_dict(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def bhashabazaar_exception_handler(request: Request, exc: BhashaBazaarException) -> JSONResponse:
    return create_error_response(exc)


# =============================================================================
# Shortcuts
# =============================================================================

def field_error(field: str, constraint: str, value: Any = None) -> ValidationError:
    """ValidationError naming the offending field, its value and the broken constraint"""
    return ValidationError(
        f"Invalid {field}: {constraint}",
        details={"field": field, "value": value, "constraint": constraint},
    )


def raise_validation_error(field: str, constraint: str, value: Any = None) -> None:
    raise field_error(field, constraint, value)


def raise_not_found(resource_type: str, identifier: str) -> None:
    raise NotFoundError(
        f"{resource_type} '{identifier}' not found",
        details={"resource_type": resource_type, "identifier": identifier},
    )
