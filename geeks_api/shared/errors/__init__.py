from .base import ServiceError, category_of
from .codes import (
    ERROR_CODE_FOR_UNKNOWN_ERROR,
    UNKNOWN_ERROR_CODE,
    ErrorCode,
    ErrorCodeEnum,
    SimpleErrorCode,
    validation_error_code,
)
from .handler import NO_MESSAGE_AVAILABLE, ApiExceptionHandler
from .http import register_error_handler, to_flask_response
from .mappers import CategoryErrorCodeMapper, ErrorCodeResolver, ExceptionToErrorCode
from .messages import MessageResolver, NoSuchMessageError
from .response import ApiError, ErrorResponse
from .validation import RequestValidationError, Violation, raise_validation_error

__all__ = [
    "ERROR_CODE_FOR_UNKNOWN_ERROR",
    "NO_MESSAGE_AVAILABLE",
    "UNKNOWN_ERROR_CODE",
    "ApiError",
    "ApiExceptionHandler",
    "CategoryErrorCodeMapper",
    "ErrorCode",
    "ErrorCodeEnum",
    "ErrorCodeResolver",
    "ErrorResponse",
    "ExceptionToErrorCode",
    "MessageResolver",
    "NoSuchMessageError",
    "RequestValidationError",
    "ServiceError",
    "SimpleErrorCode",
    "Violation",
    "category_of",
    "raise_validation_error",
    "register_error_handler",
    "to_flask_response",
    "validation_error_code",
]
