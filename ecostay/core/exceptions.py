"""
Custom Exceptions for the Eco-Stay Connect client

This module defines the exception classes raised at the operation
boundary: remote reads and writes, file uploads, client-side validation,
authentication and configuration.
"""

from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    OPERATION_FAILED = "OPERATION_FAILED"

    # Authentication
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # Remote store errors
    REMOTE_FETCH_FAILED = "REMOTE_FETCH_FAILED"
    REMOTE_WRITE_FAILED = "REMOTE_WRITE_FAILED"
    UPLOAD_FAILED = "UPLOAD_FAILED"

    # External service errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Remote Store Exceptions
# ========================================

class RemoteFetchError(BaseAppException):
    """Exception raised when reading from the remote store fails"""

    def __init__(
        self,
        resource: str,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.resource = resource
        self.cause = cause
        payload = {"resource": resource, "cause": str(cause) if cause else None}
        payload.update(details or {})
        super().__init__(
            f"Failed to load {resource}",
            ErrorCode.REMOTE_FETCH_FAILED,
            payload,
            502,
        )


class RemoteWriteError(BaseAppException):
    """Exception raised when an insert, update, upsert or delete fails"""

    def __init__(
        self,
        resource: str,
        operation: str,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.resource = resource
        self.operation = operation
        self.cause = cause
        payload = {
            "resource": resource,
            "operation": operation,
            "cause": str(cause) if cause else None,
        }
        payload.update(details or {})
        super().__init__(
            f"Failed to {operation} {resource}",
            ErrorCode.REMOTE_WRITE_FAILED,
            payload,
            502,
        )


class UploadError(BaseAppException):
    """Exception raised when file storage rejects an upload"""

    def __init__(
        self,
        bucket: str,
        path: str,
        cause: Optional[BaseException] = None,
    ):
        self.bucket = bucket
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to upload {path} to {bucket}",
            ErrorCode.UPLOAD_FAILED,
            {"bucket": bucket, "path": path, "cause": str(cause) if cause else None},
            502,
        )


# ========================================
# Client-side Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when a client-side precondition is violated"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 422
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class MissingFieldError(ValidationError):
    """Exception raised when required form fields are empty"""

    def __init__(self, message: str, fields: List[str]):
        self.fields = fields
        super().__init__(
            message,
            field_errors={field: ["This field is required"] for field in fields},
            error_code=ErrorCode.MISSING_REQUIRED_FIELD,
        )


class AuthenticationError(BaseAppException):
    """Exception raised when sign-in is required or the auth endpoint refuses"""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, details, 401)


class ConfigurationError(BaseAppException):
    """Exception raised when required configuration is missing"""

    def __init__(
        self,
        message: str = "Configuration error",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details, 500)


class ChatProxyError(BaseAppException):
    """Exception raised when the language-model call or the proxy fails"""

    def __init__(
        self,
        message: str = "Chat service unavailable",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message, ErrorCode.EXTERNAL_SERVICE_ERROR, details, status_code)
