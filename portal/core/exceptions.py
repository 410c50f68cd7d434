from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class NotAuthenticatedError(AppException):
    def __init__(self, message: str = "User must be logged in"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="NOT_AUTHENTICATED"
        )

class InvalidCredentialsError(AppException):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="INVALID_CREDENTIALS"
        )

class AccessDeniedError(AppException):
    """Named AccessDeniedError to avoid shadowing Python's built-in PermissionError."""
    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(
            message=message,
            status_code=403,
            error_code="PERMISSION_DENIED"
        )

class EmailInUseError(AppException):
    def __init__(self, message: str = "Email already in use"):
        super().__init__(
            message=message,
            status_code=409,
            error_code="EMAIL_IN_USE"
        )

class DuplicateApplicationError(AppException):
    def __init__(self, message: str = "You have already applied to this job"):
        super().__init__(
            message=message,
            status_code=409,
            error_code="DUPLICATE_APPLICATION"
        )

class ResumeNotFoundError(AppException):
    def __init__(self, message: str = "Resume not found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="RESUME_NOT_FOUND"
        )

class JobNotFoundError(AppException):
    def __init__(self, message: str = "Job not found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="JOB_NOT_FOUND"
        )

class EmptyEmailTemplateError(AppException):
    def __init__(self, message: str = "Email template is empty"):
        super().__init__(
            message=message,
            status_code=400,
            error_code="EMPTY_EMAIL_TEMPLATE"
        )

class TextExtractionError(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=422,
            error_code="TEXT_EXTRACTION_FAILED",
            details=details
        )
