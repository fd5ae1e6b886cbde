"""Credential forms exceptions."""

from typing import Optional

from shared.exceptions import ValidationError


class FormValidationError(ValidationError):
    """Raised when a form value fails local validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="FORM_VALIDATION_ERROR",
            details={"field": field} if field else None,
        )
        self.field = field


class SubmissionInProgressError(ValidationError):
    """Raised when a form is submitted again before the first attempt finished."""

    def __init__(self, message: str):
        super().__init__(message, code="SUBMISSION_IN_PROGRESS")
