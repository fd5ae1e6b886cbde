"""
Credential forms module.

Login and registration: local validation, identity provider calls and
provider-error messages.

Public API:
- ICredentialForms: Interface for form submissions
- LoginForm, RegistrationForm: Form state
- LoginRequest, RegistrationRequest, FormResponse: API payloads
- FormValidationError, SubmissionInProgressError: Form exceptions
"""

from .interfaces import ICredentialForms
from .models import (
    FormResponse,
    FormState,
    LoginForm,
    LoginRequest,
    MessageType,
    RegistrationForm,
    RegistrationRequest,
)
from .exceptions import FormValidationError, SubmissionInProgressError

__all__ = [
    # Interface
    "ICredentialForms",
    # Models
    "FormResponse",
    "FormState",
    "LoginForm",
    "LoginRequest",
    "MessageType",
    "RegistrationForm",
    "RegistrationRequest",
    # Exceptions
    "FormValidationError",
    "SubmissionInProgressError",
]
