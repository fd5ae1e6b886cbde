"""
Credential forms interface.

Route handlers depend on ICredentialForms, not the concrete service.
"""

from typing import Protocol, runtime_checkable

from .models import LoginForm, RegistrationForm


@runtime_checkable
class ICredentialForms(Protocol):
    """
    Login, registration and sign-out operations.

    A form object that is submitted again while its first submission is
    still running raises SubmissionInProgressError. The HTTP routes build
    a fresh form per request, so the rejection applies to callers that
    hold on to a form object, not to concurrent HTTP requests.
    """

    async def submit_login(self, form: LoginForm) -> LoginForm:
        """
        Validate and submit a login form.

        The outcome is written to the form (message or error); provider
        and validation failures are not raised.
        """
        ...

    async def submit_registration(self, form: RegistrationForm) -> RegistrationForm:
        """
        Validate and submit a registration form.

        On success the account exists, its profile record holds the chosen
        role, and the form fields are cleared.
        """
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...
