"""
Credential forms service implementation.

Validates form input locally, then calls the identity provider. Provider
error codes are turned into fixed user messages.
"""

import logging
from typing import Optional

from modules.identity.exceptions import IdentityProviderError
from modules.identity.interfaces import IIdentityProvider
from modules.profiles.exceptions import ProfileStoreError
from modules.profiles.interfaces import IProfileStore
from modules.profiles.models import ProfileRecord
from shared.config import PasswordPolicy

from . import messages
from .exceptions import FormValidationError, SubmissionInProgressError
from .interfaces import ICredentialForms
from .models import FormState, LoginForm, RegistrationForm
from .validation import validate_confirmation, validate_email, validate_password

logger = logging.getLogger(__name__)


def _check(error: Optional[str], field: str) -> None:
    if error:
        raise FormValidationError(error, field=field)


class CredentialFormsService(ICredentialForms):
    """
    Implementation of the credential forms.

    Login always uses the basic password policy; registration uses the
    configured one.
    """

    def __init__(
        self,
        identity: IIdentityProvider,
        profiles: IProfileStore,
        namespace: str,
        registration_policy: PasswordPolicy = PasswordPolicy.STRICT,
    ):
        self._identity = identity
        self._profiles = profiles
        self._namespace = namespace
        self._registration_policy = registration_policy

    async def submit_login(self, form: LoginForm) -> LoginForm:
        """
        Raises:
            SubmissionInProgressError: If the form is already being submitted
        """
        self._begin(form)
        try:
            _check(validate_email(form.email), "email")
            _check(validate_password(form.password, PasswordPolicy.BASIC), "password")

            session = await self._identity.sign_in_with_password(form.email, form.password)
            logger.info(f"User {session.user_id} signed in")
            form.succeed(messages.LOGIN_SUCCESS)
        except FormValidationError as e:
            form.fail(e.message)
        except IdentityProviderError as e:
            self._fail_from_provider(form, e, "Login")
        finally:
            form.in_flight = False
        return form

    async def submit_registration(self, form: RegistrationForm) -> RegistrationForm:
        """
        Raises:
            SubmissionInProgressError: If the form is already being submitted
        """
        self._begin(form)
        try:
            _check(validate_email(form.email), "email")
            _check(validate_password(form.password, self._registration_policy), "password")
            _check(validate_confirmation(form.password, form.confirm_password), "confirm_password")

            session = await self._identity.create_account(form.email, form.password)
            record = ProfileRecord.for_role(form.role, session.email or form.email)
            await self._profiles.set_profile(self._namespace, session.user_id, record)

            logger.info(f"Registered user {session.user_id} as {form.role.value}")
            form.succeed(messages.REGISTRATION_SUCCESS)
            form.clear()
        except FormValidationError as e:
            form.fail(e.message)
        except IdentityProviderError as e:
            self._fail_from_provider(form, e, "Registration")
        except ProfileStoreError as e:
            logger.exception("Account created but its profile record could not be stored")
            form.fail(messages.UNKNOWN_ERROR_TEMPLATE.format(message=e.message, code=e.code))
        finally:
            form.in_flight = False
        return form

    async def sign_out(self) -> None:
        await self._identity.sign_out()
        logger.info("Signed out")

    def _begin(self, form: FormState) -> None:
        if form.in_flight:
            raise SubmissionInProgressError(messages.SUBMISSION_IN_PROGRESS)
        form.begin()

    def _fail_from_provider(
        self,
        form: FormState,
        error: IdentityProviderError,
        action: str,
    ) -> None:
        if error.known_code is None:
            logger.error(f"{action} failed with unrecognized provider code {error.code}: {error.message}")
        form.fail(messages.provider_error_message(error.code, error.message))
