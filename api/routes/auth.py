"""
Credential form endpoints.

Login, registration and sign-out. Failed submissions return 400 with the
same body shape as successful ones so the frontend can show the message.
"""

from fastapi import APIRouter, Depends, Response, status

from modules.forms.interfaces import ICredentialForms
from modules.forms.models import (
    FormResponse,
    LoginForm,
    LoginRequest,
    RegistrationForm,
    RegistrationRequest,
)
from ..dependencies import get_forms_service
from ..models import ErrorResponse

router = APIRouter()


@router.post("/login", response_model=FormResponse)
async def login(
    request: LoginRequest,
    response: Response,
    forms: ICredentialForms = Depends(get_forms_service),
) -> FormResponse:
    """Sign in with email and password."""
    form = await forms.submit_login(LoginForm(**request.model_dump()))
    if not form.succeeded:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return FormResponse.from_form(form)


@router.post("/register", response_model=FormResponse, status_code=201)
async def register(
    request: RegistrationRequest,
    response: Response,
    forms: ICredentialForms = Depends(get_forms_service),
) -> FormResponse:
    """Create an account with the chosen role."""
    form = await forms.submit_registration(RegistrationForm(**request.model_dump()))
    if not form.succeeded:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return FormResponse.from_form(form)


@router.post("/logout", status_code=204, responses={401: {"model": ErrorResponse}})
async def logout(forms: ICredentialForms = Depends(get_forms_service)) -> Response:
    """End the current session."""
    await forms.sign_out()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
