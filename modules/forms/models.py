"""
Credential forms data models.

Form state objects are owned by a single submission: the service fills in
the outcome (error or message) and clears the in-flight flag when done.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.profiles.models import Role


class MessageType(str, Enum):
    """How a form message should be presented."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class FormState(BaseModel):
    """Outcome fields shared by all credential forms."""

    error: Optional[str] = None
    message: Optional[str] = None
    message_type: MessageType = MessageType.INFO
    in_flight: bool = False

    @property
    def succeeded(self) -> bool:
        return self.message_type == MessageType.SUCCESS

    def begin(self) -> None:
        self.error = None
        self.message = None
        self.message_type = MessageType.INFO
        self.in_flight = True

    def succeed(self, message: str) -> None:
        self.message = message
        self.message_type = MessageType.SUCCESS

    def fail(self, error: str) -> None:
        self.error = error
        self.message_type = MessageType.ERROR


class LoginForm(FormState):
    """Login form fields."""

    email: str = ""
    password: str = ""


class RegistrationForm(FormState):
    """Registration form fields."""

    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: Role = Role.CLIENT

    def clear(self) -> None:
        """Reset the fields after a successful registration."""
        self.email = ""
        self.password = ""
        self.confirm_password = ""
        self.role = Role.CLIENT


class LoginRequest(BaseModel):
    """Login submission."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class RegistrationRequest(BaseModel):
    """Registration submission."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")
    confirm_password: str = Field(..., description="Password confirmation")
    role: Role = Field(default=Role.CLIENT, description="Requested role")


class FormResponse(BaseModel):
    """Result of a form submission."""

    success: bool
    message: str
    message_type: MessageType

    @classmethod
    def from_form(cls, form: FormState) -> "FormResponse":
        return cls(
            success=form.succeeded,
            message=(form.message if form.succeeded else form.error) or "",
            message_type=form.message_type,
        )
