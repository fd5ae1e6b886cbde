"""
Local validation for the credential forms.

Runs before any identity provider call. Each check returns the message to
show, or None when the value is acceptable.
"""

import re
from typing import Optional

from shared.config import PasswordPolicy
from . import messages

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

PASSWORD_SYMBOLS = "!@#$%^&*()"
STRICT_MIN_LENGTH = 8
BASIC_MIN_LENGTH = 6


def validate_email(email: str) -> Optional[str]:
    if not EMAIL_PATTERN.search(email):
        return messages.INVALID_EMAIL_FORMAT
    return None


def validate_password(password: str, policy: PasswordPolicy) -> Optional[str]:
    """
    Check a password against a policy.

    The strict policy requires at least 8 characters with an uppercase
    letter, a lowercase letter, a digit and a symbol from PASSWORD_SYMBOLS.
    The basic policy only requires 6 characters.
    """
    if policy == PasswordPolicy.BASIC:
        if len(password) < BASIC_MIN_LENGTH:
            return messages.PASSWORD_TOO_SHORT.format(min_length=BASIC_MIN_LENGTH)
        return None

    if len(password) < STRICT_MIN_LENGTH:
        return messages.PASSWORD_TOO_SHORT.format(min_length=STRICT_MIN_LENGTH)
    if not re.search(r"[A-Z]", password):
        return messages.PASSWORD_NEEDS_UPPERCASE
    if not re.search(r"[a-z]", password):
        return messages.PASSWORD_NEEDS_LOWERCASE
    if not re.search(r"[0-9]", password):
        return messages.PASSWORD_NEEDS_DIGIT
    if not any(symbol in password for symbol in PASSWORD_SYMBOLS):
        return messages.PASSWORD_NEEDS_SYMBOL.format(symbols=PASSWORD_SYMBOLS)
    return None


def validate_confirmation(password: str, confirm_password: str) -> Optional[str]:
    if password != confirm_password:
        return messages.PASSWORDS_DO_NOT_MATCH
    return None
