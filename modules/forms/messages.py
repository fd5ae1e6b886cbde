"""User-facing messages for the credential forms."""

from modules.identity.models import ProviderErrorCode

INVALID_EMAIL_FORMAT = "Por favor, introduce un correo electrónico válido."
PASSWORD_TOO_SHORT = "La contraseña debe tener al menos {min_length} caracteres."
PASSWORD_NEEDS_UPPERCASE = "La contraseña debe contener al menos una letra mayúscula."
PASSWORD_NEEDS_LOWERCASE = "La contraseña debe contener al menos una letra minúscula."
PASSWORD_NEEDS_DIGIT = "La contraseña debe contener al menos un número."
PASSWORD_NEEDS_SYMBOL = "La contraseña debe contener al menos un símbolo ({symbols})."
PASSWORDS_DO_NOT_MATCH = "Las contraseñas no coinciden."
SUBMISSION_IN_PROGRESS = "Ya hay una solicitud en curso."

LOGIN_SUCCESS = "¡Inicio de sesión exitoso!"
REGISTRATION_SUCCESS = "¡Registro exitoso! Ya puedes iniciar sesión."

UNKNOWN_ERROR_TEMPLATE = "Error: {message} ({code})"

PROVIDER_ERROR_MESSAGES: dict[ProviderErrorCode, str] = {
    ProviderErrorCode.INVALID_EMAIL: "El formato del correo electrónico es inválido.",
    ProviderErrorCode.USER_DISABLED: "Este usuario ha sido deshabilitado.",
    ProviderErrorCode.USER_NOT_FOUND: "Correo electrónico o contraseña incorrectos.",
    ProviderErrorCode.WRONG_PASSWORD: "Correo electrónico o contraseña incorrectos.",
    ProviderErrorCode.TOO_MANY_REQUESTS: (
        "Demasiados intentos fallidos. Por favor, inténtalo más tarde."
    ),
    ProviderErrorCode.NETWORK_REQUEST_FAILED: (
        "Problema de conexión a la red. Inténtalo de nuevo."
    ),
    ProviderErrorCode.EMAIL_ALREADY_IN_USE: "Este correo electrónico ya está en uso.",
    ProviderErrorCode.WEAK_PASSWORD: "La contraseña es demasiado débil.",
}


def provider_error_message(code: str, message: str) -> str:
    """Message for a provider error code, templated for unknown codes."""
    try:
        return PROVIDER_ERROR_MESSAGES[ProviderErrorCode(code)]
    except ValueError:
        return UNKNOWN_ERROR_TEMPLATE.format(message=message, code=code)
