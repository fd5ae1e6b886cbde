"""
Identity module exceptions.

Provider failures carry a code; for known failures it is a
ProviderErrorCode value, otherwise the provider's raw code.
"""

from typing import Optional, Union

from shared.exceptions import AuthenticationError
from .models import ProviderErrorCode


class IdentityProviderError(AuthenticationError):
    """Raised when the identity provider rejects or fails an operation."""

    def __init__(
        self,
        code: Union[ProviderErrorCode, str],
        message: Optional[str] = None,
    ):
        raw = code.value if isinstance(code, ProviderErrorCode) else code
        super().__init__(
            message or f"Identity provider error: {raw}",
            code=raw,
        )

    @property
    def known_code(self) -> Optional[ProviderErrorCode]:
        """The normalized code, or None if the provider code is unrecognized."""
        try:
            return ProviderErrorCode(self.code)
        except ValueError:
            return None
