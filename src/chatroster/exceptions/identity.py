"""Identity-related exceptions.

- IdentityError: Base class for participant identity errors
- IdentityParseError: A raw identity string or access prefix was rejected
"""

from .base import ChatRosterError


class IdentityError(ChatRosterError):
    """Participant identity is invalid."""
    pass


class IdentityParseError(IdentityError, ValueError):
    """Raw identity string could not be parsed."""

    def __init__(self, value: str, reason: str):
        """
        Initialize identity parse error.

        Args:
            value: The rejected input
            reason: Why it was rejected
        """
        super().__init__(
            user_message=f"Cannot parse identity {value!r}: {reason}",
            technical_message=f"Identity parse failed for {value!r}: {reason}",
            recovery_hint="Identities look like 'nick', 'nick!user', 'nick@host' or 'nick!user@host'",
        )
        self.value = value
        self.reason = reason
