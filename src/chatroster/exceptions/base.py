"""Root of the chatroster error hierarchy."""

from typing import Optional


class ChatRosterError(Exception):
    """
    Raised for any input chatroster rejects.

    `str(error)` is the short message meant for people; `technical_message`
    adds the detail that goes to the log, and `recovery_hint` (when set)
    says what to change.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
