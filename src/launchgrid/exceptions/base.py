"""Root of the launchgrid exception hierarchy.

Every error raised on purpose by launchgrid derives from LaunchGridError,
so callers driving a surface can catch one type. Each error carries two
messages: a short one for the person at the device and a detailed one for
the log file.
"""

from typing import Optional


class LaunchGridError(Exception):
    """
    Base exception for launchgrid.

    Attributes:
        user_message: Short message shown by the CLI
        technical_message: Detailed message written to the log
        recoverable: False when the surface or session can no longer be used
        recovery_hint: What to change before trying again
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, as printed by the CLI."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
