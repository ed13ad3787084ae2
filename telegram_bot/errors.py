"""Exceptions raised while building or sending a notification."""

from typing import Optional


class NotificationError(Exception):
    """Base class for every failure the notifier reports."""


class MissingFlagError(NotificationError):
    def __init__(self, flag: str, hint: Optional[str] = None):
        self.flag = flag
        message = f"-{flag} is mandatory"
        if hint:
            message += f" ({hint})"
        super().__init__(message)


class ResponseReadError(NotificationError):
    """The response body could not be read from the connection."""


class ResponseDecodeError(NotificationError):
    """The response body was not a JSON object."""


class TelegramAPIError(NotificationError):
    """The API answered with ok=false."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"Telegram API error: {description}")


class InvalidFlagError(NotificationError):
    def __init__(self, flag: str, reason: str):
        self.flag = flag
        super().__init__(f"-{flag} {reason}")
