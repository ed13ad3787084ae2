"""
Data models for a single outgoing notification.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from telegram_bot.constants import DEFAULT_TIMEOUT_SECONDS
from telegram_bot.errors import InvalidFlagError, MissingFlagError


class ParseMode(Enum):
    MARKDOWN = "markdown"
    HTML = "html"

    @property
    def bold_markers(self) -> Tuple[str, str]:
        if self is ParseMode.HTML:
            return "<b>", "</b>"
        return "*", "*"


@dataclass(frozen=True)
class NotificationRequest:
    """Everything needed to send one message, as given on the command line."""
    user: str
    key: str
    text: str
    icon: str = ""
    title: str = ""
    html: bool = False
    success: bool = False
    warning: bool = False
    error: bool = False
    question: bool = False
    silent: bool = False
    log: bool = False
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def parse_mode(self) -> ParseMode:
        return ParseMode.HTML if self.html else ParseMode.MARKDOWN

    def validate(self) -> None:
        """
        Check the mandatory fields, in flag order, and the timeout.

        Raises:
            MissingFlagError: if user, key or text is empty
            InvalidFlagError: if the timeout is not positive
        """
        if not self.user:
            raise MissingFlagError("user", "user or channel ID")
        if not self.key:
            raise MissingFlagError("key")
        if not self.text:
            raise MissingFlagError("text")
        if self.timeout <= 0:
            raise InvalidFlagError("timeout", "must be greater than zero")
