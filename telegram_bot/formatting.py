"""
Turns the raw text flags into the message body sent to Telegram.
"""

import re
import sys
from typing import Optional

from telegram_bot.constants import ICON_PRESETS
from telegram_bot.models import NotificationRequest, ParseMode
from util.logging_util import setup_logger

logger = setup_logger(__name__, stream=sys.stderr)

ESCAPED_NEWLINE = "\\n"

HEX_CODE = re.compile(r"[+-]?[0-9A-Fa-f]+")
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
MAX_CODE_POINT = 0x10FFFF
SURROGATES_START = 0xD800
SURROGATES_END = 0xDFFF
REPLACEMENT_CHARACTER = "\ufffd"


def decode_newlines(text: str, newline: str = "\n") -> str:
    """Replace every literal backslash-n with a real line break."""
    return text.replace(ESCAPED_NEWLINE, newline)


def add_title(text: str, title: str, parse_mode: ParseMode) -> str:
    if not title:
        return text
    bold_start, bold_end = parse_mode.bold_markers
    return f"{bold_start}{title}{bold_end}\n\n{text}"


def resolve_icon(request: NotificationRequest) -> str:
    """
    Work out which icon code to use. Each preset that is set overwrites
    whatever came before it, including the explicit icon.
    """
    icon = request.icon
    for preset, code in ICON_PRESETS:
        if getattr(request, preset):
            icon = code
    return icon


def icon_glyph(code: str) -> Optional[str]:
    """
    Convert a hex code point to its character.

    Only plain hex digits with an optional sign are accepted, and the value
    has to fit in a signed 32-bit integer. Anything that parses but isn't a
    usable code point becomes U+FFFD.

    Returns None (after warning on stderr) when the code can't be parsed.
    """
    value = int(code, 16) if HEX_CODE.fullmatch(code) else None
    if value is None or not INT32_MIN <= value <= INT32_MAX:
        logger.warning(f"Error parsing UTF code {code!r} to int - sending message without icon")
        return None

    # out-of-range values and lone surrogates render as the replacement character
    if not 0 <= value <= MAX_CODE_POINT or SURROGATES_START <= value <= SURROGATES_END:
        return REPLACEMENT_CHARACTER
    return chr(value)


def format_message(request: NotificationRequest) -> str:
    """
    Build the final message text.

    Args:
        request: the notification being sent

    Returns:
        The body with newlines decoded, the bold title and the icon prepended
    """
    text = decode_newlines(request.text)
    text = add_title(text, request.title, request.parse_mode)

    icon = resolve_icon(request)
    if icon:
        glyph = icon_glyph(icon)
        if glyph is not None:
            text = f"{glyph} {text}"

    return text
