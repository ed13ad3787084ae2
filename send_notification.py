#!/usr/bin/env python3
"""
Entrypoint for sending a single Telegram notification.

Usage:
    python send_notification.py -user <chat id> -key <bot key> -text "Build finished"

    # Bold title, preset icon, silent delivery
    python send_notification.py -user 1234 -key abc:def -title Deploy -success -silent -text "All good\\nv1.2.0 is live"

Or import and use programmatically:
    from send_notification import notify
    notify("Task completed!", user="1234", key="abc:def", success=True)
"""
import argparse
import os
import sys
from typing import List, Optional

import requests

from telegram_bot.constants import BOT_KEY_ENV_VAR, DEFAULT_TIMEOUT_SECONDS, USER_ID_ENV_VAR
from telegram_bot.errors import NotificationError
from telegram_bot.models import NotificationRequest
from telegram_bot.telegram_bot import send_message


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send a notification message through a Telegram bot"
    )
    parser.add_argument(
        "-user", "--user",
        default=os.environ.get(USER_ID_ENV_VAR, ""),
        help=f"Recipient User or Channel ID (default: ${USER_ID_ENV_VAR})"
    )
    parser.add_argument(
        "-key", "--key",
        default=os.environ.get(BOT_KEY_ENV_VAR, ""),
        help=f"API Key of your Telegram bot (default: ${BOT_KEY_ENV_VAR})"
    )
    parser.add_argument(
        "-text", "--text",
        default="",
        help="Text of the message (use -text=VALUE when it starts with a dash)"
    )
    parser.add_argument(
        "-icon", "--icon",
        default="",
        help="(optional) Icon before title or message text (UTF code)"
    )
    parser.add_argument(
        "-title", "--title",
        default="",
        help="(optional) Title displayed in bold between the icon (if provided) and the message text"
    )
    parser.add_argument(
        "-html", "--html",
        action="store_true",
        help="(optional) Use html instead of markdown in the message"
    )
    parser.add_argument(
        "-success", "--success",
        action="store_true",
        help="(optional) Predefined success icon (overrides -icon argument)"
    )
    parser.add_argument(
        "-warning", "--warning",
        action="store_true",
        help="(optional) Predefined warning icon (overrides -icon argument)"
    )
    parser.add_argument(
        "-error", "--error",
        action="store_true",
        help="(optional) Predefined error icon (overrides -icon argument)"
    )
    parser.add_argument(
        "-question", "--question",
        action="store_true",
        help="(optional) Predefined question mark icon (overrides -icon argument)"
    )
    parser.add_argument(
        "-silent", "--silent",
        action="store_true",
        help="(optional) Send message in silent mode (no user notification on the client)"
    )
    parser.add_argument(
        "-log", "--log",
        action="store_true",
        help="(optional) Print the API response to stdout on success"
    )
    parser.add_argument(
        "-timeout", "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help=f"(optional) Seconds to wait for the API (default: {DEFAULT_TIMEOUT_SECONDS:g})"
    )
    return parser


def parse_request(argv: Optional[List[str]] = None) -> NotificationRequest:
    args = build_parser().parse_args(argv)
    return NotificationRequest(**vars(args))


def notify(message: str, user: str, key: str, **options) -> dict:
    """Send a notification message via Telegram."""
    return send_message(NotificationRequest(user=user, key=key, text=message, **options))


def main(argv: Optional[List[str]] = None) -> int:
    request = parse_request(argv)

    try:
        send_message(request)
    except (NotificationError, requests.RequestException) as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
