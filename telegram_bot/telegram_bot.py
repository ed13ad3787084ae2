"""
Sends a formatted notification to the Telegram bot API and checks the reply.
"""

import json
from urllib.parse import quote

import requests

from telegram_bot.constants import SEND_MESSAGE_PATH, TELEGRAM_API_URL, UNKNOWN_API_ERROR
from telegram_bot.errors import ResponseDecodeError, ResponseReadError, TelegramAPIError
from telegram_bot.formatting import format_message
from telegram_bot.models import NotificationRequest
from util.logging_util import log_api_response, log_telegram_message_sent, setup_logger

logger = setup_logger(__name__)


def get_send_message_url(api_key: str) -> str:
    return TELEGRAM_API_URL + SEND_MESSAGE_PATH.format(api_key=quote(api_key, safe=":"))


def build_payload(request: NotificationRequest, text: str) -> dict:
    """Form fields for the sendMessage call."""
    return {
        "parse_mode": request.parse_mode.value,
        "chat_id": request.user,
        "text": text,
        "disable_notification": str(request.silent).lower(),
    }


def parse_api_response(body: bytes) -> dict:
    """
    Check the JSON envelope Telegram wraps every reply in.

    A 200 response doesn't guarantee the message went out, so the ``ok``
    field is what decides.

    Args:
        body: raw response body

    Returns:
        The decoded envelope

    Raises:
        ResponseDecodeError: if the body isn't a JSON object
        TelegramAPIError: if the API reports ok=false
    """
    try:
        envelope = json.loads(body)
    except ValueError as e:
        raise ResponseDecodeError(f"Couldn't decode API response. {e}") from e

    if not isinstance(envelope, dict):
        raise ResponseDecodeError(f"Unexpected API response: {envelope!r}")

    if envelope.get("ok") is not True:
        raise TelegramAPIError(envelope.get("description") or UNKNOWN_API_ERROR)

    return envelope


def send_message(request: NotificationRequest) -> dict:
    """
    Validate, format and POST a single notification.

    Args:
        request: the notification to send

    Returns:
        The API envelope of a successful send

    Raises:
        MissingFlagError: before any network I/O, if a mandatory field is empty
        InvalidFlagError: before any network I/O, if the timeout is not positive
        requests.RequestException: on connection, DNS or TLS failures
        ResponseReadError: if the body can't be read
        ResponseDecodeError: if the body isn't a JSON object
        TelegramAPIError: if the API reports a failure
    """
    request.validate()
    text = format_message(request)

    response = requests.post(
        get_send_message_url(request.key),
        data=build_payload(request, text),
        timeout=request.timeout,
        stream=True,
    )
    with response:
        try:
            body = response.content
        except requests.RequestException as e:
            raise ResponseReadError(f"Couldn't read response body. {e}") from e

    envelope = parse_api_response(body)

    if request.log:
        log_telegram_message_sent(logger, request.user, text)
        log_api_response(logger, body)

    return envelope
