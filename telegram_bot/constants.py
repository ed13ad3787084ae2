"""
Constants for talking to the Telegram bot API.
"""

TELEGRAM_API_URL = "https://api.telegram.org"
SEND_MESSAGE_PATH = "/bot{api_key}/sendMessage"

DEFAULT_TIMEOUT_SECONDS = 30.0

# Applied in this order, so a later preset wins over an earlier one
ICON_PRESETS = (
    ("success", "2705"),
    ("warning", "26A0"),
    ("error", "1F6A8"),
    ("question", "2753"),
)

UNKNOWN_API_ERROR = "Unknown error"

# Environment fallbacks for the credentials
BOT_KEY_ENV_VAR = "TELEGRAM_BOT_KEY"
USER_ID_ENV_VAR = "TELEGRAM_USER_ID"
