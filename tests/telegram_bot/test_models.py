"""Tests for the notification request model."""

import dataclasses

import pytest

from telegram_bot.errors import InvalidFlagError, MissingFlagError, NotificationError
from telegram_bot.models import NotificationRequest, ParseMode


class TestParseMode:
    def test_markdown_markers(self):
        assert ParseMode.MARKDOWN.bold_markers == ("*", "*")

    def test_html_markers(self):
        assert ParseMode.HTML.bold_markers == ("<b>", "</b>")

    def test_request_defaults_to_markdown(self):
        request = NotificationRequest(user="1", key="k", text="t")
        assert request.parse_mode is ParseMode.MARKDOWN

    def test_html_flag_selects_html(self):
        request = NotificationRequest(user="1", key="k", text="t", html=True)
        assert request.parse_mode is ParseMode.HTML
        assert request.parse_mode.value == "html"


class TestValidate:
    def test_complete_request_passes(self):
        NotificationRequest(user="1", key="k", text="t").validate()

    @pytest.mark.parametrize(
        "fields, flag",
        [
            ({"user": "", "key": "k", "text": "t"}, "user"),
            ({"user": "1", "key": "", "text": "t"}, "key"),
            ({"user": "1", "key": "k", "text": ""}, "text"),
        ],
    )
    def test_missing_flag_is_named(self, fields, flag):
        with pytest.raises(MissingFlagError) as exc_info:
            NotificationRequest(**fields).validate()
        assert exc_info.value.flag == flag
        assert f"-{flag} is mandatory" in str(exc_info.value)

    def test_user_is_checked_first(self):
        with pytest.raises(MissingFlagError) as exc_info:
            NotificationRequest(user="", key="", text="").validate()
        assert str(exc_info.value) == "-user is mandatory (user or channel ID)"

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_is_rejected(self, timeout):
        with pytest.raises(InvalidFlagError) as exc_info:
            NotificationRequest(user="1", key="k", text="t", timeout=timeout).validate()
        assert exc_info.value.flag == "timeout"
        assert str(exc_info.value) == "-timeout must be greater than zero"

    def test_missing_flag_is_a_notification_error(self):
        with pytest.raises(NotificationError):
            NotificationRequest(user="1", key="", text="t").validate()


class TestImmutability:
    def test_request_is_frozen(self):
        request = NotificationRequest(user="1", key="k", text="t")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.text = "changed"
