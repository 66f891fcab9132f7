"""Unit tests for Gmail configuration loading."""

import dataclasses
from itertools import combinations

import pytest

from src.gmail import ConfigurationError, GmailConfig, load_config

REQUIRED = {
    "GOOGLE_CLIENT_ID": "test-client-id",
    "GOOGLE_CLIENT_SECRET": "test-client-secret",
    "GOOGLE_REFRESH_TOKEN": "test-refresh-token",
    "GMAIL_USER_EMAIL": "test@example.com",
}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_loads_required_fields(self):
        cfg = load_config(REQUIRED)
        assert cfg.client_id == "test-client-id"
        assert cfg.client_secret == "test-client-secret"
        assert cfg.refresh_token == "test-refresh-token"
        assert cfg.user_email == "test@example.com"

    def test_optional_fields_absent_are_none(self):
        """Unset optional variables become None, not empty strings."""
        cfg = load_config(REQUIRED)
        assert cfg.intake_label is None
        assert cfg.processed_label is None
        assert cfg.query is None

    def test_optional_fields_passed_through_verbatim(self):
        env = {
            **REQUIRED,
            "GMAIL_LABEL_INTAKE": "Label_123",
            "GMAIL_LABEL_PROCESSED": "Label_456",
            "GMAIL_QUERY": "  from:boss@example.com is:unread ",
        }
        cfg = load_config(env)
        assert cfg.intake_label == "Label_123"
        assert cfg.processed_label == "Label_456"
        assert cfg.query == "  from:boss@example.com is:unread "

    @pytest.mark.parametrize(
        "missing",
        [
            combo
            for n in range(1, len(REQUIRED) + 1)
            for combo in combinations(REQUIRED, n)
        ],
    )
    def test_error_lists_exactly_the_missing_fields(self, missing):
        env = {k: v for k, v in REQUIRED.items() if k not in missing}

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(env)

        message = str(exc_info.value)
        assert exc_info.value.missing == list(missing)
        for name in missing:
            assert name in message
        for name in set(REQUIRED) - set(missing):
            assert name not in message

    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_value_treated_as_missing(self, blank):
        env = {**REQUIRED, "GOOGLE_CLIENT_SECRET": blank}

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(env)

        assert exc_info.value.missing == ["GOOGLE_CLIENT_SECRET"]

    def test_reads_process_environment_by_default(self, monkeypatch):
        for name in ("GMAIL_LABEL_INTAKE", "GMAIL_LABEL_PROCESSED", "GMAIL_QUERY"):
            monkeypatch.delenv(name, raising=False)
        for name, value in REQUIRED.items():
            monkeypatch.setenv(name, value)

        cfg = load_config()

        assert cfg.user_email == "test@example.com"

    def test_is_idempotent(self):
        assert load_config(REQUIRED) == load_config(REQUIRED)


class TestGmailConfig:
    """Tests for the GmailConfig value."""

    def test_is_immutable(self):
        cfg = load_config(REQUIRED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.user_email = "other@example.com"

    def test_repr_hides_secrets(self):
        cfg = GmailConfig(
            client_id="id",
            client_secret="super-secret",
            refresh_token="refresh-me",
            user_email="me@example.com",
        )
        text = repr(cfg)
        assert "super-secret" not in text
        assert "refresh-me" not in text
        assert "me@example.com" in text
