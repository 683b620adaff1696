"""配置与启动检查测试."""
import logging

import pytest

from app.core.config import Settings
from app.core.logging import setup_logging
from app.main import check_credentials, create_app


def make_settings(**overrides) -> Settings:
    values = {"CLOUDFLARE_ACCOUNT_ID": None, "CLOUDFLARE_API_TOKEN": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_allow_origins_list() -> None:
    config = make_settings(ALLOW_ORIGINS="https://a.example, https://b.example,")

    assert config.allow_origins_list == ["https://a.example", "https://b.example"]


def test_cloudflare_configured() -> None:
    assert not make_settings().cloudflare_configured
    assert not make_settings(CLOUDFLARE_ACCOUNT_ID="acc").cloudflare_configured
    assert make_settings(CLOUDFLARE_ACCOUNT_ID="acc", CLOUDFLARE_API_TOKEN="tok").cloudflare_configured


def test_check_credentials_warns_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="app.main"):
        check_credentials(make_settings())

    assert "CLOUDFLARE_ACCOUNT_ID" in caplog.text


def test_check_credentials_fail_fast() -> None:
    with pytest.raises(RuntimeError, match="Cloudflare credentials not configured"):
        check_credentials(make_settings(FAIL_FAST_ON_MISSING_CREDENTIALS=True))


def test_check_credentials_configured_is_silent(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="app.main"):
        check_credentials(make_settings(CLOUDFLARE_ACCOUNT_ID="acc", CLOUDFLARE_API_TOKEN="tok"))

    assert caplog.text == ""


def test_setup_logging_uses_debug_flag() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging(make_settings(DEBUG=True))
        assert root.level == logging.DEBUG
        setup_logging(make_settings(LOG_LEVEL="warning"))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_create_app_leaves_root_logger_untouched() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)

    create_app(make_settings(DEBUG=True, LOG_LEVEL="ERROR"))

    assert root.level == previous_level
    assert root.handlers == previous_handlers
