"""Shared fixtures for logbrowser tests."""

import pytest


@pytest.fixture
def aws_credentials(monkeypatch, tmp_path):
    """Fake credentials and an isolated AWS config for moto-backed tests."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove logbrowser and AWS region/profile variables from the environment."""
    for name in (
        "LOGBROWSER_REGION",
        "LOGBROWSER_PROFILE",
        "LOGBROWSER_LOG_FILE",
        "LOGBROWSER_LOG_LEVEL",
        "LOGBROWSER_TITLE",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWS_PROFILE",
    ):
        monkeypatch.delenv(name, raising=False)
