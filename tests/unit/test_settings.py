import pytest
from pydantic import ValidationError

from canada_spends.config import Settings, get_settings
from canada_spends.tax import Jurisdiction


def test_defaults(monkeypatch):
    for key in (
        "CANADA_SPENDS_DEFAULT_YEAR",
        "CANADA_SPENDS_DEFAULT_JURISDICTION",
        "CANADA_SPENDS_LOG_LEVEL",
        "BUILD_VERSION",
        "BUILD_SHA",
    ):
        monkeypatch.delenv(key, raising=False)
    settings = Settings()
    assert settings.default_year == "2024"
    assert settings.default_jurisdiction is Jurisdiction.ONTARIO
    assert settings.log_level == "INFO"
    assert settings.build_version == "dev"
    assert settings.build_sha == "local"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CANADA_SPENDS_DEFAULT_YEAR", " 2025 ")
    monkeypatch.setenv("CANADA_SPENDS_DEFAULT_JURISDICTION", "QC")
    monkeypatch.setenv("CANADA_SPENDS_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.default_year == "2025"
    assert settings.default_jurisdiction is Jurisdiction.QUEBEC
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == 10
    assert get_settings() is settings


@pytest.mark.parametrize(
    "key,value",
    [
        ("CANADA_SPENDS_DEFAULT_YEAR", "next"),
        ("CANADA_SPENDS_DEFAULT_JURISDICTION", "atlantis"),
        ("CANADA_SPENDS_LOG_LEVEL", "loud"),
    ],
)
def test_invalid_environment_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        Settings()


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.default_year = "2023"
