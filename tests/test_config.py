from datetime import date

import pytest

from dashboard_data.config import AppConfig, ConfigurationError, DEFAULT_EXPIRY_CUTOFF


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DASHBOARD_OUTPUT_DIR", "DASHBOARD_SEED", "DASHBOARD_EXPIRY_CUTOFF", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = AppConfig.from_env()
    assert config.output_dir == "data/dashboard"
    assert config.seed is None
    assert config.expiry_cutoff == DEFAULT_EXPIRY_CUTOFF == date(2026, 4, 1)
    assert config.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DASHBOARD_OUTPUT_DIR", "/tmp/out")
    monkeypatch.setenv("DASHBOARD_SEED", "123")
    monkeypatch.setenv("DASHBOARD_EXPIRY_CUTOFF", "2027-01-01")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig.from_env()
    assert config.output_dir == "/tmp/out"
    assert config.seed == 123
    assert config.expiry_cutoff == date(2027, 1, 1)
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("name, value", [
    ("DASHBOARD_SEED", "abc"),
    ("DASHBOARD_EXPIRY_CUTOFF", "01/04/2026"),
    ("LOG_LEVEL", "CHATTY"),
])
def test_rejects_malformed_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        AppConfig.from_env()
