import pytest

from casebook.utils.runtime import (
    dev_mode_active,
    env_list,
    case_number_max_attempts,
    cors_origins,
    DEFAULT_CASE_NUMBER_MAX_ATTEMPTS,
    DEFAULT_CORS_ORIGINS,
)


def test_dev_mode_active_false_when_disabled(monkeypatch):
    monkeypatch.delenv("DEV_MODE", raising=False)
    assert dev_mode_active() is False


def test_dev_mode_active_true_for_localhost(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.setenv("APP_BASE_URL", "http://localhost:5173")
    assert dev_mode_active() is True


def test_dev_mode_active_raises_for_remote_host(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.setenv("APP_BASE_URL", "https://casebook.example.org")
    with pytest.raises(RuntimeError):
        dev_mode_active()


def test_dev_mode_allowed_for_whitelisted_host(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.setenv("APP_BASE_URL", "http://forensics-lab:8080")
    monkeypatch.setenv("DEV_MODE_ALLOWED_HOSTS", "forensics-lab")
    assert dev_mode_active() is True


def test_dev_mode_active_without_app_base_requires_allow(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.delenv("APP_BASE_URL", raising=False)
    monkeypatch.delenv("ALLOW_DEV_MODE", raising=False)
    monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
    with pytest.raises(RuntimeError):
        dev_mode_active()

    monkeypatch.setenv("ALLOW_DEV_MODE", "true")
    assert dev_mode_active() is True


def test_env_list_normalizes_entries(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAILS", ' "Chief@Example.com" , ,analyst@example.com ')
    assert env_list("ADMIN_EMAILS") == {"chief@example.com", "analyst@example.com"}


@pytest.mark.parametrize("raw,expected", [
    (None, DEFAULT_CASE_NUMBER_MAX_ATTEMPTS),
    ("12", 12),
    ("0", DEFAULT_CASE_NUMBER_MAX_ATTEMPTS),
    ("many", DEFAULT_CASE_NUMBER_MAX_ATTEMPTS),
])
def test_case_number_max_attempts(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("CASE_NUMBER_MAX_ATTEMPTS", raising=False)
    else:
        monkeypatch.setenv("CASE_NUMBER_MAX_ATTEMPTS", raw)
    assert case_number_max_attempts() == expected


def test_cors_origins(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert cors_origins() == DEFAULT_CORS_ORIGINS
    monkeypatch.setenv("CORS_ORIGINS", "https://lab.example.org, http://localhost:4000")
    assert cors_origins() == ["https://lab.example.org", "http://localhost:4000"]
