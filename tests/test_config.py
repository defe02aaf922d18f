import pydantic
import pytest

from core.config import AppSettings, get_user_config_dir


def test_defaults_match_original_batch():
    settings = AppSettings()

    assert settings.target_url == "http://localhost:3000/namespaces"
    assert settings.request_count == 3
    assert settings.http_method == "GET"
    assert settings.content_type == "application/json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("NS_FANOUT_TARGET_URL", "http://127.0.0.1:9000/namespaces")
    monkeypatch.setenv("NS_FANOUT_REQUEST_COUNT", "10")

    settings = AppSettings()

    assert settings.target_url == "http://127.0.0.1:9000/namespaces"
    assert settings.request_count == 10


def test_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("NS_FANOUT_REQUEST_COUNT=7\n", encoding="utf-8")

    assert AppSettings().request_count == 7


def test_negative_count_rejected(monkeypatch):
    monkeypatch.setenv("NS_FANOUT_REQUEST_COUNT", "-1")

    with pytest.raises(pydantic.ValidationError):
        AppSettings()


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "ns-fanout"


def test_large_count_accepted(monkeypatch):
    monkeypatch.setenv("NS_FANOUT_REQUEST_COUNT", "50000")

    assert AppSettings().request_count == 50000
