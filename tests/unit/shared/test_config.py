import pytest

from travel.shared.config import Settings


class TestSettings:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TABLE_NAME", "travel")
        monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
        monkeypatch.setenv("AWS_REGION", "ap-northeast-1")
        monkeypatch.setenv("REOPEN_CANCELLED_ON_SETTLEMENT", "false")

        settings = Settings.from_env()

        assert settings.table_name == "travel"
        assert settings.endpoint_url == "http://localhost:8000"
        assert settings.region_name == "ap-northeast-1"
        assert settings.reopen_cancelled_on_settlement is False

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("TABLE_NAME", "travel")
        monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)
        monkeypatch.delenv("REOPEN_CANCELLED_ON_SETTLEMENT", raising=False)

        settings = Settings.from_env()

        assert settings.endpoint_url is None
        assert settings.reopen_cancelled_on_settlement is True

    def test_missing_table_name(self, monkeypatch):
        monkeypatch.delenv("TABLE_NAME", raising=False)
        with pytest.raises(ValueError):
            Settings.from_env()

    def test_invalid_flag(self, monkeypatch):
        monkeypatch.setenv("TABLE_NAME", "travel")
        monkeypatch.setenv("REOPEN_CANCELLED_ON_SETTLEMENT", "maybe")
        with pytest.raises(ValueError):
            Settings.from_env()
