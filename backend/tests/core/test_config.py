"""Settings — defaults and environment overrides."""

from app.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)
    settings = Settings()

    assert settings.dynamodb_table_name == "UserTable"
    assert settings.dynamodb_endpoint_url is None
    assert settings.dynamodb_create_table is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DYNAMODB_TABLE_NAME", "OtherTable")
    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
    monkeypatch.setenv("DYNAMODB_CREATE_TABLE", "true")

    settings = Settings()

    assert settings.dynamodb_table_name == "OtherTable"
    assert settings.dynamodb_endpoint_url == "http://localhost:8000"
    assert settings.dynamodb_create_table is True


def test_blank_endpoint_is_none(monkeypatch):
    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "  ")
    assert Settings().dynamodb_endpoint_url is None
