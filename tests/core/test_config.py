"""
Tests for environment-driven settings.
"""

from mou_tracker.core.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_postgres_url_is_rewritten_for_asyncpg():
    settings = _settings(database_url="postgresql://user:pw@db:5432/mou")
    assert settings.database_url == "postgresql+asyncpg://user:pw@db:5432/mou"


def test_asyncpg_url_is_left_alone():
    url = "postgresql+asyncpg://user:pw@db:5432/mou"
    assert _settings(database_url=url).database_url == url


def test_cors_origins_are_split_and_trimmed():
    settings = _settings(cors_origins="http://a.test, http://b.test ,")
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def test_public_base_url_trailing_slash_is_dropped():
    assert _settings(public_base_url="https://api.test/").public_base_url == "https://api.test"


def test_environment_flags():
    assert _settings(python_env="production").is_production
    assert not _settings(python_env="production").is_development
    assert _settings(python_env="Development").is_development


def test_token_lifetime_defaults_to_one_day():
    assert _settings().access_token_expire_minutes == 1440
