import pytest
from pydantic import ValidationError

from movie_api.core.config import Settings, validate_settings


def make_settings(tmp_path, **overrides):
    overrides.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    return Settings(UPLOAD_DIR=tmp_path / "uploads", **overrides)


@pytest.mark.parametrize("url", [
    "postgres://user:pass@db:5432/movies",
    "postgresql://user:pass@db:5432/movies",
])
def test_postgres_urls_use_asyncpg(tmp_path, url):
    config = make_settings(tmp_path, DATABASE_URL=url)

    assert config.DATABASE_URL == "postgresql+asyncpg://user:pass@db:5432/movies"
    assert not config.is_sqlite


def test_unsupported_database_url(tmp_path):
    with pytest.raises(ValidationError):
        make_settings(tmp_path, DATABASE_URL="mysql://user:pass@db/movies")


def test_upload_dir_is_created(tmp_path):
    config = make_settings(tmp_path)

    assert config.UPLOAD_DIR.is_dir()


def test_image_types_are_normalized(tmp_path):
    config = make_settings(tmp_path, ALLOWED_IMAGE_TYPES=["JPG", ".PNG"])

    assert config.ALLOWED_IMAGE_TYPES == [".jpg", ".png"]


def test_invalid_log_level(tmp_path):
    with pytest.raises(ValidationError):
        make_settings(tmp_path, LOG_LEVEL="LOUD")


def test_production_problems_are_reported(tmp_path):
    config = make_settings(tmp_path, ENVIRONMENT="production", DEBUG=True)

    problems = validate_settings(config)

    assert "DEBUG should be False in production" in problems
    assert "ALLOWED_HOSTS should be restricted in production" in problems
    assert "SQLite should not be used in production" in problems


def test_sane_development_settings(tmp_path):
    assert validate_settings(make_settings(tmp_path)) == []


def test_core_exports_only_live_settings_helpers():
    import movie_api.core as core
    from movie_api.core import config

    assert "settings" in core.__all__
    assert "get_settings" not in core.__all__
    assert not hasattr(config, "get_settings")
    assert not hasattr(Settings, "database_config")
