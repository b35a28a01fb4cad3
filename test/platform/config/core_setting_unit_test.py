"""
Unit tests for Settings
"""

import pytest

from src.platform.config.core_setting import Settings


@pytest.mark.unit
class TestSettings:
    def test_explicit_database_url_wins(self):
        settings = Settings(DATABASE_URL='sqlite+aiosqlite://')

        assert settings.DATABASE_URL_ASYNC == 'sqlite+aiosqlite://'

    def test_database_url_built_from_postgres_parts(self, monkeypatch):
        monkeypatch.delenv('DATABASE_URL', raising=False)
        settings = Settings(
            _env_file=None,
            POSTGRES_USER='hotel',
            POSTGRES_PASSWORD='pw',
            POSTGRES_SERVER='db',
            POSTGRES_PORT=5433,
            POSTGRES_DB='hotel_db',
        )

        assert settings.DATABASE_URL_ASYNC == 'postgresql+asyncpg://hotel:pw@db:5433/hotel_db'

    @pytest.mark.parametrize(
        ('raw', 'expected'),
        [
            ('http://a.com, http://b.com', ['http://a.com', 'http://b.com']),
            ('["http://a.com"]', ['http://a.com']),
            (['http://a.com'], ['http://a.com']),
        ],
    )
    def test_cors_origins_accept_comma_or_json_list(self, raw, expected):
        assert Settings(BACKEND_CORS_ORIGINS=raw).BACKEND_CORS_ORIGINS == expected

    @pytest.mark.parametrize(
        ('raw', 'expected'),
        [
            ('http://a.com,http://b.com', ['http://a.com', 'http://b.com']),
            ('["http://a.com", "http://b.com"]', ['http://a.com', 'http://b.com']),
        ],
    )
    def test_cors_origins_from_environment(self, monkeypatch, raw, expected):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', raw)

        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == expected

    def test_strict_capacity_defaults_off(self, monkeypatch):
        monkeypatch.delenv('BOOKING_STRICT_CAPACITY', raising=False)

        assert Settings(_env_file=None).BOOKING_STRICT_CAPACITY is False

    def test_strict_capacity_from_environment(self, monkeypatch):
        monkeypatch.setenv('BOOKING_STRICT_CAPACITY', 'true')

        assert Settings(_env_file=None).BOOKING_STRICT_CAPACITY is True
