"""
설정(Config) 관련 테스트
"""

from app.core.config import Settings


def test_config_from_env(monkeypatch):
    """환경 변수로부터 설정을 로드하는지 테스트"""
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/catalog")
    monkeypatch.setenv("REDIS_HOST", "test-redis")
    monkeypatch.setenv("REDIS_PORT", "6380")
    monkeypatch.setenv("LOCK_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("LOG_JSON", "false")

    settings = Settings()

    assert settings.database_url == "postgresql://user:pw@db:5432/catalog"
    assert settings.redis_host == "test-redis"
    assert settings.redis_port == 6380
    assert settings.lock_retry_attempts == 5
    assert settings.log_json is False
    assert settings.is_sqlite is False


def test_config_defaults(monkeypatch):
    """환경 변수가 없을 때 기본값 사용"""
    for key in ("DATABASE_URL", "REDIS_HOST", "REDIS_PASSWORD", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url.startswith("sqlite")
    assert settings.is_sqlite is True
    assert settings.log_level == "INFO"


def test_redis_url_with_and_without_password():
    """Redis URL 생성 테스트"""
    settings = Settings(redis_host="cache", redis_port=6379, redis_db=2, redis_password="")
    assert settings.redis_url == "redis://cache:6379/2"

    settings = Settings(
        redis_host="cache", redis_port=6379, redis_db=2, redis_password="secret"
    )
    assert settings.redis_url == "redis://:secret@cache:6379/2"
