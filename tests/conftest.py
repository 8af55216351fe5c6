"""
pytest 픽스처 정의
"""

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.db.database import Base, get_db
from app.db.redis_client import get_redis_client
from app.main import app


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        database_url="sqlite:///:memory:",
        redis_host="localhost",
        redis_port=6379,
        redis_db=1,
        redis_password="",
        lock_timeout_seconds=10,
        lock_retry_attempts=3,
        lock_retry_delay_ms=10,
        log_json=True,
    )


@pytest.fixture(scope="function")
def redis_client():
    """
    테스트용 Redis 클라이언트 픽스처

    fakeredis로 Redis 서버 없이 SET NX / EVAL 동작을 재현합니다.
    """
    client = fakeredis.FakeRedis(decode_responses=True)
    client.flushdb()

    yield client

    client.flushdb()
    client.close()


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    테스트용 in-memory SQLite 데이터베이스 세션 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성하고,
    테스트 종료 후 테이블을 삭제하여 격리를 보장합니다.
    StaticPool로 TestClient의 worker 스레드와 같은 연결을 공유합니다.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def test_client(test_db, redis_client, settings):
    """각 테스트마다 테스트 데이터베이스, Redis, 설정을 주입한 TestClient"""

    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    def override_get_redis_client():
        yield redis_client

    def override_get_settings():
        return settings

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis_client] = override_get_redis_client
    app.dependency_overrides[get_settings] = override_get_settings

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
