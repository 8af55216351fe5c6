"""
Redis 클라이언트 연결 관리

상품명 분산 락에만 사용합니다. 상품/재고 데이터는 Redis에 두지 않습니다.
"""

from typing import Generator

from fastapi import Depends
from redis import Redis

from app.core.config import Settings, get_settings


def create_redis_client(settings: Settings) -> Redis:
    """
    settings.redis_url로 Redis 클라이언트를 생성합니다.

    decode_responses=True이므로 락 ID 비교 시 문자열을 그대로 사용합니다.
    """
    return Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_timeout=settings.lock_timeout_seconds,
    )


def get_redis_client(
    settings: Settings = Depends(get_settings),
) -> Generator[Redis, None, None]:
    """FastAPI 의존성 주입용 Redis 클라이언트 (요청 종료 시 연결 반환)"""
    client = create_redis_client(settings)
    try:
        yield client
    finally:
        client.close()
