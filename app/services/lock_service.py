"""Redis 분산 락 서비스 (상품명 단위)."""

import time
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog
from redis import Redis

from app.core.config import Settings
from app.core.exceptions import LockAcquisitionException

logger = structlog.get_logger(__name__)

# GET + 비교 + DEL을 하나의 연산으로 실행 (내가 획득한 락만 해제)
RELEASE_SCRIPT = """
if redis.call("GET", KEYS[1]) == ARGV[1] then
    return redis.call("DEL", KEYS[1])
else
    return 0
end
"""


class NameLockService:
    """
    상품명 기반 비관적 락.

    "이름 중복 확인 → INSERT/UPDATE" 사이에 다른 인스턴스가 같은 이름으로
    끼어드는 것을 막습니다. 락은 프로세스가 아닌 Redis에 있으므로
    여러 서비스 인스턴스 사이에서도 유효합니다.
    """

    @staticmethod
    def _get_lock_key(name: str) -> str:
        """
        상품명의 락 키를 생성합니다.

        Args:
            name: 상품명

        Returns:
            락 키 문자열
        """
        return f"lock:product:name:{name}"

    @staticmethod
    def _acquire_lock(name: str, redis: Redis, settings: Settings) -> Optional[str]:
        """
        TTL을 설정하여 SETNX로 락을 한 번 획득 시도합니다.

        Returns:
            획득 성공 시 락 ID (UUID), 이미 점유 중이면 None
        """
        lock_key = NameLockService._get_lock_key(name)
        lock_id = str(uuid.uuid4())

        # NX: 키가 없을 때만 설정, EX: 데드락 방지용 TTL
        acquired = redis.set(
            lock_key, lock_id, nx=True, ex=settings.lock_timeout_seconds
        )

        return lock_id if acquired else None

    @staticmethod
    def _release_lock(name: str, lock_id: str, redis: Redis) -> bool:
        """
        Lua 스크립트로 락을 원자적으로 해제합니다.

        Returns:
            락 해제 성공 시 True, 락 ID가 다르거나 락이 없으면 False
        """
        lock_key = NameLockService._get_lock_key(name)
        result = redis.eval(RELEASE_SCRIPT, 1, lock_key, lock_id)
        return bool(result)

    @staticmethod
    def acquire(name: str, redis: Redis, settings: Settings) -> str:
        """
        재시도를 포함하여 락을 획득합니다.

        Args:
            name: 상품명
            redis: Redis 클라이언트
            settings: 애플리케이션 설정 (재시도 횟수, 지연 시간)

        Returns:
            획득한 락 ID

        Raises:
            LockAcquisitionException: 최대 재시도 횟수를 초과한 경우
        """
        max_retries = settings.lock_retry_attempts
        retry_delay = settings.lock_retry_delay_ms / 1000.0  # ms를 초로 변환

        for attempt in range(max_retries):
            lock_id = NameLockService._acquire_lock(name, redis, settings)
            if lock_id is not None:
                return lock_id

            # 락 획득 실패, 지연 후 재시도
            if attempt < max_retries - 1:
                time.sleep(retry_delay)

        logger.warning("lock.acquire_failed", name=name, attempts=max_retries)
        raise LockAcquisitionException(
            NameLockService._get_lock_key(name),
            f"Failed to acquire lock after {max_retries} retries",
        )

    @staticmethod
    @contextmanager
    def hold(name: str, redis: Redis, settings: Settings) -> Iterator[str]:
        """
        with 블록 동안 상품명 락을 점유합니다.

        사용 예:
            with NameLockService.hold("Widget", redis, settings):
                validate_name("Widget", db)
                ...
        """
        lock_id = NameLockService.acquire(name, redis, settings)
        try:
            yield lock_id
        finally:
            # 항상 락 해제
            NameLockService._release_lock(name, lock_id, redis)
