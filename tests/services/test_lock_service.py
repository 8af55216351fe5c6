"""Tests for NameLockService."""

import pytest
from redis import Redis

from app.core.config import Settings
from app.core.exceptions import LockAcquisitionException
from app.services.lock_service import NameLockService


class TestNameLockService:
    """Test cases for NameLockService."""

    def test_get_lock_key(self):
        """Test: 락 키 생성 테스트"""
        assert NameLockService._get_lock_key("Widget") == "lock:product:name:Widget"

    def test_acquire_lock_success(self, redis_client: Redis, settings: Settings):
        """Test: 락 획득 성공 테스트"""
        lock_id = NameLockService._acquire_lock("Widget", redis_client, settings)

        assert lock_id is not None
        assert redis_client.get("lock:product:name:Widget") == lock_id
        assert redis_client.ttl("lock:product:name:Widget") > 0

    def test_acquire_lock_already_locked(self, redis_client: Redis, settings: Settings):
        """Test: 이미 락이 점유 중일 때 획득 실패"""
        redis_client.set("lock:product:name:Widget", "existing-lock-id", ex=10)

        assert NameLockService._acquire_lock("Widget", redis_client, settings) is None

    def test_release_lock_success(self, redis_client: Redis, settings: Settings):
        """Test: 올바른 lock_id로 해제"""
        lock_id = NameLockService._acquire_lock("Widget", redis_client, settings)

        assert NameLockService._release_lock("Widget", lock_id, redis_client) is True
        assert redis_client.get("lock:product:name:Widget") is None

    def test_release_lock_wrong_id(self, redis_client: Redis, settings: Settings):
        """Test: 다른 lock_id로는 해제되지 않음"""
        NameLockService._acquire_lock("Widget", redis_client, settings)

        assert NameLockService._release_lock("Widget", "wrong-id", redis_client) is False
        assert redis_client.get("lock:product:name:Widget") is not None

    def test_acquire_with_retries_exhausted(
        self, redis_client: Redis, settings: Settings
    ):
        """Test: 재시도 횟수를 넘기면 LockAcquisitionException"""
        redis_client.set("lock:product:name:Widget", "someone-else", ex=10)

        with pytest.raises(LockAcquisitionException):
            NameLockService.acquire("Widget", redis_client, settings)

    def test_hold_releases_on_exit(self, redis_client: Redis, settings: Settings):
        """Test: with 블록 종료 후 락 해제"""
        with NameLockService.hold("Widget", redis_client, settings) as lock_id:
            assert redis_client.get("lock:product:name:Widget") == lock_id

        assert redis_client.get("lock:product:name:Widget") is None

    def test_hold_releases_on_error(self, redis_client: Redis, settings: Settings):
        """Test: 블록 안에서 예외가 나도 락 해제"""
        with pytest.raises(RuntimeError):
            with NameLockService.hold("Widget", redis_client, settings):
                raise RuntimeError("boom")

        assert redis_client.get("lock:product:name:Widget") is None
