"""
구조화 로깅 및 상관관계 ID 미들웨어 테스트
"""

import json
import logging
import uuid

import structlog

from app.core.config import Settings
from app.core.logging import configure_logging


class TestConfigureLogging:
    """structlog 설정 테스트"""

    def test_json_output_includes_bound_context(self, capsys):
        """Test: contextvars에 바인딩한 값이 JSON 로그에 포함"""
        configure_logging(Settings(log_json=True, log_level="INFO"))
        structlog.contextvars.bind_contextvars(correlation_id="cid-123")

        try:
            structlog.get_logger("tests.logging").info("stock.reserved", product_id=1)
        finally:
            structlog.contextvars.clear_contextvars()

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        record = json.loads(lines[-1])

        assert record["event"] == "stock.reserved"
        assert record["product_id"] == 1
        assert record["correlation_id"] == "cid-123"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_reconfigure_does_not_duplicate_handlers(self):
        """Test: 여러 번 설정해도 structlog 핸들러는 하나"""
        configure_logging(Settings(log_json=True))
        configure_logging(Settings(log_json=False))

        handlers = [
            h
            for h in logging.getLogger().handlers
            if isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
        ]
        assert len(handlers) == 1


class TestCorrelationIdMiddleware:
    """X-Request-ID 미들웨어 테스트"""

    def test_returns_provided_request_id(self, test_client):
        """Test: 요청 헤더의 ID를 그대로 응답"""
        response = test_client.get("/health", headers={"X-Request-ID": "my-request-id"})

        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == "my-request-id"

    def test_generates_uuid_when_missing(self, test_client):
        """Test: 헤더가 없으면 UUID4 생성"""
        response = test_client.get("/health")

        request_id = response.headers["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id
