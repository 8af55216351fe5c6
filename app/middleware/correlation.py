"""
요청 상관관계 ID 미들웨어

X-Request-ID 헤더를 읽거나(없으면 UUID4 생성) structlog contextvars에
correlation_id로 바인딩하여, 요청 처리 중 남는 모든 로그에 포함시킵니다.
"""

import uuid

import structlog
from fastapi import FastAPI, Request

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


def add_correlation_id(app: FastAPI) -> None:
    """앱에 상관관계 ID 미들웨어를 등록합니다."""

    @app.middleware("http")
    async def correlation_id_mw(request: Request, call_next):
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info("request_started", method=request.method, path=request.url.path)

        response = await call_next(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )

        response.headers[REQUEST_ID_HEADER] = cid
        return response
