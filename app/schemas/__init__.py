"""
Pydantic 스키마 모듈
"""

from app.schemas.product import (
    MessageResponse,
    ProductCreateRequest,
    ProductDetailResponse,
    ProductIdResponse,
    ProductSummaryResponse,
    ProductUpdateRequest,
    ReservationOutcome,
    ReservationRequest,
    StockRequest,
)

__all__ = [
    "MessageResponse",
    "ProductCreateRequest",
    "ProductDetailResponse",
    "ProductIdResponse",
    "ProductSummaryResponse",
    "ProductUpdateRequest",
    "ReservationOutcome",
    "ReservationRequest",
    "StockRequest",
]
