"""
상품 카탈로그 및 재고 API 엔드포인트

상품 CRUD, 재고 가용성 확인, 재고 예약 및 주문 확정 시 재고 반영 기능을 제공합니다.
서비스에서 발생한 도메인 예외는 각 예외의 status_code로 변환됩니다.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from redis import Redis
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.exceptions import PRODUCTS_UPDATED, ProductException
from app.db.database import get_db
from app.db.redis_client import get_redis_client
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
from app.services.inventory_service import InventoryService
from app.services.product_service import ProductService


router = APIRouter()


def _to_http(e: ProductException) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/products", response_model=List[ProductSummaryResponse])
def list_products(db: Session = Depends(get_db)):
    """
    모든 상품 목록을 조회합니다.

    Returns:
        List[ProductSummaryResponse]: 상품 요약 목록 (상품이 없으면 빈 목록)

    Example:
        Response (200):
        ```json
        [{"id": 1, "name": "Widget", "price": 5.0, "stock": 10}]
        ```
    """
    return ProductService.list_products(db)


@router.post(
    "/products",
    response_model=ProductDetailResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreateRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
):
    """
    새 상품을 생성합니다.

    Raises:
        HTTPException 400: 상품명 공백, 가격/재고 음수
        HTTPException 409: 상품명 중복 또는 락 획득 실패

    Example:
        Request:
        ```json
        {"name": "Widget", "description": "desc", "price": 5.0, "stock": 10}
        ```

        Response (201):
        ```json
        {"id": 1, "name": "Widget", "description": "desc", "price": 5.0, "stock": 10}
        ```
    """
    try:
        return ProductService.create_product(
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock=product_data.stock,
            db=db,
            redis=redis,
            settings=settings,
        )

    except ProductException as e:
        raise _to_http(e)


@router.put("/products/availability", response_model=Dict[int, int])
def check_availability(
    requests: List[StockRequest],
    db: Session = Depends(get_db),
):
    """
    요청된 상품들의 현재 재고를 조회합니다.

    존재하지 않는 상품은 결과에서 제외됩니다.

    Example:
        Request:
        ```json
        [{"id": 1, "quantity": 5}, {"id": 999, "quantity": 1}]
        ```

        Response (200):
        ```json
        {"1": 10}
        ```
    """
    return InventoryService.check_availability(
        [(item.id, item.quantity) for item in requests], db
    )


@router.put("/products/reserve", response_model=MessageResponse)
def apply_order_quantities(
    requests: List[StockRequest],
    db: Session = Depends(get_db),
):
    """
    주문 확정에 따라 재고 변화량을 반영합니다.

    각 항목은 독립적으로 처리되며, 실패한 항목(상품 없음, 재고 부족)은
    건너뜁니다. 모든 항목을 시도한 뒤 항상 같은 메시지를 반환합니다.

    Example:
        Request:
        ```json
        [{"id": 1, "quantity": -3}, {"id": 2, "quantity": 5}]
        ```

        Response (200):
        ```json
        {"message": "Products updated successfully"}
        ```
    """
    InventoryService.apply_deltas([(item.id, item.quantity) for item in requests], db)
    return MessageResponse(message=PRODUCTS_UPDATED)


@router.put("/products/reservations", response_model=List[ReservationOutcome])
def reserve_products(
    requests: List[ReservationRequest],
    db: Session = Depends(get_db),
):
    """
    재고가 충분한 상품만 요청 수량만큼 예약(차감)합니다.

    재고가 부족한 상품은 price가 null인 결과로 반환되며 재고는 변경되지 않습니다.
    존재하지 않는 상품은 결과에서 제외됩니다.

    Example:
        Response (200):
        ```json
        [
            {"product_id": 1, "name": "Widget", "price": 5.0, "quantity": 2, "stock": 8},
            {"product_id": 2, "name": "Gadget", "price": null, "quantity": 50, "stock": 3}
        ]
        ```
    """
    return InventoryService.reserve_many(
        [(item.id, item.quantity) for item in requests], db
    )


@router.get("/products/by-name/{name}", response_model=ProductIdResponse)
def get_product_id_by_name(name: str, db: Session = Depends(get_db)):
    """
    상품명으로 상품 ID를 조회합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        return ProductIdResponse(id=ProductService.get_id_by_name(name, db))

    except ProductException as e:
        raise _to_http(e)


@router.get("/products/{product_id}", response_model=ProductDetailResponse)
def get_product(product_id: int, db: Session = Depends(get_db)):
    """
    특정 상품의 상세 정보를 조회합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우

    Example:
        Response (200):
        ```json
        {"id": 1, "name": "Widget", "description": "desc", "price": 5.0, "stock": 10}
        ```
    """
    try:
        return ProductService.get_product_detail(product_id, db)

    except ProductException as e:
        raise _to_http(e)


@router.put("/products/{product_id}", response_model=ProductSummaryResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdateRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
):
    """
    상품을 부분 수정합니다 (null 필드는 변경하지 않음).

    Raises:
        HTTPException 400: 상품명 공백, 가격/재고 음수
        HTTPException 404: 상품을 찾을 수 없는 경우
        HTTPException 409: 상품명 중복
    """
    try:
        return ProductService.update_product(
            product_id,
            db=db,
            redis=redis,
            settings=settings,
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock=product_data.stock,
        )

    except ProductException as e:
        raise _to_http(e)


@router.delete("/products/{product_id}", response_model=MessageResponse)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """
    상품을 삭제합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        return MessageResponse(message=ProductService.delete_product(product_id, db))

    except ProductException as e:
        raise _to_http(e)
