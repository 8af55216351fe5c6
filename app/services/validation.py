"""상품 입력값 검증 규칙."""

from typing import Optional

import structlog
from sqlalchemy.orm import Session

from app.core.exceptions import (
    InvalidNameException,
    InvalidPriceException,
    InvalidStockException,
    NameConflictException,
)
from app.repositories import ProductRepository

logger = structlog.get_logger(__name__)


def validate_name(name: Optional[str], db: Session) -> None:
    """
    상품명 중복과 공백 여부를 검사합니다.

    None은 "변경 없음"으로 간주하여 통과시킵니다.

    Raises:
        NameConflictException: 같은 이름의 상품이 이미 있는 경우
        InvalidNameException: 이름이 공백뿐인 경우
    """
    if name is None:
        return

    if ProductRepository.exists_by_name(name, db):
        logger.warning("product.name_conflict", name=name)
        raise NameConflictException(name)

    if not name.strip():
        logger.warning("product.invalid_name", name=name)
        raise InvalidNameException(name)


def validate_price(price: Optional[float]) -> None:
    """가격이 주어졌고 음수이면 InvalidPriceException."""
    if price is not None and price < 0:
        logger.warning("product.invalid_price", price=price)
        raise InvalidPriceException(price)


def validate_stock(stock: Optional[int]) -> None:
    """재고가 주어졌고 음수이면 InvalidStockException."""
    if stock is not None and stock < 0:
        logger.warning("product.invalid_stock", stock=stock)
        raise InvalidStockException(stock)
