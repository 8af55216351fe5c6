"""
도메인 예외의 메시지/상태 코드 테스트
"""

import pytest

from app.core.exceptions import (
    InsufficientStockException,
    InvalidNameException,
    InvalidPriceException,
    InvalidStockException,
    LockAcquisitionException,
    NameConflictException,
    ProductException,
    ProductNotFoundException,
)


@pytest.mark.parametrize(
    "exc, status_code, message",
    [
        (ProductNotFoundException(1), 404, "Product not found"),
        (NameConflictException("Widget"), 409, "Product name already exists"),
        (InvalidNameException("  "), 400, "Product name is invalid"),
        (InvalidPriceException(-1.0), 400, "Price must be zero or positive"),
        (InvalidStockException(-1), 400, "Stock must be zero or positive"),
        (InsufficientStockException(1, -20, 7), 406, "Not enough stock"),
    ],
)
def test_exception_status_and_message(exc, status_code, message):
    """Test: 각 예외는 고정 메시지와 상태 코드를 가짐"""
    assert isinstance(exc, ProductException)
    assert exc.status_code == status_code
    assert exc.message == message
    assert str(exc) == message


def test_insufficient_stock_keeps_context():
    """Test: 재고 부족 예외는 상품 ID, 변화량, 현재 재고를 보존"""
    exc = InsufficientStockException(3, -20, 7)

    assert exc.product_id == 3
    assert exc.delta == -20
    assert exc.available == 7


def test_lock_acquisition_message():
    """Test: 락 획득 실패 메시지에 리소스 포함"""
    exc = LockAcquisitionException("lock:product:name:Widget")

    assert exc.status_code == 409
    assert "lock:product:name:Widget" in exc.message
