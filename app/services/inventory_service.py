"""재고 확인, 예약 및 증감 서비스."""

from typing import Iterable, Optional

import structlog
from sqlalchemy.orm import Session

from app.core.exceptions import (
    InsufficientStockException,
    ProductException,
    ProductNotFoundException,
)
from app.repositories import ProductRepository
from app.schemas.product import ReservationOutcome

logger = structlog.get_logger(__name__)


class InventoryService:
    """
    재고 변경 서비스.

    모든 재고 변경은 ProductRepository.add_stock_if_non_negative의
    조건부 UPDATE를 거치므로 재고는 어떤 경우에도 음수가 되지 않습니다.
    배치 연산은 항목별로 독립 처리되며, 한 항목의 실패가 다른 항목을
    중단하거나 롤백하지 않습니다.
    """

    @staticmethod
    def check_availability(
        requests: Iterable[tuple[int, int]], db: Session
    ) -> dict[int, int]:
        """
        요청된 상품들의 현재 재고를 조회합니다.

        존재하지 않는 상품 ID는 오류 없이 결과에서 제외됩니다.

        Args:
            requests: (상품 ID, 요청 수량) 목록
            db: DB 세션

        Returns:
            {상품 ID: 현재 재고} (조회된 상품만 포함)
        """
        available: dict[int, int] = {}

        for product_id, quantity in requests:
            product = ProductRepository.find_by_id(product_id, db)
            if product is None:
                logger.warning(
                    "stock.availability_skipped",
                    product_id=product_id,
                    quantity=quantity,
                )
                continue
            available[product.id] = product.stock

        logger.info("stock.availability_checked", found=len(available))
        return available

    @staticmethod
    def reserve_one(
        product_id: int, quantity: int, db: Session
    ) -> Optional[ReservationOutcome]:
        """
        재고가 충분하면 요청 수량만큼 차감합니다.

        플로우:
        1. 상품 조회 (없으면 None 반환)
        2. 조건부 UPDATE로 재고 확인과 차감을 한 번에 수행
        3. 성공 시 커밋 후 가격이 포함된 결과 반환
        4. 재고 부족 시 재고를 변경하지 않고 가격 없는 결과 반환

        Args:
            product_id: 상품 ID
            quantity: 예약 수량 (0 이상)
            db: DB 세션

        Returns:
            ReservationOutcome, 상품이 없거나 처리 중 삭제되면 None
        """
        log = logger.bind(product_id=product_id, quantity=quantity)

        product = ProductRepository.find_by_id(product_id, db)
        if product is None:
            log.warning("stock.reserve_not_found")
            return None

        name, price = product.name, product.price

        if quantity >= 0 and ProductRepository.add_stock_if_non_negative(
            product_id, -quantity, db
        ):
            db.commit()
            db.refresh(product)
            log.info("stock.reserved", stock=product.stock)
            return ReservationOutcome(
                product_id=product_id,
                name=name,
                price=price,
                quantity=quantity,
                stock=product.stock,
            )

        db.rollback()
        # 조회와 UPDATE 사이에 삭제된 경우
        if not ProductRepository.exists_by_id(product_id, db):
            log.warning("stock.reserve_not_found")
            return None

        db.refresh(product)
        log.warning("stock.reserve_refused", stock=product.stock)
        return ReservationOutcome(
            product_id=product_id,
            name=name,
            price=None,
            quantity=quantity,
            stock=product.stock,
        )

    @staticmethod
    def reserve_many(
        requests: Iterable[tuple[int, int]], db: Session
    ) -> list[ReservationOutcome]:
        """
        여러 상품에 대해 reserve_one을 수행합니다.

        존재하지 않는 상품은 결과에서 제외됩니다.
        """
        outcomes = []
        for product_id, quantity in requests:
            outcome = InventoryService.reserve_one(product_id, quantity, db)
            if outcome is not None:
                outcomes.append(outcome)
        return outcomes

    @staticmethod
    def apply_delta(product_id: int, delta: int, db: Session) -> int:
        """
        재고에 변화량을 반영합니다 (음수: 차감, 양수: 입고).

        Args:
            product_id: 상품 ID
            delta: 재고 변화량
            db: DB 세션

        Returns:
            반영 후 재고

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            InsufficientStockException: 반영 결과가 음수가 되는 경우
        """
        log = logger.bind(product_id=product_id, delta=delta)

        product = ProductRepository.find_by_id(product_id, db)
        if product is None:
            log.warning("stock.delta_not_found")
            raise ProductNotFoundException(product_id)

        if not ProductRepository.add_stock_if_non_negative(product_id, delta, db):
            db.rollback()
            # 조회와 UPDATE 사이에 삭제된 경우
            if not ProductRepository.exists_by_id(product_id, db):
                raise ProductNotFoundException(product_id)

            db.refresh(product)
            log.warning("stock.negative_rejected", stock=product.stock)
            raise InsufficientStockException(product_id, delta, product.stock)

        db.commit()
        db.refresh(product)
        log.info("stock.delta_applied", stock=product.stock)
        return product.stock

    @staticmethod
    def apply_deltas(requests: Iterable[tuple[int, int]], db: Session) -> None:
        """
        여러 상품의 재고 변화량을 각각 독립적으로 반영합니다.

        실패한 항목(상품 없음, 재고 부족)은 로그만 남기고 건너뛰며,
        이미 반영된 다른 항목은 롤백되지 않습니다.

        Args:
            requests: (상품 ID, 변화량) 목록
            db: DB 세션
        """
        for product_id, delta in requests:
            try:
                InventoryService.apply_delta(product_id, delta, db)
            except ProductException as e:
                db.rollback()
                logger.error(
                    "stock.delta_skipped",
                    product_id=product_id,
                    delta=delta,
                    reason=e.message,
                )
