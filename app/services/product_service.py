"""상품 카탈로그 서비스."""

from typing import Optional

import structlog
from redis import Redis
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.exceptions import (
    PRODUCT_DELETED,
    InvalidNameException,
    NameConflictException,
    ProductException,
    ProductNotFoundException,
)
from app.models import Product
from app.repositories import ProductRepository
from app.services.lock_service import NameLockService
from app.services.validation import validate_name, validate_price, validate_stock

logger = structlog.get_logger(__name__)


class ProductService:
    """상품 생성, 조회, 수정, 삭제 서비스."""

    @staticmethod
    def _commit(product: Product, db: Session) -> Product:
        """
        변경 사항을 커밋하고 최신 상태로 갱신합니다.

        동시에 같은 이름이 저장되어 UNIQUE 제약 조건에 걸리면
        롤백 후 NameConflictException으로 변환합니다.
        그 밖의 제약 조건 위반은 그대로 다시 발생시킵니다.
        """
        name = product.name
        product_id = product.id
        try:
            ProductRepository.save(product, db)
            db.commit()
        except IntegrityError:
            db.rollback()
            holder = (
                ProductRepository.find_by_name(name, db) if name is not None else None
            )
            if holder is not None and (product_id is None or holder.id != product_id):
                logger.warning("product.name_conflict", name=name, source="constraint")
                raise NameConflictException(name)
            raise

        db.refresh(product)
        return product

    @staticmethod
    def create_product(
        name: str,
        price: Optional[float],
        stock: int,
        db: Session,
        redis: Redis,
        settings: Settings,
        description: Optional[str] = None,
    ) -> Product:
        """
        상품을 검증한 뒤 생성합니다.

        상품명 기반 분산 락 안에서 "이름 중복 확인 → INSERT"를 수행하여
        여러 인스턴스가 같은 이름을 동시에 등록하는 것을 막습니다.

        Args:
            name: 상품명
            price: 가격 (선택, 0 이상)
            stock: 초기 재고 수량 (0 이상)
            db: DB 세션
            redis: Redis 클라이언트
            settings: 애플리케이션 설정
            description: 상품 설명 (선택)

        Returns:
            생성된 Product 객체

        Raises:
            NameConflictException: 상품명 중복
            InvalidNameException: 상품명이 공백
            InvalidPriceException: 가격이 음수
            InvalidStockException: 재고가 음수
            LockAcquisitionException: 락 획득 실패
        """
        log = logger.bind(name=name)
        log.info("product.creating")

        if name is None:
            log.warning("product.invalid_name")
            raise InvalidNameException(name)

        with NameLockService.hold(name, redis, settings):
            validate_name(name, db)
            validate_price(price)
            validate_stock(stock)

            product = Product(
                name=name, description=description, price=price, stock=stock
            )
            product = ProductService._commit(product, db)

        log.info("product.created", product_id=product.id)
        return product

    @staticmethod
    def get_product(product_id: int, db: Session) -> Product:
        """
        상품 ID로 상품을 조회합니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        product = ProductRepository.find_by_id(product_id, db)
        if product is None:
            logger.warning("product.not_found", product_id=product_id)
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    def get_product_detail(product_id: int, db: Session) -> Product:
        """
        상품 상세 정보(설명 포함)를 조회합니다.

        Args:
            product_id: 상품 ID
            db: DB 세션

        Returns:
            Product 객체 (응답에서 id, name, description, price, stock 사용)

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        product = ProductService.get_product(product_id, db)
        logger.info("product.retrieved", product_id=product_id)
        return product

    @staticmethod
    def list_products(db: Session) -> list[Product]:
        """
        전체 상품 목록을 조회합니다.

        Returns:
            Product 객체 리스트 (상품이 없으면 빈 리스트)
        """
        products = ProductRepository.find_all(db)
        logger.info("product.listed", count=len(products))
        return products

    @staticmethod
    def update_product(
        product_id: int,
        db: Session,
        redis: Redis,
        settings: Settings,
        name: Optional[str] = None,
        description: Optional[str] = None,
        price: Optional[float] = None,
        stock: Optional[int] = None,
    ) -> Product:
        """
        상품을 부분 수정합니다 (None이 아닌 필드만 덮어씀).

        - 가격과 재고는 값이 바뀌지 않더라도 매번 검증합니다.
        - 상품명은 None이 아니고 현재 이름과 다를 때만 검증 후 변경합니다
          (자기 자신과의 중복으로 오인하지 않기 위함).

        Args:
            product_id: 수정할 상품 ID
            db: DB 세션
            redis: Redis 클라이언트
            settings: 애플리케이션 설정
            name: 새 상품명 (선택)
            description: 새 설명 (선택)
            price: 새 가격 (선택)
            stock: 새 재고 (선택)

        Returns:
            수정된 Product 객체

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            NameConflictException, InvalidNameException,
            InvalidPriceException, InvalidStockException: 검증 실패
        """
        log = logger.bind(product_id=product_id)
        log.info("product.updating")

        validate_price(price)
        validate_stock(stock)

        product = ProductService.get_product(product_id, db)

        if description is not None:
            product.description = description
        if price is not None:
            product.price = price
        if stock is not None:
            product.stock = stock

        if name is not None and name != product.name:
            try:
                with NameLockService.hold(name, redis, settings):
                    validate_name(name, db)
                    product.name = name
                    product = ProductService._commit(product, db)
            except ProductException:
                # 세션에 남은 부분 수정 사항 폐기
                db.rollback()
                raise
        else:
            product = ProductService._commit(product, db)

        log.info("product.updated")
        return product

    @staticmethod
    def delete_product(product_id: int, db: Session) -> str:
        """
        상품을 삭제합니다.

        Returns:
            삭제 확인 메시지

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        if not ProductRepository.exists_by_id(product_id, db):
            logger.warning("product.not_found", product_id=product_id)
            raise ProductNotFoundException(product_id)

        ProductRepository.delete_by_id(product_id, db)
        db.commit()

        logger.info("product.deleted", product_id=product_id)
        return PRODUCT_DELETED

    @staticmethod
    def exists_by_id(product_id: int, db: Session) -> bool:
        return ProductRepository.exists_by_id(product_id, db)

    @staticmethod
    def exists_by_name(name: str, db: Session) -> bool:
        return ProductRepository.exists_by_name(name, db)

    @staticmethod
    def get_id_by_name(name: str, db: Session) -> int:
        """
        상품명으로 상품 ID를 조회합니다.

        Raises:
            ProductNotFoundException: 해당 이름의 상품이 없는 경우
        """
        product = ProductRepository.find_by_name(name, db)
        if product is None:
            logger.warning("product.not_found", name=name)
            raise ProductNotFoundException(name=name)
        return product.id
