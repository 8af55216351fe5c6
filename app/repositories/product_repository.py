"""상품 테이블 접근 계층."""

from typing import Optional

from sqlalchemy.orm import Session

from app.models import Product


class ProductRepository:
    """
    products 테이블에 대한 조회/저장 연산.

    트랜잭션 경계(commit/rollback)는 호출하는 서비스가 결정합니다.
    """

    @staticmethod
    def find_by_id(product_id: int, db: Session) -> Optional[Product]:
        return db.query(Product).filter(Product.id == product_id).first()

    @staticmethod
    def find_by_name(name: str, db: Session) -> Optional[Product]:
        return db.query(Product).filter(Product.name == name).first()

    @staticmethod
    def exists_by_id(product_id: int, db: Session) -> bool:
        return db.query(
            db.query(Product.id).filter(Product.id == product_id).exists()
        ).scalar()

    @staticmethod
    def exists_by_name(name: str, db: Session) -> bool:
        return db.query(
            db.query(Product.id).filter(Product.name == name).exists()
        ).scalar()

    @staticmethod
    def find_all(db: Session) -> list[Product]:
        return db.query(Product).order_by(Product.id).all()

    @staticmethod
    def save(product: Product, db: Session) -> Product:
        """
        상품을 세션에 추가하고 flush하여 ID를 할당받습니다.

        Args:
            product: 저장할 Product 객체 (신규 또는 수정된 객체)
            db: DB 세션

        Returns:
            flush된 Product 객체
        """
        db.add(product)
        db.flush()
        return product

    @staticmethod
    def delete_by_id(product_id: int, db: Session) -> int:
        """
        상품을 삭제합니다.

        Returns:
            삭제된 행 수 (0 또는 1)
        """
        return (
            db.query(Product)
            .filter(Product.id == product_id)
            .delete(synchronize_session=False)
        )

    @staticmethod
    def add_stock_if_non_negative(product_id: int, delta: int, db: Session) -> bool:
        """
        결과가 음수가 되지 않을 때만 재고에 delta를 더합니다.

        확인과 변경이 하나의 조건부 UPDATE 문으로 실행되므로
        동시 요청이 같은 재고를 읽고 둘 다 차감하는 lost update가 생기지 않습니다.

        UPDATE products SET stock = stock + :delta
        WHERE id = :id AND stock + :delta >= 0

        Args:
            product_id: 상품 ID
            delta: 재고 변화량 (음수: 차감, 양수: 입고)
            db: DB 세션

        Returns:
            변경된 행이 있으면 True, 상품이 없거나 재고가 부족하면 False
        """
        updated = (
            db.query(Product)
            .filter(Product.id == product_id, Product.stock + delta >= 0)
            .update({Product.stock: Product.stock + delta}, synchronize_session=False)
        )
        return updated == 1
