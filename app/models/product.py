"""
Product 모델
"""

from datetime import datetime
from sqlalchemy import CheckConstraint, Column, Float, Integer, String, Text, DateTime
from app.db.database import Base


class Product(Base):
    """
    상품 모델

    Attributes:
        id: 상품 고유 ID (Primary Key)
        name: 상품명 (Unique, Not Null)
        description: 상품 설명 (Nullable)
        price: 가격 (Nullable, 0 이상)
        stock: 현재 재고 수량 (Not Null, 0 이상)
        created_at: 생성 일시 (자동 설정)
        updated_at: 수정 일시 (자동 업데이트)
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint(
            "price IS NULL OR price >= 0", name="ck_products_price_non_negative"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    # 모든 DB에서 float로 로드됨
    price = Column(Float, nullable=True)
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"
