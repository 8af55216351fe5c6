"""데이터 접근 계층."""

from app.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
