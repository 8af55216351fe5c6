"""비즈니스 로직 서비스."""

from app.services.inventory_service import InventoryService
from app.services.lock_service import NameLockService
from app.services.product_service import ProductService

__all__ = ["InventoryService", "NameLockService", "ProductService"]
