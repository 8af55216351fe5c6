"""
커스텀 예외 정의

상품 카탈로그와 재고 처리에서 사용되는 예외 클래스들입니다.
각 예외는 고정된 메시지와 HTTP 상태 코드를 가지며, 라우터에서
HTTPException으로 변환됩니다.
"""

PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_EXISTS = "Product name already exists"
INVALID_NAME = "Product name is invalid"
INVALID_PRICE = "Price must be zero or positive"
INVALID_STOCK = "Stock must be zero or positive"
NOT_ENOUGH_STOCK = "Not enough stock"
PRODUCTS_UPDATED = "Products updated successfully"
PRODUCT_DELETED = "Product deleted"


class ProductException(Exception):
    """
    상품 도메인 예외의 기본 클래스

    HTTP Status Code: 400 Bad Request (하위 클래스에서 재정의)
    """

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ProductNotFoundException(ProductException):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    status_code = 404

    def __init__(self, product_id: int | None = None, name: str | None = None):
        self.product_id = product_id
        self.name = name
        super().__init__(PRODUCT_NOT_FOUND)


class NameConflictException(ProductException):
    """
    이미 존재하는 상품명으로 생성/변경하려 할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    status_code = 409

    def __init__(self, name: str):
        self.name = name
        super().__init__(PRODUCT_EXISTS)


class InvalidNameException(ProductException):
    """
    상품명이 공백뿐일 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(INVALID_NAME)


class InvalidPriceException(ProductException):
    """
    가격이 음수일 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, price: float):
        self.price = price
        super().__init__(INVALID_PRICE)


class InvalidStockException(ProductException):
    """
    재고가 음수일 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, stock: int):
        self.stock = stock
        super().__init__(INVALID_STOCK)


class InsufficientStockException(ProductException):
    """
    재고 변경 결과가 음수가 될 때 발생하는 예외

    HTTP Status Code: 406 Not Acceptable
    """

    status_code = 406

    def __init__(self, product_id: int, delta: int, available: int):
        self.product_id = product_id
        self.delta = delta
        self.available = available
        super().__init__(NOT_ENOUGH_STOCK)


class LockAcquisitionException(ProductException):
    """
    락 획득 실패 시 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    status_code = 409

    def __init__(self, resource: str, message: str = "Failed to acquire lock"):
        self.resource = resource
        super().__init__(f"{message} for resource: {resource}")
