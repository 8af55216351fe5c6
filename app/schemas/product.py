"""
상품 및 재고 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
가격/재고 범위와 상품명 공백 검사는 서비스 계층에서 수행하므로
(400 응답과 고정 메시지를 위해) 요청 스키마에는 타입만 지정합니다.
"""

from pydantic import BaseModel, Field, ConfigDict


class ProductCreateRequest(BaseModel):
    """
    상품 생성 요청 스키마

    Example:
        {
            "name": "Widget",
            "description": "A small widget",
            "price": 5.0,
            "stock": 10
        }
    """

    name: str = Field(
        ...,
        max_length=100,
        description="상품명 (중복 불가, 공백 불가)",
        examples=["Widget"],
    )
    description: str | None = Field(None, description="상품 설명 (선택)")
    price: float | None = Field(None, description="상품 가격 (0 이상)", examples=[5.0])
    stock: int = Field(0, description="초기 재고 수량 (0 이상)", examples=[10])


class ProductUpdateRequest(BaseModel):
    """
    상품 수정 요청 스키마 (모든 필드 선택, null 필드는 변경하지 않음)

    Example:
        {
            "price": 6.5,
            "stock": 20
        }
    """

    name: str | None = Field(None, max_length=100, description="새 상품명")
    description: str | None = Field(None, description="새 설명")
    price: float | None = Field(None, description="새 가격")
    stock: int | None = Field(None, description="새 재고 수량")


class ProductSummaryResponse(BaseModel):
    """
    상품 요약 응답 스키마 (목록/수정 결과)

    Example:
        {
            "id": 1,
            "name": "Widget",
            "price": 5.0,
            "stock": 10
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    price: float | None = Field(None, description="상품 가격")
    stock: int = Field(..., description="재고 수량")


class ProductDetailResponse(ProductSummaryResponse):
    """
    상품 상세 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Widget",
            "description": "A small widget",
            "price": 5.0,
            "stock": 10
        }
    """

    description: str | None = Field(None, description="상품 설명")


class ProductIdResponse(BaseModel):
    """상품명으로 조회한 상품 ID 응답 스키마"""

    id: int = Field(..., description="상품 ID")


class StockRequest(BaseModel):
    """
    재고 요청 항목 스키마

    가용성 확인/예약에서는 요청 수량, 재고 반영에서는 부호 있는 변화량입니다.

    Example:
        {
            "id": 1,
            "quantity": -3
        }
    """

    id: int = Field(..., description="상품 ID", examples=[1])
    quantity: int = Field(..., description="수량 또는 재고 변화량", examples=[-3])


class ReservationRequest(BaseModel):
    """
    재고 예약 요청 항목 스키마

    Example:
        {
            "id": 1,
            "quantity": 2
        }
    """

    id: int = Field(..., description="상품 ID", examples=[1])
    quantity: int = Field(..., ge=0, description="예약 수량 (0 이상)", examples=[2])


class ReservationOutcome(BaseModel):
    """
    재고 예약 결과

    요청 수량 전체가 확보된 경우에만 price가 채워집니다.
    price가 null이면 예약되지 않은 것이며 재고는 변경되지 않았습니다.

    Example:
        {
            "product_id": 1,
            "name": "Widget",
            "price": 5.0,
            "quantity": 2,
            "stock": 8
        }
    """

    product_id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    price: float | None = Field(None, description="단가 (예약 실패 시 null)")
    quantity: int = Field(..., description="요청 수량")
    stock: int = Field(..., description="처리 후 남은 재고")

    @property
    def granted(self) -> bool:
        return self.price is not None


class MessageResponse(BaseModel):
    """고정 메시지 응답 스키마"""

    message: str = Field(..., description="처리 결과 메시지")
