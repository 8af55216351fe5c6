from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import products
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.database import init_db
from app.middleware.correlation import add_correlation_id


@asynccontextmanager
async def lifespan(app: FastAPI):
    """시작 시 로깅 설정과 테이블 생성"""
    configure_logging(get_settings())
    init_db()
    yield


app = FastAPI(
    title="Product Catalog API",
    description="상품 카탈로그 CRUD 및 재고 예약 서비스",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
add_correlation_id(app)

# 라우터 등록
app.include_router(products.router, prefix="/api", tags=["products"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Product Catalog API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
