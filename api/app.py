# -*- coding: utf-8 -*-
"""
FestiPlan FastAPI Application
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from api.rate_limit import create_backend
from api.routers import optimize, predict, regions
from src import config

VERSION = "1.0.0"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """IP별 분당 요청 제한 미들웨어"""
    def __init__(self, app, requests_per_minute: int = 60):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.backend = create_backend()

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith("/api/"):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"

        if await self.backend.is_rate_limited(
            client_ip, self.requests_per_minute, window=60
        ):
            return JSONResponse(
                status_code=429,
                content={"detail": "요청 한도를 초과했습니다. 잠시 후 다시 시도해주세요."}
            )

        return await call_next(request)


app = FastAPI(title="FestiPlan", version=VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=500)

app.add_middleware(RateLimitMiddleware, requests_per_minute=config.RATE_LIMIT_PER_MINUTE)

app.include_router(predict.router, prefix="/api", tags=["predict"])
app.include_router(optimize.router, prefix="/api", tags=["optimize"])
app.include_router(regions.router, prefix="/api", tags=["regions"])


@app.get(
    "/health",
    summary="서비스 상태 확인",
    description="서비스 버전과 최적화 기본 설정(샘플 수, 워커 수)을 반환합니다.",
)
async def health():
    return {
        "status": "healthy",
        "version": VERSION,
        "sample_count": config.SAMPLE_COUNT,
        "workers": config.WORKERS,
    }
