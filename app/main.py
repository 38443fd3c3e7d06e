# app/main.py
# -----------------------------------------------------------------------------
# FastAPI 엔트리포인트
# - 서버 기동 시 로깅 설정 + 시나리오 테이블 생성
# -----------------------------------------------------------------------------
from fastapi import FastAPI
from loguru import logger

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import init_models
from app.routers import planner, report, scenarios

app = FastAPI(title=settings.APP_NAME)


@app.on_event("startup")
async def on_startup():
    setup_logging()
    await init_models()
    logger.info(f"[startup] {settings.APP_NAME} ({settings.ENV}) ready")


app.include_router(planner.router)
app.include_router(scenarios.router)
app.include_router(report.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
