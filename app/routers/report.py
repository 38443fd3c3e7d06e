# app/routers/report.py
# -----------------------------------------------------------------------------
# /report/snapshot : 리포트용 핵심 수치
# /report/generate : Gemini 전략 리포트 생성
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.config import settings
from app.schemas.config import BusinessConfig
from app.schemas.report import BusinessReport, ReportSnapshot
from app.services.financials import evaluate
from app.services.projection import build_monthly_projection, locate_break_even
from app.services.report import (
    GeminiReportGenerator,
    ReportGenerationError,
    ReportGenerator,
    build_report_snapshot,
    generate_report,
)

router = APIRouter(prefix="/report", tags=["report"])


def get_report_generator() -> ReportGenerator:
    return GeminiReportGenerator()


def _snapshot(config: BusinessConfig, months: int) -> ReportSnapshot:
    summary = evaluate(config).summary
    monthly = build_monthly_projection(summary, months)
    return build_report_snapshot(config, summary, locate_break_even(monthly))


@router.post("/snapshot", response_model=ReportSnapshot)
async def snapshot(
    config: BusinessConfig,
    months: int = Query(
        settings.DEFAULT_PROJECTION_MONTHS, ge=0, le=settings.MAX_PROJECTION_MONTHS
    ),
):
    return _snapshot(config, months)


@router.post("/generate", response_model=BusinessReport)
async def generate(
    config: BusinessConfig,
    months: int = Query(
        settings.DEFAULT_PROJECTION_MONTHS, ge=0, le=settings.MAX_PROJECTION_MONTHS
    ),
    generator: ReportGenerator = Depends(get_report_generator),
):
    try:
        return await generate_report(generator, _snapshot(config, months))
    except ReportGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
