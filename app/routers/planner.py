# app/routers/planner.py
# -----------------------------------------------------------------------------
# /planner/calculate      : 설정 → 원가/판매량/월별 손익/BEP
# /planner/projection.csv : 월별 손익표 CSV
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from app.core.config import settings
from app.schemas.config import BusinessConfig
from app.schemas.finance import CalculateResponse
from app.services.capacity import max_daily_capacity
from app.services.export import projection_csv
from app.services.financials import default_labor_rates, evaluate, menu_mix_warnings
from app.services.projection import build_monthly_projection, locate_break_even

router = APIRouter(prefix="/planner", tags=["planner"])


@router.get("/defaults", response_model=BusinessConfig)
async def defaults():
    return BusinessConfig()


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(
    config: BusinessConfig,
    months: int = Query(
        settings.DEFAULT_PROJECTION_MONTHS, ge=0, le=settings.MAX_PROJECTION_MONTHS
    ),
):
    rates = default_labor_rates()
    ev = evaluate(config, rates)
    monthly = build_monthly_projection(ev.summary, months)
    return CalculateResponse(
        config=config,
        unit_costs=ev.unit_costs,
        daily_sales_count=ev.daily_sales_count,
        max_daily_capacity=max_daily_capacity(
            config.cafe.seat_count, config.cafe.operating_hours, config.cafe.stay_duration
        ),
        labor_rates=rates,
        summary=ev.summary,
        monthly=monthly,
        break_even=locate_break_even(monthly),
        warnings=menu_mix_warnings(config.cafe),
    )


@router.post("/projection.csv", response_class=PlainTextResponse)
async def projection_export(
    config: BusinessConfig,
    months: int = Query(
        settings.DEFAULT_PROJECTION_MONTHS, ge=0, le=settings.MAX_PROJECTION_MONTHS
    ),
):
    monthly = build_monthly_projection(evaluate(config).summary, months)
    return PlainTextResponse(projection_csv(monthly), media_type="text/csv")
