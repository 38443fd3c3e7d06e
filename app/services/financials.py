# app/services/financials.py
# -----------------------------------------------------------------------------
# 단월 손익 계산 (대시보드/시나리오 비교/리포트가 모두 이 함수 하나를 사용)
# - 카페: 메뉴 비중 가중평균 단가/원가 x 일 판매량 x 영업일
# - 공간대여: 원가 없음
# - 와인바: 매출 x 원가율
# -----------------------------------------------------------------------------
from typing import Optional

from loguru import logger

from app.core.config import settings
from app.schemas.config import BusinessConfig, CafeConfig, FixedCosts
from app.schemas.finance import (
    FinancialSummary,
    LaborRates,
    PlanEvaluation,
    UnitCostBreakdown,
)
from app.services.capacity import estimate_daily_sales
from app.services.unit_cost import calculate_unit_costs

MENU_MIX_TOLERANCE = 0.01


def default_labor_rates() -> LaborRates:
    derived = LaborRates.from_hourly(
        settings.HOURLY_WAGE,
        settings.WEEKDAY_MONTHLY_HOURS,
        settings.WEEKEND_MONTHLY_HOURS,
    )
    return LaborRates(
        weekday_monthly=(
            settings.WEEKDAY_MONTHLY_RATE
            if settings.WEEKDAY_MONTHLY_RATE is not None
            else derived.weekday_monthly
        ),
        weekend_monthly=(
            settings.WEEKEND_MONTHLY_RATE
            if settings.WEEKEND_MONTHLY_RATE is not None
            else derived.weekend_monthly
        ),
    )


def calculate_labor_cost(fixed: FixedCosts, rates: Optional[LaborRates] = None) -> float:
    r = rates or default_labor_rates()
    return (
        fixed.weekday_staff * r.weekday_monthly
        + fixed.weekend_staff * r.weekend_monthly
        + fixed.additional_labor
    )


def menu_mix_warnings(cafe: CafeConfig) -> list[str]:
    """메뉴 비중 합계 안내용 경고. 계산을 막거나 재정규화하지 않음."""
    total = cafe.ratio_americano + cafe.ratio_latte + cafe.ratio_syrup_latte
    if abs(total - 1.0) < MENU_MIX_TOLERANCE:
        return []
    return [f"메뉴 비중 합계가 {total:.2f} 입니다 (1.0 권장)"]


def calculate_financials(
    config: BusinessConfig,
    unit_costs: UnitCostBreakdown,
    daily_sales: int,
    rates: Optional[LaborRates] = None,
) -> FinancialSummary:
    """
    사업 설정 + 잔당 원가 + 일 판매량으로 한 달 손익을 계산합니다.

    모든 실수 입력(0, 음수 포함)에 대해 예외 없이 값을 반환합니다.

    Args:
        config (BusinessConfig): 전체 사업 설정.
        unit_costs (UnitCostBreakdown): calculate_unit_costs 결과.
        daily_sales (int): 카페 일 판매 잔수.
        rates (LaborRates, optional): 인건비 월 단가. 생략 시 설정값.

    Returns:
        FinancialSummary: 사업부별 매출/원가, 고정비, 순이익, 초기 투자금.
    """
    cafe, space, wine, fixed = config.cafe, config.space, config.wine, config.fixed

    weighted_price = (
        cafe.avg_price_americano * cafe.ratio_americano
        + cafe.avg_price_latte * cafe.ratio_latte
        + cafe.avg_price_syrup_latte * cafe.ratio_syrup_latte
    )
    weighted_cost = (
        unit_costs.final_cost_americano * cafe.ratio_americano
        + unit_costs.final_cost_latte * cafe.ratio_latte
        + unit_costs.final_cost_syrup_latte * cafe.ratio_syrup_latte
    )
    cafe_revenue = weighted_price * daily_sales * cafe.operating_days
    cafe_cogs = weighted_cost * daily_sales * cafe.operating_days

    space_revenue = (
        space.hourly_rate * space.hours_per_day * space.utilization_rate * space.operating_days
    )

    wine_revenue = wine.avg_ticket_price * wine.daily_tables * wine.operating_days
    wine_cogs = wine_revenue * wine.cost_of_goods_sold_rate

    labor_cost = calculate_labor_cost(fixed, rates)
    utility_cost = fixed.utilities
    other_fixed_cost = fixed.internet + fixed.marketing + fixed.maintenance + fixed.misc

    total_revenue = cafe_revenue + space_revenue + wine_revenue
    total_cogs = cafe_cogs + wine_cogs  # 공간대여 원가 없음
    gross_profit = total_revenue - total_cogs
    total_fixed_costs = labor_cost + utility_cost + other_fixed_cost

    return FinancialSummary(
        cafe_revenue=cafe_revenue,
        cafe_cogs=cafe_cogs,
        space_revenue=space_revenue,
        wine_revenue=wine_revenue,
        wine_cogs=wine_cogs,
        labor_cost=labor_cost,
        utility_cost=utility_cost,
        other_fixed_cost=other_fixed_cost,
        total_fixed_costs=total_fixed_costs,
        total_revenue=total_revenue,
        total_cogs=total_cogs,
        gross_profit=gross_profit,
        net_profit=gross_profit - total_fixed_costs,
        total_investment=config.initial.total,
        daily_sales_count=daily_sales,
    )


def evaluate(config: BusinessConfig, rates: Optional[LaborRates] = None) -> PlanEvaluation:
    """원가 → 판매량 → 손익 파이프라인 (시나리오마다 원가를 새로 계산)"""
    unit_costs = calculate_unit_costs(config.cafe, config.cafe_supplies)
    daily_sales = estimate_daily_sales(
        config.cafe.seat_count,
        config.cafe.operating_hours,
        config.cafe.stay_duration,
        config.cafe.turnover_target,
    )
    summary = calculate_financials(config, unit_costs, daily_sales, rates)
    logger.debug(
        f"[evaluate] sales/day={daily_sales} revenue={summary.total_revenue:,.0f} "
        f"net={summary.net_profit:,.0f}"
    )
    return PlanEvaluation(
        unit_costs=unit_costs, daily_sales_count=daily_sales, summary=summary
    )
