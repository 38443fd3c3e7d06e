# app/schemas/finance.py
# -----------------------------------------------------------------------------
# 재무 계산 결과 스키마
# - 원가 분해(UnitCostBreakdown), 단월 손익(FinancialSummary)
# - 월별 예측(MonthlyRecord), 손익분기(BreakEven)
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel

from app.schemas.config import BusinessConfig

BEP_NOT_REACHED = "미도달"


class ProductCost(BaseModel):
    americano: float
    latte: float
    syrup_latte: float


class TemperatureCosts(BaseModel):
    hot: ProductCost
    ice: ProductCost


class ProductMatrix(BaseModel):
    takeout: TemperatureCosts
    store: TemperatureCosts


class IngredientCosts(BaseModel):
    bean: float
    milk: float
    water: float
    ice: float
    syrup: float


class PackagingCosts(BaseModel):
    takeout_hot: float
    takeout_ice: float
    store_hot: float
    store_ice: float


class UnitCostBreakdown(BaseModel):
    unit_costs: IngredientCosts
    packaging: PackagingCosts
    products: ProductMatrix
    final_cost_americano: float
    final_cost_latte: float
    final_cost_syrup_latte: float


class LaborRates(BaseModel):
    weekday_monthly: float
    weekend_monthly: float

    @classmethod
    def from_hourly(
        cls,
        wage: float,
        weekday_hours: float = 209.0,
        weekend_hours: float = 83.45,
    ) -> "LaborRates":
        """시급 x 월 환산 근로시간으로 단가 산출"""
        return cls(
            weekday_monthly=wage * weekday_hours,
            weekend_monthly=wage * weekend_hours,
        )


class FinancialSummary(BaseModel):
    cafe_revenue: float
    cafe_cogs: float
    space_revenue: float
    wine_revenue: float
    wine_cogs: float
    labor_cost: float
    utility_cost: float
    other_fixed_cost: float
    total_fixed_costs: float
    total_revenue: float
    total_cogs: float
    gross_profit: float
    net_profit: float
    total_investment: float
    daily_sales_count: int


class MonthlyRecord(BaseModel):
    month: int
    cafe_revenue: float
    space_revenue: float
    wine_revenue: float
    cafe_cogs: float
    wine_cogs: float
    labor_cost: float
    utility_cost: float
    other_fixed_cost: float
    revenue: float
    cogs: float
    gross_profit: float
    fixed_costs: float
    net_profit: float
    cumulative_profit: float


class BreakEven(BaseModel):
    month: Optional[int] = None  # None = 예측 기간 내 미도달
    label: str = BEP_NOT_REACHED

    @property
    def reached(self) -> bool:
        return self.month is not None


class PlanEvaluation(BaseModel):
    unit_costs: UnitCostBreakdown
    daily_sales_count: int
    summary: FinancialSummary


class CalculateResponse(BaseModel):
    config: BusinessConfig
    unit_costs: UnitCostBreakdown
    daily_sales_count: int
    max_daily_capacity: int
    labor_rates: LaborRates
    summary: FinancialSummary
    monthly: List[MonthlyRecord]
    break_even: BreakEven
    warnings: List[str] = []
