import pytest

from app.core.config import Settings
from app.schemas.config import (
    BusinessConfig,
    CafeConfig,
    FixedCosts,
    InitialInvestment,
    SpaceConfig,
    WineConfig,
)
from app.schemas.finance import LaborRates
from app.services import financials
from app.services.financials import (
    calculate_financials,
    calculate_labor_cost,
    default_labor_rates,
    evaluate,
    menu_mix_warnings,
)
from app.services.unit_cost import calculate_unit_costs


def _summary(config: BusinessConfig, daily_sales: int, rates=None):
    uc = calculate_unit_costs(config.cafe, config.cafe_supplies)
    return calculate_financials(config, uc, daily_sales, rates)


def test_labor_cost_default_rates():
    # 10,320원 x 209h / 83.45h
    assert calculate_labor_cost(FixedCosts()) == pytest.approx(2 * 2_156_880 + 861_204)


def test_default_rates_follow_hourly_wage(monkeypatch):
    monkeypatch.setattr(financials, "settings", Settings(HOURLY_WAGE=20_000))
    rates = default_labor_rates()
    assert rates.weekday_monthly == pytest.approx(20_000 * 209)
    assert rates.weekend_monthly == pytest.approx(20_000 * 83.45)
    assert calculate_labor_cost(FixedCosts(weekday_staff=1, weekend_staff=0)) == pytest.approx(
        4_180_000
    )


def test_explicit_monthly_rates_override_wage(monkeypatch):
    monkeypatch.setattr(
        financials,
        "settings",
        Settings(HOURLY_WAGE=20_000, WEEKDAY_MONTHLY_RATE=2_156_880, WEEKEND_MONTHLY_RATE=861_200),
    )
    rates = default_labor_rates()
    assert rates.weekday_monthly == 2_156_880
    assert rates.weekend_monthly == 861_200


def test_labor_cost_with_explicit_rates():
    rates = LaborRates(weekday_monthly=2_000_000, weekend_monthly=800_000)
    fixed = FixedCosts(weekday_staff=3, weekend_staff=2, additional_labor=150_000)
    assert calculate_labor_cost(fixed, rates) == 7_750_000


def test_labor_rates_from_hourly_wage():
    rates = LaborRates.from_hourly(10_320)
    assert rates.weekday_monthly == pytest.approx(2_156_880)
    assert rates.weekend_monthly == pytest.approx(861_204)


def test_space_and_wine_lines(config):
    s = _summary(config, 0)
    assert s.space_revenue == pytest.approx(6_000_000)
    assert s.wine_revenue == pytest.approx(7_800_000)
    assert s.wine_cogs == pytest.approx(2_730_000)
    assert s.cafe_revenue == 0 and s.cafe_cogs == 0


def test_cafe_revenue_uses_weighted_price(config):
    s = _summary(config, 100)
    # (4500*0.5 + 5000*0.3 + 5500*0.2) x 100잔 x 26일
    assert s.cafe_revenue == pytest.approx(4_850 * 100 * 26)
    assert s.daily_sales_count == 100


def test_totals_are_consistent(config):
    s = evaluate(config).summary
    assert s.total_revenue == s.cafe_revenue + s.space_revenue + s.wine_revenue
    assert s.total_cogs == s.cafe_cogs + s.wine_cogs
    assert s.gross_profit == s.total_revenue - s.total_cogs
    assert s.total_fixed_costs == s.labor_cost + s.utility_cost + s.other_fixed_cost
    assert s.net_profit == s.gross_profit - s.total_fixed_costs


def test_fixed_cost_breakdown(config):
    s = _summary(config, 0)
    assert s.utility_cost == 2_000_000
    assert s.other_fixed_cost == 40_000 + 1_000_000 + 100_000 + 100_000


def test_total_investment_example():
    config = BusinessConfig(
        initial=InitialInvestment(
            interior=60_000_000, equipment=20_000_000, design=3_000_000, supplies=5_000_000
        )
    )
    assert _summary(config, 0).total_investment == 88_000_000


def test_unnormalized_menu_mix_still_computes():
    config = BusinessConfig(
        cafe=CafeConfig(ratio_americano=0.6, ratio_latte=0.6, ratio_syrup_latte=0.3)
    )
    s = _summary(config, 10)
    # 재정규화 없이 그대로 가중
    assert s.cafe_revenue == pytest.approx((4500 * 0.6 + 5000 * 0.6 + 5500 * 0.3) * 10 * 26)
    assert menu_mix_warnings(config.cafe)
    assert menu_mix_warnings(CafeConfig()) == []


def test_total_over_zero_and_negative_inputs():
    config = BusinessConfig(
        cafe=CafeConfig(seat_count=0, stay_duration=0, operating_days=-3),
        space=SpaceConfig(hourly_rate=-10_000, utilization_rate=0),
        wine=WineConfig(avg_ticket_price=0),
        fixed=FixedCosts(weekday_staff=0, weekend_staff=0, utilities=-1),
        initial=InitialInvestment(interior=0, equipment=0, design=0, supplies=0),
    )
    s = evaluate(config).summary
    assert s.total_revenue == 0
    assert s.net_profit == 1 - 1_240_000


def test_evaluate_recomputes_unit_costs_per_config(config):
    pricier = config.model_copy(deep=True)
    pricier.cafe_supplies.syrup = 500
    a = evaluate(config)
    b = evaluate(pricier)
    assert b.unit_costs.final_cost_syrup_latte > a.unit_costs.final_cost_syrup_latte
    assert a.unit_costs.final_cost_americano == b.unit_costs.final_cost_americano
