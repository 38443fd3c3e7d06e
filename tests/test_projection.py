import pytest

from app.schemas.finance import BEP_NOT_REACHED, FinancialSummary
from app.services.financials import evaluate
from app.services.projection import (
    build_monthly_projection,
    locate_break_even,
    payback_months,
)


def make_summary(net_profit: float, investment: float) -> FinancialSummary:
    return FinancialSummary(
        cafe_revenue=0,
        cafe_cogs=0,
        space_revenue=0,
        wine_revenue=0,
        wine_cogs=0,
        labor_cost=0,
        utility_cost=0,
        other_fixed_cost=0,
        total_fixed_costs=0,
        total_revenue=0,
        total_cogs=0,
        gross_profit=net_profit,
        net_profit=net_profit,
        total_investment=investment,
        daily_sales_count=0,
    )


def test_three_month_break_even():
    records = build_monthly_projection(make_summary(1_000_000, 3_000_000), 3)
    assert [r.cumulative_profit for r in records] == [-2_000_000, -1_000_000, 0]
    bep = locate_break_even(records)
    assert bep.month == 3
    assert bep.label == "M+3"
    assert bep.reached


@pytest.mark.parametrize("months", [0, 1, 12, 60])
def test_cumulative_profit_is_linear(months):
    p, inv = 1_250_000, 40_000_000
    records = build_monthly_projection(make_summary(p, inv), months)
    assert len(records) == months
    for k, r in enumerate(records, start=1):
        assert r.month == k
        assert r.cumulative_profit == -inv + k * p


@pytest.mark.parametrize("months", [0, 1, 10, 120])
def test_loss_making_plan_never_breaks_even(months):
    records = build_monthly_projection(make_summary(-500_000, 10_000_000), months)
    bep = locate_break_even(records)
    assert bep.month is None
    assert bep.label == BEP_NOT_REACHED
    assert not bep.reached


def test_empty_horizon():
    records = build_monthly_projection(make_summary(5_000_000, 1), 0)
    assert records == []
    assert locate_break_even(records).month is None


def test_negative_horizon_treated_as_empty():
    assert build_monthly_projection(make_summary(1, 0), -4) == []


def test_break_even_beyond_horizon():
    records = build_monthly_projection(make_summary(1_000_000, 30_000_000), 12)
    assert locate_break_even(records).month is None


def test_zero_investment_breaks_even_in_first_month():
    records = build_monthly_projection(make_summary(10, 0), 5)
    assert locate_break_even(records).label == "M+1"


def test_static_lines_repeat_across_months(config):
    summary = evaluate(config).summary
    records = build_monthly_projection(summary, 4)
    assert {r.revenue for r in records} == {summary.total_revenue}
    assert {r.net_profit for r in records} == {summary.net_profit}
    assert records[0].fixed_costs == summary.total_fixed_costs
    assert records[0].cogs == summary.cafe_cogs + summary.wine_cogs


@pytest.mark.parametrize(
    "investment,profit,expected",
    [
        (3_000_000, 1_000_000, 3),
        (3_000_001, 1_000_000, 4),
        (88_000_000, 7_000_000, 13),
        (0, 1_000, 1),
        (-5_000, 1_000, 1),
    ],
)
def test_payback_months(investment, profit, expected):
    assert payback_months(investment, profit) == expected


@pytest.mark.parametrize("profit", [0, -1, -500_000])
def test_payback_unreached(profit):
    assert payback_months(10_000_000, profit) is None


@pytest.mark.parametrize(
    "inv,p",
    [(3_000_000, 1_000_000), (10_000_000, 1_500_000), (7, 2), (0, 10), (-5_000, 1_000)],
)
def test_break_even_matches_payback(inv, p):
    records = build_monthly_projection(make_summary(p, inv), 24)
    assert locate_break_even(records).month == payback_months(inv, p)
