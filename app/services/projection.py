# app/services/projection.py
# -----------------------------------------------------------------------------
# 월별 손익 예측 + 손익분기(BEP) 탐색
# - 월 손익은 매월 동일 (계절성/성장 미반영)
# - 누적이익은 -초기투자금에서 출발
# -----------------------------------------------------------------------------
from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from app.schemas.finance import BreakEven, FinancialSummary, MonthlyRecord


def build_monthly_projection(summary: FinancialSummary, months: int) -> list[MonthlyRecord]:
    out: list[MonthlyRecord] = []
    cumulative = -summary.total_investment
    for m in range(1, max(0, int(months)) + 1):
        cumulative += summary.net_profit
        out.append(
            MonthlyRecord(
                month=m,
                cafe_revenue=summary.cafe_revenue,
                space_revenue=summary.space_revenue,
                wine_revenue=summary.wine_revenue,
                cafe_cogs=summary.cafe_cogs,
                wine_cogs=summary.wine_cogs,
                labor_cost=summary.labor_cost,
                utility_cost=summary.utility_cost,
                other_fixed_cost=summary.other_fixed_cost,
                revenue=summary.total_revenue,
                cogs=summary.total_cogs,
                gross_profit=summary.gross_profit,
                fixed_costs=summary.total_fixed_costs,
                net_profit=summary.net_profit,
                cumulative_profit=cumulative,
            )
        )
    return out


def format_month(month: int) -> str:
    return f"M+{month}"


def locate_break_even(records: Sequence[MonthlyRecord]) -> BreakEven:
    """누적이익이 처음 0 이상이 되는 달. 없으면 미도달."""
    if not records:
        return BreakEven()
    cum = np.array([r.cumulative_profit for r in records], dtype=float)
    hit = cum >= 0
    if not hit.any():
        return BreakEven()
    month = records[int(np.argmax(hit))].month
    return BreakEven(month=month, label=format_month(month))


def payback_months(total_investment: float, net_profit: float) -> Optional[int]:
    """
    투자금 회수 개월 수. 순이익 0 이하면 None (무한대 대신).

    최소 1개월: 투자금이 0 이하여도 locate_break_even 과 같은 M+1 로 맞춤.
    """
    if net_profit <= 0:
        return None
    return max(1, math.ceil(total_investment / net_profit))
