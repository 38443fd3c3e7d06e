# app/services/comparison.py
# -----------------------------------------------------------------------------
# 시나리오 비교
# - 시나리오마다 evaluate() 를 독립 실행 (원가 재사용 금지)
# - 회수기간 미도달 행은 최단 회수 순위에서 제외
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from app.schemas.config import BusinessConfig
from app.schemas.finance import LaborRates
from app.schemas.scenario import (
    PAYBACK_NOT_REACHED,
    ComparisonRankings,
    ComparisonRow,
    Scenario,
    ScenarioComparison,
)
from app.services.financials import evaluate
from app.services.projection import format_month, payback_months

DRAFT_NAME = "현재 설정"


def compare_row(
    name: str,
    config: BusinessConfig,
    *,
    scenario_id: Optional[str] = None,
    rates: Optional[LaborRates] = None,
) -> ComparisonRow:
    s = evaluate(config, rates).summary
    margin = (s.net_profit / s.total_revenue) if s.total_revenue else 0.0
    payback = payback_months(s.total_investment, s.net_profit)
    return ComparisonRow(
        scenario_id=scenario_id,
        name=name,
        total_revenue=s.total_revenue,
        net_profit=s.net_profit,
        total_investment=s.total_investment,
        margin=margin,
        payback_months=payback,
        payback_label=format_month(payback) if payback is not None else PAYBACK_NOT_REACHED,
    )


# ── 순위 헬퍼 (빈 목록이면 None) ──────────────────────────────────────────────
def best_by_revenue(rows: Sequence[ComparisonRow]) -> Optional[ComparisonRow]:
    return max(rows, key=lambda r: r.total_revenue, default=None)


def best_by_profit(rows: Sequence[ComparisonRow]) -> Optional[ComparisonRow]:
    return max(rows, key=lambda r: r.net_profit, default=None)


def best_by_margin(rows: Sequence[ComparisonRow]) -> Optional[ComparisonRow]:
    return max(rows, key=lambda r: r.margin, default=None)


def fastest_payback(rows: Sequence[ComparisonRow]) -> Optional[ComparisonRow]:
    reached = [r for r in rows if r.payback_months is not None]
    return min(reached, key=lambda r: r.payback_months, default=None)


def _name(row: Optional[ComparisonRow]) -> Optional[str]:
    return row.name if row is not None else None


def compare_scenarios(
    scenarios: Sequence[Scenario],
    draft: Optional[BusinessConfig] = None,
    rates: Optional[LaborRates] = None,
) -> ScenarioComparison:
    rows = [
        compare_row(sc.name, sc.config, scenario_id=sc.id, rates=rates)
        for sc in scenarios
    ]
    if draft is not None:
        rows.append(compare_row(DRAFT_NAME, draft, rates=rates))

    if not rows:
        return ScenarioComparison()

    logger.info(f"[compare] {len(rows)} rows (draft={'yes' if draft else 'no'})")
    return ScenarioComparison(
        rows=rows,
        rankings=ComparisonRankings(
            best_revenue=_name(best_by_revenue(rows)),
            best_profit=_name(best_by_profit(rows)),
            best_margin=_name(best_by_margin(rows)),
            fastest_payback=_name(fastest_payback(rows)),
        ),
    )
