# app/services/export.py
# -----------------------------------------------------------------------------
# 월별 손익표 내보내기 (pandas)
# -----------------------------------------------------------------------------
from typing import Sequence

import pandas as pd

from app.schemas.finance import MonthlyRecord

COLUMNS = {
    "month": "월",
    "cafe_revenue": "카페 매출",
    "space_revenue": "공간대여 매출",
    "wine_revenue": "와인바 매출",
    "revenue": "총 매출",
    "cafe_cogs": "카페 원가",
    "wine_cogs": "와인바 원가",
    "cogs": "총 원가",
    "gross_profit": "매출총이익",
    "labor_cost": "인건비",
    "utility_cost": "공과금",
    "other_fixed_cost": "기타 고정비",
    "fixed_costs": "총 고정비",
    "net_profit": "순이익",
    "cumulative_profit": "누적이익",
}


def projection_frame(records: Sequence[MonthlyRecord]) -> pd.DataFrame:
    df = pd.DataFrame([r.model_dump() for r in records], columns=list(COLUMNS))
    money = [c for c in COLUMNS if c != "month"]
    df[money] = df[money].astype(float).round(0)
    return df.rename(columns=COLUMNS)


def projection_csv(records: Sequence[MonthlyRecord]) -> str:
    return projection_frame(records).to_csv(index=False)
