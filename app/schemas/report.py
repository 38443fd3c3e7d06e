# app/schemas/report.py
# -----------------------------------------------------------------------------
# AI 전략 리포트용 스키마
# - ReportSnapshot: 엔진이 넘기는 반올림된 핵심 수치
# - BusinessReport: 생성된 본문(불투명 문자열) + 생성 시각
# -----------------------------------------------------------------------------
from datetime import datetime

from pydantic import BaseModel


class ReportSnapshot(BaseModel):
    monthly_revenue: int
    net_profit: int
    initial_investment: int
    turnover_target_pct: float
    utilization_rate_pct: float
    wine_daily_tables: float
    break_even: str


class BusinessReport(BaseModel):
    content: str
    timestamp: datetime
