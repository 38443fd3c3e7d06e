# app/schemas/scenario.py
# -----------------------------------------------------------------------------
# 시나리오 저장/비교 스키마
# -----------------------------------------------------------------------------
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.config import BusinessConfig

PAYBACK_NOT_REACHED = "측정불가"


class ScenarioCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    config: BusinessConfig


class ScenarioUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    config: Optional[BusinessConfig] = None


class Scenario(BaseModel):
    id: str
    name: str
    config: BusinessConfig
    timestamp: datetime


class ComparisonRow(BaseModel):
    scenario_id: Optional[str] = None  # None = 저장되지 않은 현재 설정
    name: str
    total_revenue: float
    net_profit: float
    total_investment: float
    margin: float
    payback_months: Optional[int] = None
    payback_label: str = PAYBACK_NOT_REACHED


class ComparisonRankings(BaseModel):
    best_revenue: Optional[str] = None
    best_profit: Optional[str] = None
    best_margin: Optional[str] = None
    fastest_payback: Optional[str] = None


class ScenarioComparison(BaseModel):
    rows: List[ComparisonRow] = []
    rankings: ComparisonRankings = Field(default_factory=ComparisonRankings)


class CompareRequest(BaseModel):
    draft: Optional[BusinessConfig] = None
