# app/db/models.py
# -----------------------------------------------------------------------------
# ORM 모델 정의
# - ScenarioRecord: 이름 붙은 사업 설정 스냅샷 (config 는 JSON 사본)
# -----------------------------------------------------------------------------
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Index, String

from app.db.session import Base


class ScenarioRecord(Base):
    __tablename__ = "scenarios"

    id = Column(String(32), primary_key=True)  # uuid4 hex
    name = Column(String, index=True, nullable=False)
    config = Column(JSON, nullable=False)  # BusinessConfig.model_dump(mode="json")
    timestamp = Column(DateTime, nullable=False, default=datetime.now)

    __table_args__ = (Index("ix_scenarios_timestamp", "timestamp"),)
