# app/db/crud.py
# -----------------------------------------------------------------------------
# 시나리오 저장소 CRUD
# - 저장 시 config 를 JSON 사본으로 직렬화 → 이후 초안 수정이 저장본에 영향 없음
# - 조회 시 매번 새 BusinessConfig 로 복원
# -----------------------------------------------------------------------------
import uuid
from datetime import datetime
from typing import Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import ScenarioRecord
from app.schemas.config import BusinessConfig
from app.schemas.scenario import Scenario


class ScenarioNotFoundError(LookupError):
    def __init__(self, scenario_id: str):
        super().__init__(f"시나리오를 찾을 수 없습니다: {scenario_id}")
        self.scenario_id = scenario_id


def _to_schema(row: ScenarioRecord) -> Scenario:
    return Scenario(
        id=row.id,
        name=row.name,
        config=BusinessConfig.model_validate(row.config),
        timestamp=row.timestamp,
    )


async def _get_row(db: AsyncSession, scenario_id: str) -> ScenarioRecord:
    row = await db.get(ScenarioRecord, scenario_id)
    if row is None:
        raise ScenarioNotFoundError(scenario_id)
    return row


async def list_scenarios(db: AsyncSession) -> list[Scenario]:
    res = await db.execute(select(ScenarioRecord).order_by(ScenarioRecord.timestamp))
    return [_to_schema(r) for r in res.scalars().all()]


async def get_scenario(db: AsyncSession, scenario_id: str) -> Scenario:
    return _to_schema(await _get_row(db, scenario_id))


async def create_scenario(db: AsyncSession, name: str, config: BusinessConfig) -> Scenario:
    row = ScenarioRecord(
        id=uuid.uuid4().hex,
        name=name,
        config=config.model_dump(mode="json"),
        timestamp=datetime.now(),
    )
    db.add(row)
    await db.commit()
    logger.info(f"[scenario] saved {row.id} '{name}'")
    return _to_schema(row)


async def update_scenario(
    db: AsyncSession,
    scenario_id: str,
    *,
    name: Optional[str] = None,
    config: Optional[BusinessConfig] = None,
) -> Scenario:
    row = await _get_row(db, scenario_id)
    if name is not None:
        row.name = name
    if config is not None:
        row.config = config.model_dump(mode="json")
    row.timestamp = datetime.now()
    await db.commit()
    logger.info(f"[scenario] updated {scenario_id}")
    return _to_schema(row)


async def delete_scenario(db: AsyncSession, scenario_id: str) -> None:
    row = await _get_row(db, scenario_id)
    await db.delete(row)
    await db.commit()
    logger.info(f"[scenario] deleted {scenario_id}")
