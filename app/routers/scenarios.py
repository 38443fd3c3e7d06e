# app/routers/scenarios.py
# -----------------------------------------------------------------------------
# 시나리오 저장/수정/삭제 + 비교
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import crud
from app.db.crud import ScenarioNotFoundError
from app.db.session import get_session
from app.schemas.scenario import (
    CompareRequest,
    Scenario,
    ScenarioComparison,
    ScenarioCreate,
    ScenarioUpdate,
)
from app.services.comparison import compare_scenarios

router = APIRouter(prefix="/scenarios", tags=["scenarios"])


@router.get("", response_model=list[Scenario])
async def list_all(db: AsyncSession = Depends(get_session)):
    return await crud.list_scenarios(db)


@router.post("", response_model=Scenario, status_code=201)
async def create(req: ScenarioCreate, db: AsyncSession = Depends(get_session)):
    return await crud.create_scenario(db, req.name, req.config)


@router.post("/compare", response_model=ScenarioComparison)
async def compare(
    req: CompareRequest | None = None, db: AsyncSession = Depends(get_session)
):
    scenarios = await crud.list_scenarios(db)
    return compare_scenarios(scenarios, draft=req.draft if req else None)


@router.get("/{scenario_id}", response_model=Scenario)
async def get_one(scenario_id: str, db: AsyncSession = Depends(get_session)):
    try:
        return await crud.get_scenario(db, scenario_id)
    except ScenarioNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{scenario_id}", response_model=Scenario)
async def update(
    scenario_id: str, req: ScenarioUpdate, db: AsyncSession = Depends(get_session)
):
    try:
        return await crud.update_scenario(
            db, scenario_id, name=req.name, config=req.config
        )
    except ScenarioNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{scenario_id}", status_code=204)
async def delete(scenario_id: str, db: AsyncSession = Depends(get_session)):
    try:
        await crud.delete_scenario(db, scenario_id)
    except ScenarioNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
