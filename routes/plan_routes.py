"""
Plan endpoints (public).

GET /api/plans       — all plans, cheapest first
GET /api/plans/{id}  — one plan or 404
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_plan_service
from schemas.dto.responses.plan import PlanResponse
from services.plan_service import PlanService

router = APIRouter(prefix="/api/plans", tags=["plans"])


@router.get("", response_model=list[PlanResponse])
async def list_plans(plans: PlanService = Depends(get_plan_service)) -> list[PlanResponse]:
    return [PlanResponse.from_doc(p) for p in await plans.list_plans()]


@router.get("/{plan_id}", response_model=PlanResponse)
async def get_plan(
    plan_id: str, plans: PlanService = Depends(get_plan_service)
) -> PlanResponse:
    return PlanResponse.from_doc(await plans.get_plan(plan_id))
