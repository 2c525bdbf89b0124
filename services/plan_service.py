"""Plan catalogue: listing, lookup and first-boot seeding."""

from __future__ import annotations

from typing import Iterable, Optional

from errors import NotFoundError
from repositories.plan_repository import PlanRepository
from schemas.models.base import parse_object_id
from schemas.models.plan import DEFAULT_PLANS, PlanDoc
from shared.logging import get_logger

log = get_logger(__name__)


class PlanService:
    def __init__(self, plan_repo: PlanRepository) -> None:
        self._plans = plan_repo

    async def list_plans(self) -> list[PlanDoc]:
        """All plans, cheapest first."""
        return await self._plans.list_by_price()

    async def get_plan(self, plan_id: str) -> PlanDoc:
        oid = parse_object_id(plan_id)
        plan = await self._plans.find_by_id(oid) if oid is not None else None
        if plan is None:
            raise NotFoundError("Plan not found")
        return plan

    async def seed_defaults(self, plans: Optional[Iterable[PlanDoc]] = None) -> int:
        """Insert the default plans if the collection is empty. Returns the count inserted."""
        if await self._plans.count() > 0:
            return 0
        inserted = await self._plans.insert_many(plans if plans is not None else DEFAULT_PLANS)
        log.info("default_plans_seeded", count=inserted)
        return inserted
