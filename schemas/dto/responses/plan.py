"""Response DTO for plans — GET /api/plans, GET /api/plans/{id}, expanded booking plan."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.models.plan import PlanDoc


class PlanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    price: int
    description: str
    duration: int
    max_dogs: int = Field(alias="maxDogs")
    image: Optional[str] = None

    @classmethod
    def from_doc(cls, doc: PlanDoc) -> "PlanResponse":
        return cls(
            id=str(doc.id),
            name=doc.name,
            price=doc.price,
            description=doc.description,
            duration=doc.duration,
            max_dogs=doc.max_dogs,
            image=doc.image,
        )
