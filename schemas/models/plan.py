"""
Plan document model.

Maps to the `plans` MongoDB collection. Plans are static reference data:
DEFAULT_PLANS is inserted once when the collection is empty.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from schemas.models.base import MongoBaseModel


class PlanDoc(MongoBaseModel):
    """Document model for the `plans` collection."""

    name: str
    price: int = Field(ge=0)
    description: str
    duration: int = Field(gt=0)  # hours
    max_dogs: int = Field(gt=0)
    image: Optional[str] = None


DEFAULT_PLANS: list[PlanDoc] = [
    PlanDoc(
        name="Plan A",
        price=50,
        description="1-hour visit with any dog of your choice, includes a beverage",
        duration=1,
        max_dogs=1,
        image="https://images.unsplash.com/photo-1552053831-71594a27632d?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80",
    ),
    PlanDoc(
        name="Plan B",
        price=70,
        description="2-hour visit with any 2 dogs, includes a beverage and snack",
        duration=2,
        max_dogs=2,
        image="https://images.unsplash.com/photo-1554692918-08fa0fdc9db3?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80",
    ),
    PlanDoc(
        name="Plan C",
        price=100,
        description="3-hour visit with any 3 dogs, includes full meal and priority booking",
        duration=3,
        max_dogs=3,
        image="https://images.unsplash.com/photo-1605568427561-40dd23c2acea?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80",
    ),
]
