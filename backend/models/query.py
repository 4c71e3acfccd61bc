"""
Query option models.

Describes the filter, ordering and limit shape consumed by collection
reads and subscriptions, plus the per-collection statistics record.

Dependencies: pydantic
System role: Store query contracts
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

FilterOperator = Literal[
    "==",
    "!=",
    "<",
    "<=",
    ">",
    ">=",
    "in",
    "not-in",
    "array-contains",
    "array-contains-any",
]


class WhereFilter(BaseModel):
    """Single field comparison applied by the store."""

    field: str = Field(..., min_length=1, description="Document field path")
    operator: FilterOperator = Field("==", description="Comparison operator")
    value: Any = Field(None, description="Value compared against the field")


class OrderBy(BaseModel):
    """Single-field result ordering."""

    field: str = Field(..., min_length=1, description="Document field path")
    direction: Literal["asc", "desc"] = Field("asc", description="Sort direction")


class QueryOptions(BaseModel):
    """Filters, ordering and result cap for a collection query."""

    where: list[WhereFilter] = Field(default_factory=list)
    order_by: OrderBy | None = None
    limit: int | None = Field(None, gt=0, description="Maximum number of documents")


class CollectionStats(BaseModel):
    """Active/inactive document counts for one collection."""

    total: int
    active: int
    inactive: int
    collection_name: str
