"""Query descriptor models.

A ``QueryDescriptor`` is the caller's structured search request: equality
filters, sort chain, result limit, index override, free-text term and the
execution mode. It carries no engine syntax; ``QueryTranslator`` turns it
into the engine query body.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SearchCallback = Callable[[Any, str, dict[str, Any]], Any]


class WhereClause(BaseModel):
    """Exact-match filter on a single field."""

    field: str = Field(description="Indexed field name")
    value: Any = Field(description="Value the field must equal")


class OrderClause(BaseModel):
    """One link of the sort chain."""

    column: str = Field(description="Field to sort on")
    direction: Literal["asc", "desc"] = Field(default="asc", description="Sort direction")

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v


class StandardExecution(BaseModel):
    """Translate the descriptor and submit it to the engine."""

    kind: Literal["standard"] = "standard"


class CustomCallback(BaseModel):
    """Hand the engine client, term and params to a caller-supplied function.

    The callback's return value (awaited if it is awaitable) becomes the
    search result unchanged.
    """

    kind: Literal["callback"] = "callback"
    callback: SearchCallback = Field(description="callback(client, query, params) -> result")


ExecutionMode = Annotated[StandardExecution | CustomCallback, Field(discriminator="kind")]


class PageWindow(BaseModel):
    """Offset/size pair sent as ``from`` and ``size``."""

    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(default=0, ge=0, alias="from", description="Offset of the first hit")
    size: int = Field(ge=0, description="Number of hits to return")

    def to_body(self) -> dict[str, int]:
        return self.model_dump(by_alias=True)


class QueryDescriptor(BaseModel):
    """A single search request.

    Filters are combined with logical AND; orders form a tie-break chain,
    most significant first.

    Example:
        >>> descriptor = (
        ...     QueryDescriptor(model=Article, query="solar")
        ...     .where("status", "published")
        ...     .order_by("created_at", "desc")
        ...     .take(25)
        ... )
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    model: Any = Field(default=None, description="SearchableModel the hits resolve to")
    query: str = Field(default="", description="Free-text search term")
    index: str | None = Field(default=None, description="Index override (default: model's index)")
    wheres: list[WhereClause] = Field(default_factory=list, description="Equality filters, AND-ed")
    orders: list[OrderClause] = Field(default_factory=list, description="Sort chain in caller order")
    limit: int | None = Field(default=None, ge=0, description="Result window size for search()")
    execution: ExecutionMode = Field(default_factory=StandardExecution, description="How the query is executed")

    def where(self, field: str, value: Any) -> QueryDescriptor:
        """Add an equality filter. A repeated field replaces its earlier value."""
        for i, clause in enumerate(self.wheres):
            if clause.field == field:
                self.wheres[i] = WhereClause(field=field, value=value)
                return self
        self.wheres.append(WhereClause(field=field, value=value))
        return self

    def order_by(self, column: str, direction: str = "asc") -> QueryDescriptor:
        self.orders.append(OrderClause(column=column, direction=direction))  # type: ignore[arg-type]
        return self

    def take(self, limit: int) -> QueryDescriptor:
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        self.limit = limit
        return self

    def within(self, index: str) -> QueryDescriptor:
        self.index = index
        return self

    def using(self, callback: SearchCallback) -> QueryDescriptor:
        """Switch to callback execution."""
        self.execution = CustomCallback(callback=callback)
        return self

    @property
    def callback(self) -> SearchCallback | None:
        if isinstance(self.execution, CustomCallback):
            return self.execution.callback
        return None
