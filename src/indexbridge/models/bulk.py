"""Bulk mutation models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class BulkAction(BaseModel):
    """One index mutation inside a bulk request."""

    action: Literal["update", "delete"] = Field(description="Bulk operation type")
    index: str = Field(description="Target index")
    id: str = Field(description="Document identifier")
    payload: dict[str, Any] | None = Field(default=None, description="Searchable fields (update only)")

    def to_directives(self) -> list[dict[str, Any]]:
        """Render as bulk body lines: a header, plus a doc line for updates."""
        lines: list[dict[str, Any]] = [{self.action: {"_index": self.index, "_id": self.id}}]
        if self.action == "update":
            lines.append({"doc": self.payload or {}, "doc_as_upsert": True})
        return lines


class BulkItemFailure(BaseModel):
    """A single rejected item from a bulk response."""

    action: str = Field(description="Bulk operation type of the item")
    index: str | None = Field(default=None, description="Index reported by the engine")
    id: str | None = Field(default=None, description="Identifier reported by the engine")
    status: int = Field(default=0, description="HTTP status of the item")
    reason: str = Field(default="", description="Engine error reason")


class BulkResult(BaseModel):
    """Summary of a bulk request.

    An empty batch produces the default instance without touching the engine.
    """

    took: int = Field(default=0, description="Engine-side execution time in ms")
    errors: bool = Field(default=False, description="Whether any item failed")
    items: int = Field(default=0, description="Number of items acknowledged by the engine")
    failures: list[BulkItemFailure] = Field(default_factory=list, description="Per-item failures")

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> BulkResult:
        """Parse an engine ``_bulk`` response."""
        items = response.get("items", [])
        failures: list[BulkItemFailure] = []
        for item in items:
            for action, outcome in item.items():
                error = outcome.get("error")
                if not error:
                    continue
                reason = error.get("reason", "") if isinstance(error, dict) else str(error)
                failures.append(
                    BulkItemFailure(
                        action=action,
                        index=outcome.get("_index"),
                        id=outcome.get("_id"),
                        status=outcome.get("status", 0),
                        reason=reason or "",
                    )
                )
        return cls(
            took=response.get("took", 0),
            errors=bool(response.get("errors", False)) or bool(failures),
            items=len(items),
            failures=failures,
        )
