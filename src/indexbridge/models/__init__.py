"""Data models shared by the adapter components."""

from indexbridge.models.bulk import BulkAction, BulkItemFailure, BulkResult
from indexbridge.models.document import SearchableDocument, SearchableModel
from indexbridge.models.query import (
    CustomCallback,
    ExecutionMode,
    OrderClause,
    PageWindow,
    QueryDescriptor,
    StandardExecution,
    WhereClause,
)

__all__ = [
    "BulkAction",
    "BulkItemFailure",
    "BulkResult",
    "CustomCallback",
    "ExecutionMode",
    "OrderClause",
    "PageWindow",
    "QueryDescriptor",
    "SearchableDocument",
    "SearchableModel",
    "StandardExecution",
    "WhereClause",
]
