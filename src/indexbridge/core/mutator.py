"""Batch Mutator — Groups document mutations into one bulk request body."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from indexbridge.core.indexes import resolve_index
from indexbridge.models.bulk import BulkAction
from indexbridge.models.document import SearchableDocument, search_key


class BatchMutator:
    """Build bulk upsert and delete batches.

    Batches are plain lists, built per call and discarded once sent.

    Args:
        index_prefix: Prefix applied to each document's index name.
    """

    def __init__(self, index_prefix: str = "") -> None:
        self.index_prefix = index_prefix

    def upserts(self, documents: Iterable[SearchableDocument]) -> list[BulkAction]:
        return [
            BulkAction(
                action="update",
                index=resolve_index(document.searchable_as(), self.index_prefix),
                id=search_key(document),
                payload=document.to_searchable_dict(),
            )
            for document in documents
        ]

    def deletes(self, documents: Iterable[SearchableDocument]) -> list[BulkAction]:
        return [
            BulkAction(
                action="delete",
                index=resolve_index(document.searchable_as(), self.index_prefix),
                id=search_key(document),
            )
            for document in documents
        ]

    @staticmethod
    def to_body(actions: Iterable[BulkAction]) -> list[dict[str, Any]]:
        """Flatten actions into the ordered directive list of a bulk request."""
        body: list[dict[str, Any]] = []
        for action in actions:
            body.extend(action.to_directives())
        return body
