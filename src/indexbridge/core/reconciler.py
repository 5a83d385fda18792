"""Result Reconciler — Maps raw engine responses back to domain objects.

Engine order is the source of truth: mapped collections follow the hit
order exactly. Hits the persistence layer cannot resolve are dropped
without error, since the index and the store are only eventually
consistent.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any

from indexbridge.models.document import SearchableModel, search_key
from indexbridge.models.query import QueryDescriptor

logger = logging.getLogger(__name__)


class ResultReconciler:
    """Extract identifiers and counts from search responses."""

    @staticmethod
    def map_ids(results: dict[str, Any]) -> list[str]:
        """Hit identifiers in engine order (duplicates kept)."""
        return [hit["_id"] for hit in results["hits"]["hits"]]

    @staticmethod
    def total_count(results: dict[str, Any]) -> int:
        """Total match count as reported by the engine.

        Accepts both the ``{"value": n, "relation": ...}`` form and the bare
        integer returned by older engine versions.
        """
        total = results["hits"]["total"]
        if isinstance(total, dict):
            return total["value"]
        return total

    def map(
        self,
        descriptor: QueryDescriptor,
        results: dict[str, Any],
        model: SearchableModel,
    ) -> MutableSequence[Any]:
        """Resolve hits into domain objects ordered by engine rank.

        Args:
            descriptor: The query that produced *results*; passed through to
                the persistence layer for extra scoping.
            results: Raw engine search response.
            model: Document type that resolves identifiers.

        Returns:
            A collection from ``model.new_collection()`` holding the resolved
            objects in hit order.
        """
        collection = model.new_collection()
        if self.total_count(results) == 0:
            return collection

        ids = self.map_ids(results)
        if not ids:
            return collection

        positions = {doc_id: rank for rank, doc_id in enumerate(ids)}
        resolved = [
            obj for obj in model.get_models_by_ids(descriptor, ids) if search_key(obj) in positions
        ]
        resolved.sort(key=lambda obj: positions[search_key(obj)])

        if len(resolved) < len(positions):
            logger.debug(
                "Dropped %d hit(s) the persistence layer could not resolve",
                len(positions) - len(resolved),
            )

        collection.extend(resolved)
        return collection
