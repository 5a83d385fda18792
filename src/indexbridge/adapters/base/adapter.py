"""Base index adapter — Abstract interface for search engine index drivers.

Every engine driver implements this interface. The adapter is responsible for:
  1. Writing document mutations to the engine in bulk
  2. Executing translated searches (full window or one page)
  3. Mapping raw responses back to identifiers and domain objects
  4. Dropping a document type's whole index on request
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence
from typing import Any

from indexbridge.adapters.base.exceptions import ConfigurationError
from indexbridge.models.bulk import BulkResult
from indexbridge.models.document import SearchableDocument, SearchableModel
from indexbridge.models.query import QueryDescriptor


class IndexAdapter(ABC):
    """Abstract base class for search index adapters.

    Adapters hold no mutable state beyond their engine client, so a single
    instance may serve concurrent callers when the client allows it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'opensearch')."""

    @abstractmethod
    async def update(self, documents: Iterable[SearchableDocument]) -> BulkResult:
        """Upsert the given documents in one bulk request.

        An empty batch is a no-op.
        """

    @abstractmethod
    async def delete(self, documents: Iterable[SearchableDocument]) -> BulkResult:
        """Remove the given documents in one bulk request.

        An empty batch is a no-op.
        """

    @abstractmethod
    async def search(self, descriptor: QueryDescriptor) -> Any:
        """Run the descriptor from offset 0 and return the raw response."""

    @abstractmethod
    async def paginate(self, descriptor: QueryDescriptor, per_page: int, page: int) -> Any:
        """Run the descriptor for one 1-indexed page and return the raw response."""

    @abstractmethod
    def map_ids(self, results: Any) -> list[str]:
        """Hit identifiers in engine order."""

    @abstractmethod
    def map(
        self, descriptor: QueryDescriptor, results: Any, model: SearchableModel
    ) -> MutableSequence[Any]:
        """Domain objects for the hits, in engine order."""

    @abstractmethod
    def get_total_count(self, results: Any) -> int:
        """Total number of matches reported by the engine."""

    @abstractmethod
    async def flush(self, model: SearchableModel) -> None:
        """Delete the model's entire index."""

    async def keys(self, descriptor: QueryDescriptor) -> list[str]:
        """Search and return the matching identifiers.

        Convenience method that calls search() and then map_ids().
        """
        return self.map_ids(await self.search(descriptor))

    async def get(self, descriptor: QueryDescriptor) -> MutableSequence[Any]:
        """Search and return the matching domain objects.

        Convenience method that calls search() and then map() with the
        descriptor's own model.

        Raises:
            ConfigurationError: If the descriptor has no model.
        """
        if descriptor.model is None:
            raise ConfigurationError("Query descriptor has no model to map results to.")
        results = await self.search(descriptor)
        return self.map(descriptor, results, descriptor.model)
