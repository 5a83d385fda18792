"""Searchable document contracts.

The adapter never owns domain objects. It talks to them through two
structural interfaces:

- ``SearchableDocument`` — an instance that can be indexed.
- ``SearchableModel`` — the type (or repository) that resolves identifiers
  back into instances.

Domain classes satisfy these protocols by providing the methods; no base
class needs to be inherited. A model class commonly implements both, with
the resolution methods as classmethods.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from indexbridge.models.query import QueryDescriptor


@runtime_checkable
class SearchableDocument(Protocol):
    """An object the engine can index."""

    def searchable_as(self) -> str:
        """Name of the index this object belongs to."""
        ...

    def get_search_key(self) -> Any:
        """Stable identifier used as the engine ``_id``."""
        ...

    def to_searchable_dict(self) -> dict[str, Any]:
        """Key/value payload of the searchable fields."""
        ...


@runtime_checkable
class SearchableModel(Protocol):
    """A document type that can materialise search hits."""

    def searchable_as(self) -> str:
        """Default index name for this document type."""
        ...

    def get_models_by_ids(
        self, descriptor: QueryDescriptor, ids: Sequence[str]
    ) -> Iterable[SearchableDocument]:
        """Resolve identifiers into instances.

        Implementations may apply extra scoping taken from *descriptor* and
        may return the objects in any order.
        """
        ...

    def new_collection(self) -> MutableSequence[Any]:
        """Return an empty collection for this document type."""
        ...


def search_key(document: SearchableDocument) -> str:
    """Return the document identifier in the engine's string form."""
    return str(document.get_search_key())
