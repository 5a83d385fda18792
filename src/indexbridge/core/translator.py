"""Query Translator — Builds engine query bodies from query descriptors.

Output shape (Elasticsearch/OpenSearch query DSL)::

    {
        "index": "articles",
        "body": {
            "query": {"bool": {"must": {...text clause...}, "filter": [{"term": {...}}, ...]}},
            "from": 0,
            "size": 10,
            "sort": [{"created_at": "desc"}, {"id": "asc"}],
        },
    }

``filter`` is omitted without equality filters and ``sort`` is omitted
without orders, leaving the engine's default ordering in place.
"""

from __future__ import annotations

import logging
from typing import Any

from indexbridge.adapters.base.exceptions import ConfigurationError
from indexbridge.config.settings import SearchSettings
from indexbridge.core.indexes import resolve_index
from indexbridge.models.query import PageWindow, QueryDescriptor

logger = logging.getLogger(__name__)


class QueryTranslator:
    """Translate ``QueryDescriptor`` objects into search request params.

    Args:
        settings: Search settings (full-text wiring, search fields, index prefix).
    """

    def __init__(self, settings: SearchSettings | None = None) -> None:
        self.settings = settings or SearchSettings()

    def filters(self, descriptor: QueryDescriptor) -> list[dict[str, Any]]:
        """One exact ``term`` clause per equality filter, in caller order."""
        return [{"term": {clause.field: clause.value}} for clause in descriptor.wheres]

    def sort(self, descriptor: QueryDescriptor) -> list[dict[str, str]] | None:
        """Single-entry ``{column: direction}`` mappings, or None without orders."""
        if not descriptor.orders:
            return None
        return [{order.column: order.direction} for order in descriptor.orders]

    def text_clause(self, descriptor: QueryDescriptor) -> dict[str, Any]:
        """Full-text clause for the descriptor's term.

        Falls back to ``match_all`` for an empty term or when full-text
        matching is switched off.
        """
        term = descriptor.query.strip()
        if not term or not self.settings.full_text:
            return {"match_all": {}}

        multi_match: dict[str, Any] = {"query": term}
        if self.settings.search_fields:
            multi_match["fields"] = list(self.settings.search_fields)
        return {"multi_match": multi_match}

    def build_query(self, descriptor: QueryDescriptor) -> dict[str, Any]:
        text = self.text_clause(descriptor)
        filters = self.filters(descriptor)
        if not filters:
            return text
        return {"bool": {"must": text, "filter": filters}}

    def build_body(self, descriptor: QueryDescriptor, window: PageWindow) -> dict[str, Any]:
        body: dict[str, Any] = {"query": self.build_query(descriptor), **window.to_body()}
        sort = self.sort(descriptor)
        if sort:
            body["sort"] = sort
        return body

    def resolve_index(self, descriptor: QueryDescriptor) -> str:
        """Index override if set, else the model's default index.

        Raises:
            ConfigurationError: If the descriptor names neither.
        """
        if descriptor.index:
            index = descriptor.index
        elif descriptor.model is not None:
            index = descriptor.model.searchable_as()
        else:
            raise ConfigurationError("Query descriptor has neither an index nor a model to search.")
        return resolve_index(index, self.settings.index_prefix)

    def build_params(self, descriptor: QueryDescriptor, window: PageWindow) -> dict[str, Any]:
        """Complete ``search()`` params: target index plus query body."""
        params = {
            "index": self.resolve_index(descriptor),
            "body": self.build_body(descriptor, window),
        }
        logger.debug("Translated query for index %s: %s", params["index"], params["body"])
        return params
