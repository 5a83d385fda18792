"""OpenSearch adapter — Index driver for OpenSearch and Elasticsearch-compatible engines.

The adapter wraps an ``opensearchpy.AsyncOpenSearch`` client (see
``indexbridge.adapters.opensearch.client.create_client``) and composes the
core components:

  - ``QueryTranslator`` builds the query body
  - ``BatchMutator`` builds bulk upsert/delete bodies
  - ``ResultReconciler`` maps responses back to identifiers and objects

Every public coroutine awaits at most one engine call. Engine errors are
not caught here and reach the caller unchanged.

Usage::

    client = create_client(settings.engine)
    adapter = OpenSearchIndexAdapter(client, settings.search)
    await adapter.update(articles)
    results = await adapter.search(QueryDescriptor(model=Article).where("status", "published"))
    articles = adapter.map(descriptor, results, Article)
"""

from __future__ import annotations

import inspect
import logging
import math
from collections.abc import Iterable, Mapping, MutableSequence
from typing import Any

from indexbridge.adapters.base.adapter import IndexAdapter
from indexbridge.adapters.base.exceptions import PaginationError
from indexbridge.config.settings import SearchSettings
from indexbridge.core.indexes import resolve_index
from indexbridge.core.mutator import BatchMutator
from indexbridge.core.reconciler import ResultReconciler
from indexbridge.core.translator import QueryTranslator
from indexbridge.models.bulk import BulkAction, BulkResult
from indexbridge.models.document import SearchableDocument, SearchableModel
from indexbridge.models.query import PageWindow, QueryDescriptor

logger = logging.getLogger(__name__)


class OpenSearchIndexAdapter(IndexAdapter):
    """Index adapter for OpenSearch (v2+) and Elasticsearch (v7+).

    Args:
        client: An ``AsyncOpenSearch`` client, or any object exposing the
            same ``bulk``, ``search`` and ``indices.delete`` coroutines.
        settings: Search settings. Uses defaults if None.
    """

    def __init__(self, client: Any, settings: SearchSettings | None = None) -> None:
        self._client = client
        self._settings = settings or SearchSettings()
        self._translator = QueryTranslator(self._settings)
        self._mutator = BatchMutator(self._settings.index_prefix)
        self._reconciler = ResultReconciler()

    @property
    def name(self) -> str:
        return "opensearch"

    @property
    def client(self) -> Any:
        return self._client

    # ── Mutations ────────────────────────────────────────────────────────

    async def update(self, documents: Iterable[SearchableDocument]) -> BulkResult:
        """Upsert documents; missing index entries are created."""
        return await self._bulk(self._mutator.upserts(documents))

    async def delete(self, documents: Iterable[SearchableDocument]) -> BulkResult:
        """Delete documents by index and identifier."""
        return await self._bulk(self._mutator.deletes(documents))

    async def _bulk(self, actions: list[BulkAction]) -> BulkResult:
        if not actions:
            return BulkResult()

        body = self._mutator.to_body(actions)
        logger.debug("Sending bulk request: %d action(s), %d line(s)", len(actions), len(body))
        response = await self._client.bulk(body=body)

        result = BulkResult.from_response(response)
        if result.errors:
            logger.warning(
                "Bulk request finished with %d failed item(s) out of %d",
                len(result.failures),
                result.items,
            )
        return result

    # ── Search ───────────────────────────────────────────────────────────

    async def search(self, descriptor: QueryDescriptor) -> Any:
        """Search from offset 0, ``limit`` hits (default page size when unset)."""
        size = descriptor.limit or self._settings.default_page_size
        return await self._perform_search(descriptor, PageWindow(from_=0, size=size))

    async def paginate(self, descriptor: QueryDescriptor, per_page: int, page: int) -> Any:
        """Search one 1-indexed page.

        The response comes back as a shallow copy with ``nbPages`` set to
        ``ceil(total / per_page)``. A callback result that is not a search
        response (a mapping with ``hits``) is returned unchanged.

        Raises:
            PaginationError: If ``per_page`` or ``page`` is below 1.
        """
        if per_page < 1:
            raise PaginationError(f"per_page must be >= 1, got {per_page}")
        if page < 1:
            raise PaginationError(f"page must be >= 1, got {page}")

        window = PageWindow(from_=(page * per_page) - per_page, size=per_page)
        results = await self._perform_search(descriptor, window)
        if not isinstance(results, Mapping) or "hits" not in results:
            return results

        paginated = dict(results)
        paginated["nbPages"] = math.ceil(self._reconciler.total_count(results) / per_page)
        return paginated

    async def _perform_search(self, descriptor: QueryDescriptor, window: PageWindow) -> Any:
        params = self._translator.build_params(descriptor, window)

        callback = descriptor.callback
        if callback is not None:
            logger.debug("Delegating search on %s to custom callback", params["index"])
            result = callback(self._client, descriptor.query, params)
            if inspect.isawaitable(result):
                result = await result
            return result

        logger.debug("Searching %s (from=%d, size=%d)", params["index"], window.from_, window.size)
        return await self._client.search(index=params["index"], body=params["body"])

    # ── Result mapping ───────────────────────────────────────────────────

    def map_ids(self, results: Any) -> list[str]:
        return self._reconciler.map_ids(results)

    def map(
        self, descriptor: QueryDescriptor, results: Any, model: SearchableModel
    ) -> MutableSequence[Any]:
        return self._reconciler.map(descriptor, results, model)

    def get_total_count(self, results: Any) -> int:
        return self._reconciler.total_count(results)

    # ── Administration ───────────────────────────────────────────────────

    async def flush(self, model: SearchableModel) -> None:
        """Delete the model's whole index. Irreversible; callers must gate it."""
        index = resolve_index(model.searchable_as(), self._settings.index_prefix)
        logger.info("Deleting index %s", index)
        await self._client.indices.delete(index=index)
