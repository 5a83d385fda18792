"""Integration test fixtures — a live OpenSearch/Elasticsearch node.

Expects a single node at localhost:9200 with security disabled, e.g.:
    docker run -p 9200:9200 -e discovery.type=single-node \
        -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2

Tests are skipped when no node answers.
"""

from __future__ import annotations

import time
from collections.abc import AsyncIterator

import httpx
import pytest

from indexbridge.adapters.opensearch import OpenSearchIndexAdapter, create_client
from indexbridge.config.settings import EngineSettings, SearchSettings

ENGINE_HOST = "http://localhost:9200"
INDEX_PREFIX = "indexbridge_it"


def _wait_for_service(url: str, timeout: float = 30.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=5)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


def _refresh(host: str) -> None:
    httpx.post(f"{host}/{INDEX_PREFIX}_*/_refresh", timeout=10)


@pytest.fixture(scope="session")
def engine_ready() -> str:
    """Ensure a search node is running."""
    if not _wait_for_service(ENGINE_HOST):
        pytest.skip(f"Search engine not available at {ENGINE_HOST}")
    return ENGINE_HOST


@pytest.fixture
def refresh(engine_ready: str):
    """Make pending writes searchable."""
    return lambda: _refresh(engine_ready)


@pytest.fixture
async def adapter(engine_ready: str) -> AsyncIterator[OpenSearchIndexAdapter]:
    client = create_client(EngineSettings(hosts=[engine_ready], verify_certs=False))
    a = OpenSearchIndexAdapter(client, SearchSettings(index_prefix=INDEX_PREFIX))
    yield a
    await client.indices.delete(index=f"{INDEX_PREFIX}_articles", ignore_unavailable=True)
    await client.close()
