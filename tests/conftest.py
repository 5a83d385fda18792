"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from indexbridge.config.settings import SearchSettings, Settings
from indexbridge.models.query import QueryDescriptor


@dataclass
class Article:
    """Minimal searchable document."""

    id: int
    title: str
    status: str = "published"
    index: str = "articles"

    def searchable_as(self) -> str:
        return self.index

    def get_search_key(self) -> int:
        return self.id

    def to_searchable_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "status": self.status}


@dataclass
class ArticleStore:
    """In-memory persistence layer for ``Article``.

    Resolves identifiers in reverse order so tests can check that mapping
    restores engine order, and records every lookup.
    """

    articles: dict[str, Article] = field(default_factory=dict)
    calls: list[tuple[QueryDescriptor, list[str]]] = field(default_factory=list)
    extra: list[Article] = field(default_factory=list)

    def searchable_as(self) -> str:
        return "articles"

    def get_models_by_ids(self, descriptor: QueryDescriptor, ids: Sequence[str]) -> list[Article]:
        self.calls.append((descriptor, list(ids)))
        found = [self.articles[i] for i in ids if i in self.articles]
        return list(reversed(found)) + self.extra

    def new_collection(self) -> list[Article]:
        return []


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def search_settings() -> SearchSettings:
    return SearchSettings()


@pytest.fixture
def articles() -> list[Article]:
    return [
        Article(id=2, title="Solar nowcasting with satellites"),
        Article(id=5, title="Wind farm layout optimisation", status="draft"),
        Article(id=9, title="Grid-scale battery storage"),
    ]


@pytest.fixture
def store(articles: list[Article]) -> ArticleStore:
    return ArticleStore(articles={str(a.id): a for a in articles})


@pytest.fixture
def mock_client() -> MagicMock:
    """Engine client double with the AsyncOpenSearch call surface."""
    client = MagicMock()
    client.bulk = AsyncMock(return_value={"took": 3, "errors": False, "items": []})
    client.search = AsyncMock(return_value={"hits": {"total": {"value": 0}, "hits": []}})
    client.indices = MagicMock()
    client.indices.delete = AsyncMock(return_value={"acknowledged": True})
    client.close = AsyncMock()
    return client


@pytest.fixture
def make_response() -> Callable[..., dict[str, Any]]:
    """Build a raw search response for the given hit identifiers."""

    def _make(ids: Sequence[str], total: int | None = None) -> dict[str, Any]:
        return {
            "took": 2,
            "timed_out": False,
            "hits": {
                "total": {"value": len(ids) if total is None else total, "relation": "eq"},
                "max_score": 1.0,
                "hits": [
                    {"_index": "articles", "_id": doc_id, "_score": 1.0 - rank * 0.1}
                    for rank, doc_id in enumerate(ids)
                ],
            },
        }

    return _make


@pytest.fixture
def article_cls() -> type[Article]:
    return Article
