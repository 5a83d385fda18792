"""OpenSearch client factory."""

from __future__ import annotations

import logging
from typing import Any

from opensearchpy import AsyncOpenSearch

from indexbridge.config.settings import EngineSettings

logger = logging.getLogger(__name__)


def create_client(settings: EngineSettings | None = None) -> AsyncOpenSearch:
    """Create an ``AsyncOpenSearch`` client from engine settings.

    No request is made; connection problems surface on first use.

    Args:
        settings: Engine connection settings. Uses defaults if None.

    Returns:
        A configured ``AsyncOpenSearch`` client. Close it with ``await client.close()``.
    """
    settings = settings or EngineSettings()

    client_kwargs: dict[str, Any] = {
        "hosts": settings.hosts,
        "verify_certs": settings.verify_certs,
        "ssl_show_warn": False,
        "timeout": settings.timeout,
    }
    if settings.username and settings.password:
        client_kwargs["http_auth"] = (settings.username, settings.password)

    client_kwargs.update(settings.extra)

    logger.debug("Creating OpenSearch client for %s", ", ".join(settings.hosts))
    return AsyncOpenSearch(**client_kwargs)
