"""OpenSearch index adapter."""

from indexbridge.adapters.opensearch.adapter import OpenSearchIndexAdapter
from indexbridge.adapters.opensearch.client import create_client

__all__ = ["OpenSearchIndexAdapter", "create_client"]
