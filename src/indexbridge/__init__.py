"""IndexBridge — Search-index adapter for Elasticsearch-compatible engines."""

__version__ = "0.1.0"
