"""Index adapter layer — Engine drivers for the search index.

Built-in adapters:
  - opensearch: OpenSearch v2+ / Elasticsearch-compatible engines

Implement ``IndexAdapter`` to drive another engine.
"""
