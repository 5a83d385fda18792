"""Index name resolution."""

from __future__ import annotations


def resolve_index(index: str, prefix: str = "") -> str:
    """Apply the configured index prefix.

    Names that already start with ``"{prefix}_"`` are returned unchanged.
    A name that merely shares leading characters with the prefix is still
    prefixed.

    Args:
        index: Raw index name.
        prefix: Configured prefix ("" disables prefixing).

    Returns:
        The index name sent to the engine.
    """
    if prefix and not index.startswith(f"{prefix}_"):
        return f"{prefix}_{index}"
    return index
