"""Base adapter interface — Abstract class for search index drivers."""

from indexbridge.adapters.base.adapter import IndexAdapter

__all__ = ["IndexAdapter"]
