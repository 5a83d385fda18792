"""Core translation components used by the index adapters."""

from indexbridge.core.mutator import BatchMutator
from indexbridge.core.reconciler import ResultReconciler
from indexbridge.core.translator import QueryTranslator

__all__ = ["BatchMutator", "QueryTranslator", "ResultReconciler"]
