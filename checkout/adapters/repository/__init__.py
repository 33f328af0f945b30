"""Item repository adapters.

Implementations:
- InMemoryItemRepository (process-local dict keyed by SKU)
- build_demo_repository (in-memory repository preloaded with demo items)
"""

from .demo import build_demo_promotions, build_demo_repository
from .memory import InMemoryItemRepository

__all__ = ["InMemoryItemRepository", "build_demo_promotions", "build_demo_repository"]
