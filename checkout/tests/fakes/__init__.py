"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without the real adapters:

- FakeItemRepositoryPort: In-memory item storage with call tracking
- FakePromotionPort: Canned promotion results with call tracking
"""

from .promotion import FakePromotionPort
from .repository import FakeItemRepositoryPort

__all__ = [
    "FakeItemRepositoryPort",
    "FakePromotionPort",
]
