"""In-memory item repository.

Implements ItemRepositoryPort with a plain dict. Nothing is persisted
across runs.
"""

import logging
from collections.abc import Sequence

from checkout.core.errors import InternalFaultError
from checkout.core.models import Item, Output
from checkout.core.ports import ItemRepositoryPort

logger = logging.getLogger(__name__)


class InMemoryItemRepository(ItemRepositoryPort):
    """Stores items in a dict keyed by SKU."""

    def __init__(self, items: Sequence[Item] = ()):
        """Initialize the repository, optionally preloaded.

        Args:
            items: Items to insert on creation.
        """
        self._items: dict[str, Item] = {}
        if items:
            self.insert_many(items)

    def insert_many(self, items: Sequence[Item]) -> Output[bool]:
        output: Output[bool] = Output(data=False)
        try:
            for item in items:
                if item.sku in self._items:
                    logger.debug(f"Overwriting item {item.sku}", extra={"sku": item.sku})
                self._items[item.sku] = item
            output.data = True
        except Exception as e:
            logger.exception("Failed inserting items")
            output.error = InternalFaultError(f"Failed inserting items: {e}", cause=e)
        return output

    def select_one(self, sku: str) -> Output[Item]:
        # Unknown SKU: neither data nor error.
        return Output(data=self._items.get(sku))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, sku: object) -> bool:
        return sku in self._items
