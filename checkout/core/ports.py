"""Port interfaces for the checkout system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - ItemRepositoryPort: Store and look up items by SKU
   - PromotionPort: Derive extra items from the cart contents

2. **Driving Ports** (adapters/external systems call into core)
   - CheckoutPort: Scan, clear, summarize and total a cart
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import Item, Output


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ItemRepositoryPort(ABC):
    """Port for storing and retrieving catalog items.

    Adapters implementing this port own the SKU -> Item mapping. The
    checkout session only needs bulk insert and single lookup.
    """

    @abstractmethod
    def insert_many(self, items: Sequence[Item]) -> Output[bool]:
        """Insert all given items keyed by SKU.

        Args:
            items: Items to store. An item whose SKU already exists
                replaces the stored record.

        Returns:
            Output with data=True on success. On an internal fault,
            data=False and error set to InternalFaultError.
        """

    @abstractmethod
    def select_one(self, sku: str) -> Output[Item]:
        """Look up a single item by SKU.

        Args:
            sku: The SKU to look up.

        Returns:
            Output with the stored item as data. When the SKU is unknown
            the Output carries neither data nor error; converting that into
            ItemNotFoundError is the caller's job. An error is only set for
            faults inside the repository itself.
        """


class PromotionPort(ABC):
    """Port for a promotion strategy.

    A strategy inspects the cart and returns the items to append to it
    (free bundle items, discount lines, ...). Implementations must not
    mutate the sequence they are given.
    """

    @abstractmethod
    def apply(self, cart: Sequence[Item]) -> list[Item]:
        """Compute the items this promotion adds to the cart.

        Args:
            cart: Current cart contents, in scan order.

        Returns:
            Items to append, in the order they should appear. Empty list
            when the promotion does not apply.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class CheckoutPort(ABC):
    """Port for driving a single checkout session.

    None of these operations raise; expected failures are reported in the
    returned Output.
    """

    @abstractmethod
    def clear(self) -> Output[bool]:
        """Empty the cart.

        Returns:
            Output with data=True on success.
        """

    @abstractmethod
    def scan(self, sku: str | None) -> Output[bool]:
        """Look up an item and add it to the cart.

        Args:
            sku: SKU of the scanned item.

        Returns:
            Output with data=True on success; data=False and an error
            (InvalidInputError, ItemNotFoundError or a repository error)
            otherwise.
        """

    @abstractmethod
    def summary(self) -> Output[str]:
        """Render the scanned SKUs and the expected total.

        Returns:
            Output with the two-line summary, or EmptyCartError when
            nothing has been scanned.
        """

    @abstractmethod
    def total(self) -> None:
        """Write the summary to stdout, logging any failure instead."""
