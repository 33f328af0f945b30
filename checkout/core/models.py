"""Domain models for the checkout system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from .errors import CheckoutError

T = TypeVar("T")


def to_money(value: Decimal | float | int | str) -> Decimal:
    """Convert a price-like value to Decimal without float noise.

    Floats go through ``str`` so ``1.99`` becomes ``Decimal("1.99")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid money value: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid money value: {value!r}") from e


def format_money(amount: Decimal) -> str:
    """Render an amount in plain notation without trailing zeros."""
    normalized = amount.normalize()
    return format(normalized, "f")


@dataclass(frozen=True)
class Item:
    """A sellable item as stored in the repository."""

    sku: str
    name: str
    price: Decimal
    discount: Decimal | None = None

    def __post_init__(self) -> None:
        """Validate item invariants and normalize money fields."""
        if not isinstance(self.sku, str) or not self.sku.strip():
            raise ValueError("sku must be a non-empty string")
        price = to_money(self.price)
        if price < 0:
            raise ValueError(f"price must be non-negative, got {price}")
        object.__setattr__(self, "price", price)
        if self.discount is not None:
            discount = to_money(self.discount)
            if discount < 0:
                raise ValueError(f"discount must be non-negative, got {discount}")
            object.__setattr__(self, "discount", discount)

    @property
    def net_price(self) -> Decimal:
        """Price minus discount, treating a missing discount as zero."""
        return self.price - (self.discount or Decimal(0))


@dataclass(frozen=True)
class PromotionRuleItem(Item):
    """An item that triggers a bundle when bought in enough quantity.

    For every ``minimum_quantity`` units of ``sku`` in the cart, one copy of
    each entry in ``bundle_items`` is added.
    """

    bundle_items: tuple[Item, ...] = ()
    minimum_quantity: int = 1

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.bundle_items, list):
            object.__setattr__(self, "bundle_items", tuple(self.bundle_items))
        if isinstance(self.minimum_quantity, bool) or not isinstance(self.minimum_quantity, int):
            raise ValueError(
                f"minimum_quantity must be an integer, got {self.minimum_quantity!r}"
            )
        if self.minimum_quantity < 1:
            raise ValueError(
                f"minimum_quantity must be >= 1, got {self.minimum_quantity}"
            )

    @classmethod
    def from_item(
        cls, item: Item, bundle_items: Iterable[Item], minimum_quantity: int
    ) -> "PromotionRuleItem":
        """Build a rule on top of an existing catalog item."""
        return cls(
            sku=item.sku,
            name=item.name,
            price=item.price,
            discount=item.discount,
            bundle_items=tuple(bundle_items),
            minimum_quantity=minimum_quantity,
        )


@dataclass
class Cart:
    """Ordered, non-deduplicated list of scanned items.

    Note: This dataclass is intentionally mutable; it is owned by a single
    checkout session and only changed through scan and clear.
    """

    items: list[Item] = field(default_factory=list)

    def add(self, item: Item) -> None:
        self.items.append(item)

    def clear(self) -> None:
        self.items = []

    def snapshot(self) -> tuple[Item, ...]:
        """Immutable view of the current contents."""
        return tuple(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


@dataclass
class Output(Generic[T]):
    """Result envelope returned by repository and checkout operations.

    Both fields may be unset: an Output with neither data nor error is the
    uninitialized state, which is how a repository reports "not found".
    """

    data: T | None = None
    error: CheckoutError | None = None

    @property
    def ok(self) -> bool:
        """True when no error is set."""
        return self.error is None


__all__ = [
    "Cart",
    "Item",
    "Output",
    "PromotionRuleItem",
    "format_money",
    "to_money",
]
