"""Demo catalog and promotions.

Only the composition root builds these; core code never reaches for a
shared repository.
"""

from decimal import Decimal

from checkout.core.models import Item, PromotionRuleItem
from checkout.core.ports import PromotionPort
from checkout.core.promotion import BundlePromotion

from .memory import InMemoryItemRepository

IPAD = Item(sku="ipd", name="Super iPad", price=Decimal("549.99"))
MACBOOK = Item(sku="mbp", name="MacBook Pro", price=Decimal("1399.99"))
APPLE_TV = Item(sku="atv", name="Apple TV", price=Decimal("109.50"))
VGA_ADAPTER = Item(sku="vga", name="VGA adapter", price=Decimal("30.00"))

DEMO_ITEMS: tuple[Item, ...] = (IPAD, MACBOOK, APPLE_TV, VGA_ADAPTER)

# One free VGA adapter with every MacBook Pro.
MACBOOK_VGA_BUNDLE = PromotionRuleItem.from_item(
    MACBOOK,
    bundle_items=[Item(sku=VGA_ADAPTER.sku, name=VGA_ADAPTER.name, price=Decimal(0))],
    minimum_quantity=1,
)


def build_demo_repository() -> InMemoryItemRepository:
    """Create a fresh repository holding the demo items."""
    return InMemoryItemRepository(DEMO_ITEMS)


def build_demo_promotions() -> list[PromotionPort]:
    """Create the promotions that go with the demo catalog."""
    return [BundlePromotion([MACBOOK_VGA_BUNDLE])]
