"""Promotion strategies.

Pure decision logic: strategies read the cart and return new items,
they never modify the cart themselves.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import replace

from .models import Item, PromotionRuleItem
from .ports import PromotionPort

logger = logging.getLogger(__name__)


class BundlePromotion(PromotionPort):
    """Adds bundle items for every full group of a trigger SKU.

    With a rule of ``minimum_quantity=2`` on ``mbp`` and a bundle of one
    free ``vga``, five ``mbp`` in the cart yield two ``vga`` copies.
    """

    def __init__(self, rules: Sequence[PromotionRuleItem]):
        """Initialize the bundle promotion.

        Args:
            rules: Bundle rules, applied in the given order.

        Raises:
            ValueError: If a rule is not a PromotionRuleItem.
        """
        for rule in rules:
            if not isinstance(rule, PromotionRuleItem):
                raise ValueError(
                    f"Bundle rules must be PromotionRuleItem, got {type(rule).__name__}"
                )
        self.rules: tuple[PromotionRuleItem, ...] = tuple(rules)

    def apply(self, cart: Sequence[Item]) -> list[Item]:
        """Return the bundle items earned by the cart."""
        counts = Counter(item.sku for item in cart)
        added: list[Item] = []

        for rule in self.rules:
            groups = counts[rule.sku] // rule.minimum_quantity
            if groups == 0:
                continue

            for _ in range(groups):
                added.extend(replace(bundle_item) for bundle_item in rule.bundle_items)

            logger.debug(
                f"Bundle rule {rule.sku} matched {groups} time(s)",
                extra={"sku": rule.sku, "groups": groups},
            )

        return added
