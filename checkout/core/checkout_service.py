"""Checkout service: implements CheckoutPort for a single cart session.

Owns the cart, looks scanned SKUs up through the item repository and runs
the registered promotions when a summary is requested. Every public
operation reports expected failures through the Output envelope; anything
unexpected is logged and surfaced as InternalFaultError.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from .errors import EmptyCartError, InternalFaultError, InvalidInputError, ItemNotFoundError
from .models import Cart, Item, Output, format_money
from .ports import CheckoutPort, ItemRepositoryPort, PromotionPort

logger = logging.getLogger(__name__)


class CheckoutService(CheckoutPort):
    """Core implementation of CheckoutPort.

    Promotion policy: promotions run in registration order over a working
    copy of the cart. Each promotion sees the scanned items plus the
    output of the promotions registered before it; a promotion never sees
    its own output, and the results are not written back to the cart.
    """

    def __init__(
        self,
        item_repository: ItemRepositoryPort,
        promotions: Sequence[PromotionPort] = (),
    ):
        """Initialize the checkout service.

        Args:
            item_repository: ItemRepositoryPort used to resolve scanned SKUs.
            promotions: PromotionPort strategies, applied in order.
        """
        self.item_repository = item_repository
        self.promotions: tuple[PromotionPort, ...] = tuple(promotions)
        self.cart = Cart()

    def clear(self) -> Output[bool]:
        output: Output[bool] = Output(data=False)
        try:
            self.cart.clear()
            output.data = True
        except Exception as e:
            logger.exception("Failed clearing items")
            output.error = InternalFaultError(f"Failed clearing items: {e}", cause=e)
        return output

    def scan(self, sku: str | None) -> Output[bool]:
        output: Output[bool] = Output(data=False)
        try:
            if not isinstance(sku, str) or not sku.strip():
                output.error = InvalidInputError()
                return output

            selected = self.item_repository.select_one(sku)
            if selected.error is not None:
                output.error = selected.error
                return output
            if selected.data is None:
                output.error = ItemNotFoundError()
                return output

            self.cart.add(selected.data)
            output.data = True
            logger.debug(f"Scanned {sku}", extra={"sku": sku, "cart_size": len(self.cart)})
        except Exception as e:
            logger.exception(f"Failed scanning item {sku!r}")
            output.error = InternalFaultError(f"Failed scanning item: {e}", cause=e)
        return output

    def summary(self) -> Output[str]:
        output: Output[str] = Output()
        try:
            if self.cart.is_empty():
                output.error = EmptyCartError()
                return output

            items = self._apply_promotions(self.cart.snapshot())

            skus = ", ".join(item.sku for item in items)
            total_price = sum((item.net_price for item in items), Decimal(0))

            output.data = "\n".join(
                [
                    f"SKUs Scanned: {skus}",
                    f"Total expected: ${format_money(total_price)}",
                ]
            )
        except Exception as e:
            logger.exception("Failed calculating total")
            output.error = InternalFaultError(f"Failed calculating total: {e}", cause=e)
        return output

    def total(self) -> None:
        summary = self.summary()
        if summary.error is not None or not summary.data:
            logger.warning(
                f"Failed totaling checkout: {summary.error!r}",
                extra={"error": repr(summary.error)},
            )
            return

        print(summary.data)

    def _apply_promotions(self, scanned: Sequence[Item]) -> list[Item]:
        """Run every promotion, appending each result before the next runs."""
        items = list(scanned)
        for promotion in self.promotions:
            added = promotion.apply(tuple(items))
            if added:
                logger.debug(
                    f"{type(promotion).__name__} added {len(added)} item(s)",
                    extra={"promotion": type(promotion).__name__, "added": len(added)},
                )
            items.extend(added)
        return items
