"""Core domain logic for the checkout system.

This package contains zero external dependencies and represents
the pure business logic of the application. The item catalog and the
entry point are handled by the adapters package and the composition root.
"""

from .checkout_service import CheckoutService
from .errors import (
    CheckoutError,
    EmptyCartError,
    InternalFaultError,
    InvalidInputError,
    ItemNotFoundError,
)
from .models import Cart, Item, Output, PromotionRuleItem
from .ports import CheckoutPort, ItemRepositoryPort, PromotionPort
from .promotion import BundlePromotion

__all__ = [
    "BundlePromotion",
    "Cart",
    "CheckoutError",
    "CheckoutPort",
    "CheckoutService",
    "EmptyCartError",
    "InternalFaultError",
    "InvalidInputError",
    "Item",
    "ItemNotFoundError",
    "ItemRepositoryPort",
    "Output",
    "PromotionPort",
    "PromotionRuleItem",
]
