"""Unit tests for the checkout service.

Tests verify that CheckoutService scans, clears, summarizes and totals a
cart correctly, applies promotions in order, and reports every failure
through the Output envelope.
"""

import logging
from decimal import Decimal

import pytest

from checkout.core.checkout_service import CheckoutService
from checkout.core.errors import (
    EmptyCartError,
    InternalFaultError,
    InvalidInputError,
    ItemNotFoundError,
)
from checkout.core.models import Item, Output, PromotionRuleItem
from checkout.core.promotion import BundlePromotion
from checkout.tests.fakes import FakeItemRepositoryPort, FakePromotionPort

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def promotion_rule_item_1() -> Item:
    return Item(sku="p01", name="valid-name-p1", price=1)


@pytest.fixture
def promotion_rule_item_2() -> Item:
    return Item(sku="p02", name="valid-name-p2", price=0.5)


@pytest.fixture
def repository(promotion_rule_item_1: Item, promotion_rule_item_2: Item) -> FakeItemRepositoryPort:
    """Create a fake repository holding the promotion items."""
    repo = FakeItemRepositoryPort()
    repo.insert_many([promotion_rule_item_1, promotion_rule_item_2])
    return repo


@pytest.fixture
def bundle_promotion(promotion_rule_item_1: Item, promotion_rule_item_2: Item) -> BundlePromotion:
    """Free p02 for every two p01."""
    return BundlePromotion(
        [
            PromotionRuleItem.from_item(
                promotion_rule_item_1,
                bundle_items=[
                    Item(sku=promotion_rule_item_2.sku, name=promotion_rule_item_2.name, price=0)
                ],
                minimum_quantity=2,
            )
        ]
    )


@pytest.fixture
def service(repository: FakeItemRepositoryPort, bundle_promotion: BundlePromotion) -> CheckoutService:
    """Create a checkout session with the bundle promotion registered."""
    checkout = CheckoutService(item_repository=repository, promotions=[bundle_promotion])
    checkout.clear()
    return checkout


# ============================================================================
# clear
# ============================================================================


class TestClear:
    """Test the clear operation."""

    def test_clear_returns_true(self, service: CheckoutService) -> None:
        assert service.clear() == Output(data=True)

    def test_clear_twice_never_raises(self, service: CheckoutService) -> None:
        service.scan("p01")

        assert service.clear() == Output(data=True)
        assert service.clear() == Output(data=True)
        assert service.cart.is_empty()

    def test_clear_empties_cart(self, service: CheckoutService) -> None:
        service.scan("p01")
        service.scan("p02")
        assert len(service.cart) == 2

        service.clear()

        assert len(service.cart) == 0
        assert service.summary() == Output(error=EmptyCartError())

    def test_clear_internal_fault_is_reported(
        self, service: CheckoutService, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unexpected exception becomes data=False with InternalFaultError."""

        def broken_clear() -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(service.cart, "clear", broken_clear)

        with caplog.at_level(logging.ERROR):
            output = service.clear()

        assert output.data is False
        assert isinstance(output.error, InternalFaultError)
        assert isinstance(output.error.cause, RuntimeError)
        assert "Failed clearing items" in caplog.text


# ============================================================================
# scan
# ============================================================================


class TestScan:
    """Test the scan operation."""

    @pytest.mark.parametrize("sku", ["", None, "   "])
    def test_scan_invalid_input(self, service: CheckoutService, sku: str | None) -> None:
        assert service.scan(sku) == Output(data=False, error=InvalidInputError())

    def test_scan_invalid_input_skips_repository(
        self, service: CheckoutService, repository: FakeItemRepositoryPort
    ) -> None:
        service.scan("")
        assert repository.select_one_calls == []

    def test_scan_non_string_is_invalid(self, service: CheckoutService) -> None:
        assert service.scan(42) == Output(data=False, error=InvalidInputError())  # type: ignore[arg-type]

    def test_scan_unknown_item(self, service: CheckoutService, repository: FakeItemRepositoryPort) -> None:
        assert repository.insert_many([Item(sku="s01", name="valid-name", price=1)]) == Output(data=True)

        assert service.scan("s02") == Output(data=False, error=ItemNotFoundError())
        assert service.cart.is_empty()

    def test_scan_valid_items(self, service: CheckoutService, repository: FakeItemRepositoryPort) -> None:
        item_1 = Item(sku="s03", name="valid-name", price=1)
        item_2 = Item(sku="s04", name="valid-name", price=1)
        repository.insert_many([item_1, item_2])

        assert service.scan(item_1.sku) == Output(data=True)
        assert service.scan(item_2.sku) == Output(data=True)
        assert service.scan(item_1.sku) == Output(data=True)

        assert [item.sku for item in service.cart] == ["s03", "s04", "s03"]
        assert repository.select_one_calls == ["s03", "s04", "s03"]

    def test_scan_propagates_repository_error(
        self, service: CheckoutService, repository: FakeItemRepositoryPort
    ) -> None:
        """An error reported by the repository is passed through unchanged."""
        repository.select_error = InternalFaultError("Catalog offline")

        output = service.scan("p01")

        assert output == Output(data=False, error=InternalFaultError("Catalog offline"))
        assert service.cart.is_empty()

    def test_scan_repository_exception_is_reported(
        self,
        service: CheckoutService,
        repository: FakeItemRepositoryPort,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        repository.should_raise = True

        with caplog.at_level(logging.ERROR):
            output = service.scan("p01")

        assert output.data is False
        assert isinstance(output.error, InternalFaultError)
        assert "Failed scanning item" in caplog.text


# ============================================================================
# summary
# ============================================================================


class TestSummary:
    """Test the summary operation."""

    def test_summary_empty_cart(self, service: CheckoutService) -> None:
        assert service.summary() == Output(error=EmptyCartError())

    def test_summary_empty_cart_skips_promotions(self, repository: FakeItemRepositoryPort) -> None:
        """Promotions cannot populate an empty cart."""
        promotion = FakePromotionPort([Item(sku="free", name="free", price=0)])
        service = CheckoutService(item_repository=repository, promotions=[promotion])

        assert service.summary() == Output(error=EmptyCartError())
        assert promotion.apply_call_count == 0

    def test_summary_valid_output(self, service: CheckoutService, repository: FakeItemRepositoryPort) -> None:
        item_1 = Item(sku="t01", name="valid-name", price=1.99)
        item_2 = Item(sku="t02", name="valid-name", price=2)
        assert repository.insert_many([item_1, item_2]) == Output(data=True)

        assert service.scan(item_1.sku) == Output(data=True)
        assert service.scan(item_2.sku) == Output(data=True)
        assert service.scan(item_1.sku) == Output(data=True)
        assert service.scan("t03") == Output(data=False, error=ItemNotFoundError())

        assert service.summary() == Output(
            data="SKUs Scanned: t01, t02, t01\nTotal expected: $5.98"
        )

    def test_summary_with_promotional_items(
        self, service: CheckoutService, repository: FakeItemRepositoryPort
    ) -> None:
        """Three p01 earn one free p02 (one group of two)."""
        repository.insert_many([Item(sku="t04", name="valid-name", price=0.99)])

        assert service.scan("t04") == Output(data=True)
        assert service.scan("t04") == Output(data=True)
        assert service.scan("t03") == Output(data=False, error=ItemNotFoundError())
        assert service.scan("p01") == Output(data=True)
        assert service.scan("p01") == Output(data=True)
        assert service.scan("p01") == Output(data=True)
        assert service.scan("p02") == Output(data=True)

        # 0.99 + 0.99 + 1 + 1 + 1 + 0.5 + 0 (free p02)
        assert service.summary() == Output(
            data="SKUs Scanned: t04, t04, p01, p01, p01, p02, p02\nTotal expected: $5.48"
        )

    def test_summary_bundle_only(self, service: CheckoutService) -> None:
        for sku in ("p01", "p01", "p01", "p02"):
            service.scan(sku)

        assert service.summary() == Output(
            data="SKUs Scanned: p01, p01, p01, p02, p02\nTotal expected: $3.5"
        )

    def test_summary_is_repeatable(self, service: CheckoutService) -> None:
        """Promotion results are not written back to the cart."""
        for sku in ("p01", "p01", "p01", "p01"):
            service.scan(sku)

        first = service.summary()
        second = service.summary()

        assert first == second
        assert first.data == "SKUs Scanned: p01, p01, p01, p01, p02, p02\nTotal expected: $4"
        assert len(service.cart) == 4

    def test_summary_subtracts_discounts(self, repository: FakeItemRepositoryPort) -> None:
        repository.insert_many([Item(sku="d01", name="discounted", price=10, discount=Decimal("2.50"))])
        service = CheckoutService(item_repository=repository)

        service.scan("d01")
        service.scan("d01")

        assert service.summary() == Output(
            data="SKUs Scanned: d01, d01\nTotal expected: $15"
        )

    def test_summary_promotions_run_in_order(self, repository: FakeItemRepositoryPort) -> None:
        """A later promotion sees items added by an earlier one."""
        first = FakePromotionPort([Item(sku="x01", name="extra", price=1)])
        second = FakePromotionPort([Item(sku="x02", name="extra", price=2)])
        service = CheckoutService(item_repository=repository, promotions=[first, second])
        service.scan("p01")

        output = service.summary()

        assert output.data == "SKUs Scanned: p01, x01, x02\nTotal expected: $4"
        assert [item.sku for item in first.get_last_cart() or ()] == ["p01"]
        assert [item.sku for item in second.get_last_cart() or ()] == ["p01", "x01"]

    def test_summary_promotion_failure_is_reported(
        self, repository: FakeItemRepositoryPort, caplog: pytest.LogCaptureFixture
    ) -> None:
        promotion = FakePromotionPort()
        promotion.should_fail = True
        service = CheckoutService(item_repository=repository, promotions=[promotion])
        service.scan("p01")

        with caplog.at_level(logging.ERROR):
            output = service.summary()

        assert output.data is None
        assert isinstance(output.error, InternalFaultError)
        assert "Failed calculating total" in caplog.text
        assert len(service.cart) == 1


# ============================================================================
# total
# ============================================================================


class TestTotal:
    """Test the total operation."""

    def test_total_empty_cart_does_not_raise(
        self, service: CheckoutService, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert service.total() is None

        assert capsys.readouterr().out == ""
        assert "Failed totaling checkout" in caplog.text
        assert "EmptyCartError" in caplog.text

    def test_total_prints_summary(
        self,
        service: CheckoutService,
        repository: FakeItemRepositoryPort,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert repository.insert_many([Item(sku="t05", name="valid-name", price=0.99)]) == Output(data=True)
        assert service.scan("t05") == Output(data=True)

        service.total()

        assert capsys.readouterr().out == "SKUs Scanned: t05\nTotal expected: $0.99\n"
