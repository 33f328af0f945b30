"""CLI command implementations for a checkout session.

This adapter maps CLI commands (scan, summary, total, clear) to CheckoutPort
operations. It handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from checkout.core.models import Output
from checkout.core.ports import CheckoutPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to CheckoutPort."""

    def __init__(self, checkout: CheckoutPort):
        """Initialize the CLI command handler.

        Args:
            checkout: CheckoutPort implementation to execute commands.
        """
        self.checkout = checkout

    def scan(self, sku: str | None) -> dict[str, Any]:
        """Scan an item via CLI.

        Args:
            sku: SKU of the item to scan.

        Returns:
            Dictionary with status and message.
        """
        output = self.checkout.scan(sku)
        if output.data:
            return {
                "status": "success",
                "operation": "scan",
                "sku": sku,
                "message": f"Scanned {sku}",
            }
        return self._error_result("scan", output, sku=sku)

    def summary(self) -> dict[str, Any]:
        """Summarize the cart via CLI.

        Returns:
            Dictionary with status and the summary lines.
        """
        output = self.checkout.summary()
        if output.error is None and output.data:
            return {
                "status": "success",
                "operation": "summary",
                "lines": output.data.split("\n"),
            }
        return self._error_result("summary", output)

    def total(self) -> dict[str, Any]:
        """Print the cart total via CLI.

        The session writes the summary to stdout itself.
        """
        self.checkout.total()
        return {"status": "success", "operation": "total"}

    def clear(self) -> dict[str, Any]:
        """Clear the cart via CLI."""
        output = self.checkout.clear()
        if output.data:
            return {
                "status": "success",
                "operation": "clear",
                "message": "Cart cleared",
            }
        return self._error_result("clear", output)

    @staticmethod
    def _error_result(operation: str, output: Output[Any], **fields: Any) -> dict[str, Any]:
        error = output.error
        logger.error(f"Failed to {operation}: {error!r}")
        result: dict[str, Any] = {
            "status": "error",
            "operation": operation,
            "error": type(error).__name__ if error is not None else None,
            "message": error.message if error is not None else f"{operation} produced no result",
        }
        result.update(fields)
        return result
