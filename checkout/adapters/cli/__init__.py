"""Command-line interface adapters.

Provides CLI commands for driving a checkout session:
- scan: Add an item to the cart by SKU
- summary: Show scanned SKUs and expected total
- total: Print the summary to stdout
- clear: Empty the cart
"""

from .commands import CLICommandHandler

__all__ = ["CLICommandHandler"]
