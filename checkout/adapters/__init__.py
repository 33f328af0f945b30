"""External adapters for the checkout system.

This package provides implementations of the core port interfaces and
the command-line surface.

Adapter Organization:

- repository/: Item repository adapters (in-memory, demo catalog)
- cli/: Command handlers for the interactive and batch front ends
"""
