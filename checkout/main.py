"""Composition root for the checkout system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Repository and promotion instantiation
- Checkout session initialization
- Entry point selection (interactive or batch)
"""

import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from checkout.adapters.cli.commands import CLICommandHandler
from checkout.adapters.repository.demo import build_demo_promotions, build_demo_repository
from checkout.adapters.repository.memory import InMemoryItemRepository
from checkout.config import Settings, load_settings
from checkout.core.checkout_service import CheckoutService
from checkout.core.ports import ItemRepositoryPort, PromotionPort


def _run_cli_interactive(cli_handler: CLICommandHandler, prompt: str) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for checkout commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
        prompt: Prompt string shown before each command.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive checkout. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input(prompt).strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting checkout")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split()
            command = parts[0].lower()
            args = parts[1:]

            try:
                result = _execute_cli_command(cli_handler, command, args)
                if command != "total":
                    print(json.dumps(result, indent=2, default=str))
            except ValueError as e:
                logger.error(f"Command error: {e}")
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting checkout")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: Sequence[str],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Positional command arguments.

    Returns:
        Command result dictionary. ``scan`` with several SKUs returns the
        result of the last one.

    Raises:
        ValueError: If command is not recognized or arguments are missing.
    """
    if command == "scan":
        if not args:
            raise ValueError("Missing required argument: sku")
        result: dict[str, Any] = {}
        for sku in args:
            result = cli_handler.scan(sku)
        return result

    elif command == "summary":
        return cli_handler.summary()

    elif command == "total":
        return cli_handler.total()

    elif command == "clear":
        return cli_handler.clear()

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands:

  scan <sku> [<sku> ...]
    Add one or more items to the cart.

    Example: scan atv atv atv vga

  summary
    Show the scanned SKUs and expected total as JSON.

  total
    Print the checkout summary.

  clear
    Empty the cart.

  help
    Show this help message.

  exit
    Exit the checkout.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Logs go to stderr so stdout only carries checkout output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


def build_repository(settings: Settings) -> ItemRepositoryPort:
    """Create the item repository selected by configuration."""
    if settings.catalog_backend == "demo":
        return build_demo_repository()
    return InMemoryItemRepository()


def build_checkout(settings: Settings) -> CheckoutService:
    """Wire repository and promotions into a checkout session."""
    repository = build_repository(settings)

    promotions: list[PromotionPort] = []
    if settings.promotions_enabled and settings.catalog_backend == "demo":
        promotions = build_demo_promotions()

    return CheckoutService(item_repository=repository, promotions=promotions)


def bootstrap(argv: Sequence[str] | None = None, settings: Settings | None = None) -> None:
    """Load configuration, wire adapters, and start the application.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Build the checkout session
    4. Select and start run mode

    Args:
        argv: SKUs to scan. When given, the run is a batch run regardless
            of the configured run mode.
        settings: Preloaded settings; loaded from the environment if None.
    """
    if settings is None:
        settings = load_settings()

    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading checkout...")

    checkout = build_checkout(settings)
    logger.info(
        f"Checkout ready: catalog={settings.catalog_backend}, "
        f"promotions={len(checkout.promotions)}"
    )

    skus = list(argv or [])
    if skus or settings.run_mode == "batch":
        logger.info(f"Batch mode: scanning {len(skus)} item(s)")
        cli_handler = CLICommandHandler(checkout)
        for sku in skus:
            cli_handler.scan(sku)
        checkout.total()
        return

    _run_cli_interactive(CLICommandHandler(checkout), settings.cli_prompt)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap(sys.argv[1:])
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
