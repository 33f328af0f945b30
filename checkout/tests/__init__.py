"""Test suite for the checkout system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - In-memory repository, demo catalog, CLI command handler

3. fakes/: Port implementations for testing
   - In-memory implementations of ItemRepositoryPort and PromotionPort
   - Used by core unit tests
"""
