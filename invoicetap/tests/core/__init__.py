"""Unit tests for core domain logic.

These tests exercise core logic without external dependencies.
All external ports are replaced with fakes from tests/fakes/ or mocks.
"""
