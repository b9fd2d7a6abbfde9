"""Fake implementations of core ports for testing.

These in-memory implementations allow the core update chain to be
tested without the in-memory adapter or mocks:

- FakeAccountDirectoryPort: Records lookups, can be told to fail
- FakeAccount / FakeInvoiceCollection: Fixed invoice lists
- FakeInvoice: Records update calls, returns a configurable status flag
"""

from .directory import (
    FakeAccount,
    FakeAccountDirectoryPort,
    FakeInvoice,
    FakeInvoiceCollection,
)

__all__ = [
    "FakeAccount",
    "FakeAccountDirectoryPort",
    "FakeInvoice",
    "FakeInvoiceCollection",
]
