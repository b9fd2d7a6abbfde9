"""Tests for the in-memory account directory."""

from datetime import datetime, timedelta, timezone

import pytest

from invoicetap.adapters.directory.memory import (
    Account,
    InMemoryAccountDirectory,
    Invoice,
    InvoiceCollection,
    build_demo_directory,
)
from invoicetap.core.invoice_service import InvoiceCompanyService
from invoicetap.core.models import Variant

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _invoice(number: str, days_ago: int, finalized: bool = True) -> Invoice:
    return Invoice(
        number=number,
        company_name="Initech",
        created_at=NOW - timedelta(days=days_ago),
        finalized=finalized,
    )


class TestInvoice:
    """Tests for the Invoice record."""

    def test_update_sets_company_and_returns_true(self) -> None:
        invoice = _invoice("INV-1", 1)

        assert invoice.update(company_name="Yoyodyne Int'l") is True
        assert invoice.company_name == "Yoyodyne Int'l"

    def test_update_requires_keyword(self) -> None:
        invoice = _invoice("INV-1", 1)
        with pytest.raises(TypeError):
            invoice.update("Yoyodyne Int'l")  # type: ignore[misc]

    def test_blank_number_rejected(self) -> None:
        with pytest.raises(ValueError, match="number must be a non-empty string"):
            Invoice(number=" ", company_name="Initech", created_at=NOW)


class TestInvoiceCollection:
    """Tests for most-recent selection."""

    def test_most_recent_by_created_at(self) -> None:
        newest = _invoice("INV-3", 1)
        collection = InvoiceCollection([_invoice("INV-1", 30), newest, _invoice("INV-2", 10)])

        assert collection.most_recent is newest

    def test_ordered_oldest_first(self) -> None:
        collection = InvoiceCollection([_invoice("INV-2", 10), _invoice("INV-1", 30)])
        assert [invoice.number for invoice in collection] == ["INV-1", "INV-2"]
        assert len(collection) == 2

    def test_empty_collection(self) -> None:
        with pytest.raises(ValueError, match="No finalized invoices"):
            InvoiceCollection([]).most_recent


class TestAccount:
    """Tests for finalized invoice filtering."""

    def test_drafts_excluded(self) -> None:
        draft = _invoice("INV-DRAFT", 0, finalized=False)
        finalized = _invoice("INV-1", 5)
        account = Account(email="a@example.com", invoices=[finalized, draft])

        assert list(account.finalized_invoices) == [finalized]
        assert account.finalized_invoices.most_recent is finalized

    def test_only_drafts(self) -> None:
        account = Account(email="a@example.com", invoices=[_invoice("D", 0, finalized=False)])
        with pytest.raises(ValueError):
            account.finalized_invoices.most_recent


class TestInMemoryAccountDirectory:
    """Tests for account lookup."""

    def test_find_by_email(self) -> None:
        account = Account(email="hello@example.com")
        directory = InMemoryAccountDirectory([account])

        assert directory.find_by_email("hello@example.com") is account

    def test_lookup_ignores_case_and_whitespace(self) -> None:
        account = Account(email="Hello@Example.com")
        directory = InMemoryAccountDirectory([account])

        assert directory.find_by_email("  hello@example.COM ") is account

    def test_unknown_email(self) -> None:
        directory = InMemoryAccountDirectory()
        with pytest.raises(ValueError, match="No account for email nobody@example.com"):
            directory.find_by_email("nobody@example.com")

    def test_add_replaces_same_email(self) -> None:
        first = Account(email="hello@example.com")
        second = Account(email="HELLO@example.com")
        directory = InMemoryAccountDirectory([first])

        directory.add(second)

        assert directory.find_by_email("hello@example.com") is second

    def test_blank_email_rejected(self) -> None:
        with pytest.raises(ValueError, match="Account email must be a non-empty string"):
            InMemoryAccountDirectory([Account(email="   ")])


class TestDemoDirectory:
    """Tests for the seeded demo scenario."""

    def test_most_recent_finalized_invoice(self) -> None:
        directory = build_demo_directory()

        invoice = directory.find_by_email("hello@example.com").finalized_invoices.most_recent

        assert invoice.number == "INV-5309"

    def test_newer_draft_skipped(self) -> None:
        account = build_demo_directory().find_by_email("hello@example.com")

        newest = max(account.invoices, key=lambda invoice: invoice.created_at)
        assert newest.finalized is False
        assert account.finalized_invoices.most_recent is not newest

    def test_custom_email_and_number(self) -> None:
        directory = build_demo_directory(email="ops@example.org", invoice_number="INV-0001")

        invoice = directory.find_by_email("ops@example.org").finalized_invoices.most_recent

        assert invoice.number == "INV-0001"

    def test_service_updates_demo_invoice(self) -> None:
        directory = build_demo_directory()
        service = InvoiceCompanyService(directory)

        result = service.update_invoice_company(
            "hello@example.com", "Yoyodyne Int'l", Variant.TAP_FUNCTION
        )

        account = directory.find_by_email("hello@example.com")
        assert result is True
        assert account.finalized_invoices.most_recent.company_name == "Yoyodyne Int'l"
        assert [
            invoice.company_name for invoice in account.invoices if invoice.number != "INV-5309"
        ] == ["Initech", "Initech"]
