"""In-memory account directory.

Holds accounts and invoices in plain dataclasses. Used by the command
line entry point to stand in for a real account database, and by tests
that want real objects rather than mocks.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from invoicetap.core.ports import (
    AccountDirectoryPort,
    AccountPort,
    InvoiceCollectionPort,
    InvoicePort,
)

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass
class Invoice(InvoicePort):
    """An invoice record."""

    number: str
    company_name: str
    created_at: datetime
    finalized: bool = True

    def __post_init__(self) -> None:
        """Validate invoice invariants on creation."""
        if not self.number or not self.number.strip():
            raise ValueError("number must be a non-empty string")

    def update(self, *, company_name: str) -> bool:
        """Set the company name and report success."""
        logger.debug(
            f"Invoice {self.number}: company_name {self.company_name!r} -> {company_name!r}"
        )
        self.company_name = company_name
        return True


class InvoiceCollection(InvoiceCollectionPort):
    """Invoices ordered by creation time, oldest first."""

    def __init__(self, invoices: list[Invoice]):
        self.invoices = sorted(invoices, key=lambda invoice: invoice.created_at)

    def __len__(self) -> int:
        return len(self.invoices)

    def __iter__(self) -> Iterator[Invoice]:
        return iter(self.invoices)

    @property
    def most_recent(self) -> Invoice:
        if not self.invoices:
            raise ValueError("No finalized invoices")
        return self.invoices[-1]


@dataclass
class Account(AccountPort):
    """An account and every invoice issued to it, drafts included."""

    email: str
    invoices: list[Invoice] = field(default_factory=list)

    @property
    def finalized_invoices(self) -> InvoiceCollection:
        return InvoiceCollection(
            [invoice for invoice in self.invoices if invoice.finalized]
        )


class InMemoryAccountDirectory(AccountDirectoryPort):
    """Account lookup backed by a dict keyed on normalized email."""

    def __init__(self, accounts: list[Account] | None = None):
        self._accounts: dict[str, Account] = {}
        for account in accounts or []:
            self.add(account)

    def add(self, account: Account) -> None:
        """Register an account, replacing any with the same email.

        Raises:
            ValueError: If the account email is blank.
        """
        key = _normalize_email(account.email)
        if not key:
            raise ValueError("Account email must be a non-empty string")
        self._accounts[key] = account

    def find_by_email(self, email: str) -> Account:
        logger.debug(f"Looking up account for {email}")
        account = self._accounts.get(_normalize_email(email))
        if account is None:
            raise ValueError(f"No account for email {email}")
        return account


def build_demo_directory(
    email: str = "hello@example.com",
    invoice_number: str = "INV-5309",
) -> InMemoryAccountDirectory:
    """Build a directory holding one account with three invoices.

    The account has an older finalized invoice, the most recent
    finalized invoice numbered invoice_number, and a draft created after
    both. The draft is never selected, since it is not finalized.

    Args:
        email: Email address of the account.
        invoice_number: Number of the most recent finalized invoice.

    Returns:
        Directory containing the single demo account.
    """
    now = datetime.now(timezone.utc)
    account = Account(
        email=email,
        invoices=[
            Invoice(
                number="INV-5101",
                company_name="Initech",
                created_at=now - timedelta(days=60),
            ),
            Invoice(
                number="INV-5377",
                company_name="Initech",
                created_at=now - timedelta(days=1),
                finalized=False,
            ),
            Invoice(
                number=invoice_number,
                company_name="Initech",
                created_at=now - timedelta(days=30),
            ),
        ],
    )
    return InMemoryAccountDirectory([account])
