"""Port interfaces for invoicetap.

These abstract base classes define the boundary between the update
chain in the core and whatever supplies accounts and invoices (an
in-memory adapter, or test doubles). Implementations live in the
adapters/ package and under tests/fakes/.

The chain walks the ports in this order:

    AccountDirectoryPort.find_by_email(email)   -> AccountPort
    AccountPort.finalized_invoices              -> InvoiceCollectionPort
    InvoiceCollectionPort.most_recent           -> InvoicePort
    InvoicePort.update(company_name=...)        -> bool
"""

from abc import ABC, abstractmethod


class InvoicePort(ABC):
    """A single invoice.

    Attributes:
        number: Display number, e.g. "INV-5309".
        company_name: Company name printed on the invoice.
    """

    number: str
    company_name: str

    @abstractmethod
    def update(self, *, company_name: str) -> bool:
        """Change the company name on the invoice.

        Args:
            company_name: New company name.

        Returns:
            True if the update was applied. This is a status flag, not
            the invoice: chaining another call onto the result will not
            reach the invoice.
        """


class InvoiceCollectionPort(ABC):
    """Ordered collection of one account's finalized invoices."""

    @property
    @abstractmethod
    def most_recent(self) -> InvoicePort:
        """The most recently created invoice in the collection.

        Raises:
            ValueError: If the collection is empty.
        """


class AccountPort(ABC):
    """An account owning invoices."""

    @property
    @abstractmethod
    def finalized_invoices(self) -> InvoiceCollectionPort:
        """Invoices no longer open to revision, oldest first."""


class AccountDirectoryPort(ABC):
    """Port for locating accounts."""

    @abstractmethod
    def find_by_email(self, email: str) -> AccountPort:
        """Find the account registered under an email address.

        Args:
            email: Email address of the account holder.

        Returns:
            The matching account.

        Raises:
            ValueError: If no account is registered under the email.
        """
