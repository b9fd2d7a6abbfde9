"""Invoice company updates, with and without a logging side effect.

Every variant performs the same chain:

    accounts.find_by_email(email).finalized_invoices.most_recent.update(...)

and returns the status flag from update(). They differ only in how the
"Updating <number>" log line is slipped in before the update.
"""

import logging

from .combinators import pipe, tap
from .models import Variant
from .ports import AccountDirectoryPort, InvoicePort

logger = logging.getLogger(__name__)


def log_invoice_update(invoice: InvoicePort) -> None:
    """Log that an invoice is about to be updated."""
    logger.info(f"Updating {invoice.number}")


class InvoiceCompanyService:
    """Updates the company name on an account's latest finalized invoice.

    Uses the account directory port but contains no adapter-specific logic.
    """

    def __init__(self, accounts: AccountDirectoryPort):
        self.accounts = accounts

    def update_invoice_company(
        self,
        email: str,
        new_company: str,
        variant: Variant = Variant.TAP_FUNCTION,
    ) -> bool:
        """Run one variant of the update.

        Args:
            email: Email address of the account holder.
            new_company: Company name to set on the invoice.
            variant: Which implementation to use.

        Returns:
            Status flag returned by the invoice update.

        Raises:
            ValueError: If the account or invoice cannot be found.
            AttributeError: For Variant.PIPE_WRONG_RETURN, always.
        """
        implementation = getattr(self, f"update_{variant.value}")
        return implementation(email, new_company)

    def update_plain(self, email: str, new_company: str) -> bool:
        return (
            self.accounts.find_by_email(email)
            .finalized_invoices
            .most_recent
            .update(company_name=new_company)
        )

    def update_local_variable(self, email: str, new_company: str) -> bool:
        invoice = self.accounts.find_by_email(email).finalized_invoices.most_recent
        logger.info(f"Updating {invoice.number}")
        return invoice.update(company_name=new_company)

    def update_dangling_variable(self, email: str, new_company: str) -> bool:
        """The local-variable version with its log line deleted.

        `invoice` is now the update's status flag. Anything added below
        that reads invoice.number fails.
        """
        invoice = self.accounts.find_by_email(email).finalized_invoices.most_recent.update(
            company_name=new_company
        )
        return invoice

    def update_pipe_wrong_return(self, email: str, new_company: str) -> bool:
        """Pipe through a block that returns the log call's result.

        The update is then called on None and raises AttributeError.
        """
        return pipe(
            self.accounts.find_by_email(email).finalized_invoices.most_recent,
            lambda invoice: logger.info(f"Updating {invoice.number}"),
        ).update(company_name=new_company)

    def update_pipe(self, email: str, new_company: str) -> bool:
        def log_and_return(invoice: InvoicePort) -> InvoicePort:
            logger.info(f"Updating {invoice.number}")
            return invoice

        return pipe(
            self.accounts.find_by_email(email).finalized_invoices.most_recent,
            log_and_return,
        ).update(company_name=new_company)

    def update_tap(self, email: str, new_company: str) -> bool:
        return tap(
            self.accounts.find_by_email(email).finalized_invoices.most_recent,
            lambda invoice: logger.info(f"Updating {invoice.number}"),
        ).update(company_name=new_company)

    def update_tap_function(self, email: str, new_company: str) -> bool:
        return tap(
            self.accounts.find_by_email(email).finalized_invoices.most_recent,
            log_invoice_update,
        ).update(company_name=new_company)
