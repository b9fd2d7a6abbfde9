"""Core domain logic for invoicetap.

This package contains zero external dependencies. Account lookup and
invoice storage are reached only through the ports in ports.py.
"""

from .combinators import pipe, tap
from .invoice_service import InvoiceCompanyService, log_invoice_update
from .models import Variant, VariantOutcome
from .walkthrough import run_walkthrough

__all__ = [
    "InvoiceCompanyService",
    "Variant",
    "VariantOutcome",
    "log_invoice_update",
    "pipe",
    "run_walkthrough",
    "tap",
]
