"""Invoicetap: side-effect injection into an invoice update chain.

Demonstrates several ways of logging an invoice number in the middle of
``find_by_email(...).finalized_invoices.most_recent.update(...)``.
"""
