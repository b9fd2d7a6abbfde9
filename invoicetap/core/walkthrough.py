"""Run every update variant in turn and record how each one ends.

The walkthrough is the demonstration entry point: the PIPE_WRONG_RETURN
variant is expected to fail, so its AttributeError is recorded as an
outcome instead of ending the run.
"""

import logging
from collections.abc import Iterable

from .invoice_service import InvoiceCompanyService
from .models import Variant, VariantOutcome

logger = logging.getLogger(__name__)


def run_walkthrough(
    service: InvoiceCompanyService,
    email: str,
    new_company: str,
    variants: Iterable[Variant] = tuple(Variant),
) -> list[VariantOutcome]:
    """Run each variant against the same account and invoice.

    Args:
        service: Service whose variants are exercised.
        email: Email address of the account holder.
        new_company: Company name to set on the invoice.
        variants: Variants to run, in order. Defaults to all of them.

    Returns:
        One VariantOutcome per variant, in the order they ran.

    Raises:
        Any exception other than AttributeError raised by a variant
        (e.g. ValueError for an unknown account).
    """
    outcomes: list[VariantOutcome] = []

    for variant in variants:
        logger.debug(f"Running variant {variant.value}")
        try:
            result = service.update_invoice_company(email, new_company, variant)
        except AttributeError as e:
            logger.error(f"Variant {variant.value} failed: {e}", exc_info=True)
            outcomes.append(
                VariantOutcome(
                    variant=variant,
                    succeeded=False,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
            )
            continue

        outcomes.append(VariantOutcome(variant=variant, succeeded=True, result=result))

    failed = sum(1 for outcome in outcomes if not outcome.succeeded)
    logger.info(f"Walkthrough complete: {len(outcomes) - failed} succeeded, {failed} failed")
    return outcomes
