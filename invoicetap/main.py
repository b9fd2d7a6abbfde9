"""Composition root for invoicetap.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Command-line argument parsing (overrides configuration)
- Adapter instantiation
- Core service initialization
- Run a single variant, or the walkthrough of all variants
"""

import argparse
import json
import logging
import sys

from invoicetap.adapters.directory.memory import build_demo_directory
from invoicetap.config import Settings, load_settings
from invoicetap.core.invoice_service import InvoiceCompanyService
from invoicetap.core.models import Variant, VariantOutcome
from invoicetap.core.walkthrough import run_walkthrough

WALKTHROUGH = "all"


class JsonLogFormatter(logging.Formatter):
    """Render each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Log records go to stderr so that stdout carries only the JSON report.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    if log_format == "json":
        handler.setFormatter(JsonLogFormatter())

    # basicConfig only applies the text format to handlers without a formatter
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler],
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser, using settings for defaults."""
    parser = argparse.ArgumentParser(
        prog="invoicetap",
        description="Update the company name on an account's most recent finalized invoice.",
    )
    parser.add_argument(
        "variant",
        nargs="?",
        default=settings.variant,
        choices=[variant.value for variant in Variant] + [WALKTHROUGH],
        help=f"Implementation to run, or '{WALKTHROUGH}' for every one in turn "
        f"(default: {settings.variant})",
    )
    parser.add_argument("--email", default=settings.email, help="Account email address")
    parser.add_argument(
        "--company", default=settings.company_name, help="New company name for the invoice"
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """Load configuration, wire adapters, and run the selected variant.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Parse command-line arguments
    4. Instantiate the demo account directory
    5. Run one variant or the walkthrough, print the JSON report

    Args:
        argv: Command-line arguments, without the program name.

    Returns:
        Process exit code.

    Raises:
        AttributeError: If the single variant run is pipe_wrong_return.
        ValueError: If the email has no account in the directory.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    args = build_parser(settings).parse_args(argv)

    accounts = build_demo_directory(email=settings.email, invoice_number=settings.invoice_number)
    service = InvoiceCompanyService(accounts)

    if args.variant == WALKTHROUGH:
        logger.info(f"Running all variants for {args.email}")
        outcomes = run_walkthrough(service, args.email, args.company)
        report = [outcome.to_dict() for outcome in outcomes]
    else:
        variant = Variant(args.variant)
        logger.info(f"Running variant {variant.value} for {args.email}")
        result = service.update_invoice_company(args.email, args.company, variant)
        report = VariantOutcome(variant=variant, succeeded=True, result=result).to_dict()

    print(json.dumps(report, indent=2, default=str))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Application entry point.

    Exit codes:
        0: Success (including a walkthrough with failing variants)
        1: Fatal error, e.g. running pipe_wrong_return on its own
        2: Invalid command-line arguments
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        exit_code = run(argv)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
