"""Domain models for invoicetap.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Variant(Enum):
    """Implementations of update_invoice_company.

    Listed in the order they are introduced in the walkthrough:
    - PLAIN: Direct chain, no logging
    - LOCAL_VARIABLE: Invoice bound to a local name, logged, then updated
    - DANGLING_VARIABLE: Log line removed, local name now holds the status flag
    - PIPE_WRONG_RETURN: Piped block returns the log call's result (fails)
    - PIPE: Piped block returns the invoice it received
    - TAP: Tap always hands the invoice on, whatever the block returns
    - TAP_FUNCTION: Tap given a named logging function
    """

    PLAIN = "plain"
    LOCAL_VARIABLE = "local_variable"
    DANGLING_VARIABLE = "dangling_variable"
    PIPE_WRONG_RETURN = "pipe_wrong_return"
    PIPE = "pipe"
    TAP = "tap"
    TAP_FUNCTION = "tap_function"

    @property
    def logs_invoice(self) -> bool:
        """Whether this variant emits the "Updating <number>" line."""
        return self not in (Variant.PLAIN, Variant.DANGLING_VARIABLE)


@dataclass(frozen=True)
class VariantOutcome:
    """Result of running one variant during a walkthrough."""

    variant: Variant
    succeeded: bool
    result: Any = None
    error_type: str | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        """Validate outcome invariants on creation."""
        if self.succeeded and self.error_type is not None:
            raise ValueError("a successful outcome cannot carry an error")
        if not self.succeeded and not self.error_type:
            raise ValueError("a failed outcome must name its error type")

    def to_dict(self) -> dict[str, Any]:
        """Render as a JSON-friendly dictionary."""
        data: dict[str, Any] = {
            "variant": self.variant.value,
            "status": "success" if self.succeeded else "error",
        }
        if self.succeeded:
            data["result"] = self.result
        else:
            data["error_type"] = self.error_type
            data["message"] = self.error_message
        return data
