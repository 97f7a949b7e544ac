"""Result objects handed from the application layer to the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessOrderResult:
    """Output: acknowledgement that every line item of an order was handled.

    It does not report what changed; only which order was processed.
    """

    order_id: int
