# File: src/permit_pricing/presentation/console.py
"""
Console interface for Permit Pricing

An explicit read-eval-print cycle: each iteration reads one request,
asks the quote service for a typed outcome and prints either a receipt or
an error. Bad input never ends the loop; only end of input or an interrupt
does.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
from decimal import Decimal
from enum import Enum
import logging

from ..domain.models import Money, PricingConfig, Selection
from ..application.quote_service import QuoteOutcome, QuoteService, QuoteServiceFactory


# ============================================================================
# CONSTANTS AND CONFIGURATION
# ============================================================================

class AppConfig:
    """Application configuration"""
    APP_NAME = "Campus Parking Permit Pricing"
    VERSION = "1.0.0"

    RECEIPT_WIDTH = 40
    LABEL_WIDTH = 20

    PROMPTS = {
        "permit_type": "Enter permit type (RESIDENT/COMMUTER): ",
        "vehicle_type": "Enter vehicle type (CAR/SUV/MOTORCYCLE): ",
        "carpool": "Carpool? (Y/N): ",
        "months": "Number of months (1-12): ",
    }

    RETRY_MESSAGE = "Please try again."


# ============================================================================
# RECEIPT FORMATTER
# ============================================================================

class ReceiptFormatter:
    """Renders quote figures as a fixed-layout text block. No computation."""

    def __init__(self, width: int = AppConfig.RECEIPT_WIDTH, label_width: int = AppConfig.LABEL_WIDTH):
        self.width = width
        self.label_width = label_width

    def format(
        self,
        selection: Selection,
        subtotal: Money,
        campus_fee: Money,
        total: Money,
        campus_fee_rate: Decimal = PricingConfig.CAMPUS_FEE_RATE
    ) -> str:
        fee_label = f"Campus Fee ({_format_percent(campus_fee_rate)}%):"
        lines = [
            "=" * self.width,
            "PARKING PERMIT RECEIPT".center(self.width).rstrip(),
            "=" * self.width,
            self._line("Permit Type:", selection.permit_type.name),
            self._line("Vehicle Type:", selection.vehicle_type.name),
            self._line("Carpool:", "Yes" if selection.carpool else "No"),
            self._line("Months:", str(selection.months)),
            "-" * self.width,
            self._line("Subtotal:", subtotal.format()),
            self._line(fee_label, campus_fee.format()),
            self._line("Total:", total.format()),
            "=" * self.width,
        ]
        return "\n".join(lines)

    def format_outcome(self, outcome: QuoteOutcome, campus_fee_rate: Decimal = PricingConfig.CAMPUS_FEE_RATE) -> str:
        """Receipt for a successful outcome"""
        if not outcome.success:
            raise ValueError("Cannot format a receipt for a rejected quote")
        breakdown = outcome.breakdown
        return self.format(
            outcome.selection,
            breakdown.subtotal,
            breakdown.campus_fee,
            breakdown.total,
            campus_fee_rate
        )

    def _line(self, label: str, value: str) -> str:
        return f"{label:<{self.label_width}}{value}"


def _format_percent(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}"


# ============================================================================
# INTERACTIVE LOOP
# ============================================================================

class IterationStatus(Enum):
    """How one loop iteration ended"""
    QUOTED = "quoted"
    REJECTED = "rejected"
    EXIT = "exit"


@dataclass(frozen=True)
class IterationResult:
    status: IterationStatus
    outcome: Optional[QuoteOutcome] = None


class ConsoleQuoteApp:
    """
    Interactive quote loop

    Args:
        service: Quote service; the default service when omitted
        input_func: Prompt reader, `input` by default
        output: Line writer, `print` by default
    """

    def __init__(
        self,
        service: Optional[QuoteService] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        formatter: Optional[ReceiptFormatter] = None
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.service = service or QuoteServiceFactory.create_default_service()
        self.input_func = input_func
        self.output = output
        self.formatter = formatter or ReceiptFormatter()

    def read_request(self) -> Dict[str, str]:
        """
        Prompt for every field

        An undecodable answer does not cut the request short: the remaining
        fields are still read, then the first decode error is raised.

        Raises: EOFError at end of input, UnicodeDecodeError for unreadable bytes
        """
        raw = {}
        decode_error = None
        for field, prompt in AppConfig.PROMPTS.items():
            try:
                raw[field] = self.input_func(prompt)
            except UnicodeDecodeError as e:
                decode_error = decode_error or e
        if decode_error is not None:
            raise decode_error
        return raw

    def run_once(self) -> IterationResult:
        """Read, validate, price and print one request"""
        try:
            raw = self.read_request()
        except (EOFError, KeyboardInterrupt):
            self.logger.info("Input closed, stopping")
            return IterationResult(IterationStatus.EXIT)
        except UnicodeDecodeError as e:
            message = f"Input could not be decoded: {e.reason}"
            self.logger.warning(f"Rejected quote request: {message}")
            return self._reject(QuoteOutcome.rejected(message))

        outcome = self.service.quote(raw)
        if not outcome.success:
            return self._reject(outcome)

        fee_rate = self.service.config["campus_fee_rate"]
        self.output(self.formatter.format_outcome(outcome, fee_rate))
        return IterationResult(IterationStatus.QUOTED, outcome)

    def _reject(self, outcome: QuoteOutcome) -> IterationResult:
        self.output(f"ERROR: {outcome.error}")
        self.output(AppConfig.RETRY_MESSAGE)
        return IterationResult(IterationStatus.REJECTED, outcome)

    def run(self, max_iterations: Optional[int] = None) -> int:
        """
        Loop until end of input, or for at most `max_iterations` iterations

        Returns: Process exit code
        """
        self.output(f"{AppConfig.APP_NAME} v{AppConfig.VERSION}")
        iterations = 0
        while max_iterations is None or iterations < max_iterations:
            result = self.run_once()
            iterations += 1
            if result.status is IterationStatus.EXIT:
                break
        return 0
