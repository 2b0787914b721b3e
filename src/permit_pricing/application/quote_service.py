# File: src/permit_pricing/application/quote_service.py
"""
Permit Quote Application Service

This module implements the application service layer for permit pricing.
It turns raw user entries into a validated selection, prices it, and reports
the result as a typed outcome rather than an exception.

Responsibilities:
1. Parse raw entries into domain types (via QuoteRequestDTO)
2. Build a calculator per selection and run the computation
3. Log accepted and rejected requests
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union
from decimal import Decimal, InvalidOperation
import logging

from pydantic import ValidationError

from ..domain.models import InvalidSelection, PricingConfig, Selection
from ..domain.calculator import PriceBreakdown
from ..infrastructure.factories import PricingCalculatorFactory
from .dtos import QuoteDTO, QuoteRequestDTO

_VALUE_ERROR_PREFIX = "Value error, "


# ============================================================================
# EXCEPTIONS
# ============================================================================

class QuoteServiceError(Exception):
    """Base exception for quote service errors"""
    pass


class ConfigurationError(QuoteServiceError):
    """Exception for invalid service configuration"""
    pass


# ============================================================================
# RESULT TYPES
# ============================================================================

@dataclass(frozen=True)
class QuoteOutcome:
    """Result of one quote request: either a priced quote or an error message"""
    success: bool
    selection: Optional[Selection] = None
    breakdown: Optional[PriceBreakdown] = None
    quote: Optional[QuoteDTO] = None
    error: Optional[str] = None

    @classmethod
    def priced(cls, selection: Selection, breakdown: PriceBreakdown) -> 'QuoteOutcome':
        return cls(
            success=True,
            selection=selection,
            breakdown=breakdown,
            quote=QuoteDTO.from_breakdown(selection, breakdown)
        )

    @classmethod
    def rejected(cls, error: str) -> 'QuoteOutcome':
        return cls(success=False, error=error)


# ============================================================================
# QUOTE SERVICE
# ============================================================================

class QuoteService:
    """
    Main application service for permit quotes

    Stateless between requests: every call builds its own selection and
    calculator.
    """

    def __init__(self, calculator_factory: Optional[PricingCalculatorFactory] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.calculator_factory = calculator_factory or PricingCalculatorFactory()

        self.config = {
            "campus_fee_rate": self.calculator_factory.campus_fee_rate,
            "currency": PricingConfig.CURRENCY
        }

    def parse_request(self, raw: Union[QuoteRequestDTO, Mapping[str, Any]]) -> Selection:
        """
        Turn raw entries into a validated selection

        Raises: InvalidSelection for any parse or validation failure
        """
        if isinstance(raw, QuoteRequestDTO):
            request = raw
        else:
            try:
                request = QuoteRequestDTO(**raw)
            except ValidationError as e:
                raise InvalidSelection(_describe_validation_error(e)) from e
        return request.to_selection()

    def price(self, selection: Selection) -> PriceBreakdown:
        """Price an already validated selection"""
        calculator = self.calculator_factory.create_for_selection(selection)
        return calculator.compute_breakdown(selection)

    def quote(self, raw: Union[QuoteRequestDTO, Mapping[str, Any]]) -> QuoteOutcome:
        """Parse, validate and price one request"""
        try:
            selection = self.parse_request(raw)
        except InvalidSelection as e:
            self.logger.warning(f"Rejected quote request: {e.message}")
            return QuoteOutcome.rejected(e.message)

        breakdown = self.price(selection)
        self.logger.info(
            f"Quoted {selection.permit_type.name}/{selection.vehicle_type.name} "
            f"carpool={selection.carpool} months={selection.months}: "
            f"total {breakdown.total.amount}"
        )
        return QuoteOutcome.priced(selection, breakdown)


def _describe_validation_error(error: ValidationError) -> str:
    """Human-readable message for the first failing field"""
    messages: List[str] = []
    for detail in error.errors():
        cause = detail.get("ctx", {}).get("error")
        if isinstance(cause, InvalidSelection):
            messages.append(cause.message)
            continue
        field = ".".join(str(part) for part in detail.get("loc", ())) or "request"
        message = str(detail.get("msg", ""))
        if detail.get("type") == "missing":
            messages.append(f"{field.replace('_', ' ').capitalize()} is required")
        elif message.startswith(_VALUE_ERROR_PREFIX):
            messages.append(message[len(_VALUE_ERROR_PREFIX):])
        else:
            messages.append(f"{field}: {message}")
    return messages[0] if messages else str(error)


# ============================================================================
# SERVICE FACTORY
# ============================================================================

class QuoteServiceFactory:
    """Factory for creating quote service instances"""

    @staticmethod
    def create_default_service() -> QuoteService:
        """Create a default quote service instance"""
        return QuoteService()

    @staticmethod
    def create_service_with_config(config: Dict[str, Any]) -> QuoteService:
        """
        Create a quote service with custom configuration

        Supported keys: campus_fee_rate (Decimal or numeric string in [0, 1))
        """
        unknown = set(config) - {"campus_fee_rate"}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        fee_rate = config.get("campus_fee_rate", PricingConfig.CAMPUS_FEE_RATE)
        if isinstance(fee_rate, float):
            raise ConfigurationError("campus_fee_rate must be a Decimal or string, not float")
        try:
            fee_rate = Decimal(fee_rate)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid campus_fee_rate: {fee_rate!r}") from e
        if not fee_rate.is_finite() or not Decimal('0') <= fee_rate < Decimal('1'):
            raise ConfigurationError(f"campus_fee_rate must be in [0, 1), got: {fee_rate}")

        return QuoteService(PricingCalculatorFactory(campus_fee_rate=fee_rate))
