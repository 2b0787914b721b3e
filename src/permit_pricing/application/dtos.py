# File: src/permit_pricing/application/dtos.py
"""
Data Transfer Objects (DTOs) for Permit Pricing

This module defines DTOs for data transfer between layers:
1. Input DTOs - raw user entries parsed into domain types
2. Output DTOs - computed quote figures for display or serialization

DTO Principles:
- Immutable (frozen models)
- Validation at creation
- No business logic, only data and conversion to/from domain objects
"""

from typing import Any, Dict
from decimal import Decimal
import json
import re

from pydantic import BaseModel, ConfigDict, field_validator

from ..domain.models import (
    InvalidSelection, Money, PermitType, PricingConfig, Selection, VehicleType
)
from ..domain.calculator import PriceBreakdown

_WHOLE_NUMBER_RE = re.compile(r'^[+-]?\d+$')


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        from_attributes=True
    )

    def to_dict(self, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        return self.model_dump(**kwargs)

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        """Create DTO from dictionary"""
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> 'BaseDTO':
        """Create DTO from JSON string"""
        data = json.loads(json_str)
        return cls(**data)


# ============================================================================
# INPUT DTOs
# ============================================================================

class QuoteRequestDTO(BaseDTO):
    """
    A quote request as typed by the user

    Text entries are parsed here; range rules stay with the Selection.
    """
    permit_type: PermitType
    vehicle_type: VehicleType
    carpool: bool = False
    months: int

    @field_validator('permit_type', mode='before')
    @classmethod
    def parse_permit_type(cls, value: Any) -> Any:
        if isinstance(value, PermitType):
            return value
        if value is None:
            raise InvalidSelection("Permit type is required")
        return PermitType.from_text(value)

    @field_validator('vehicle_type', mode='before')
    @classmethod
    def parse_vehicle_type(cls, value: Any) -> Any:
        if isinstance(value, VehicleType):
            return value
        if value is None:
            raise InvalidSelection("Vehicle type is required")
        return VehicleType.from_text(value)

    @field_validator('carpool', mode='before')
    @classmethod
    def parse_carpool(cls, value: Any) -> bool:
        # Only an explicit Y answer means carpool
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().upper() == "Y"
        return False

    @field_validator('months', mode='before')
    @classmethod
    def parse_months(cls, value: Any) -> int:
        if isinstance(value, bool):
            raise InvalidSelection(f"Months must be a whole number, got: {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _WHOLE_NUMBER_RE.match(value.strip()):
            return int(value.strip())
        raise InvalidSelection(f"Months must be a whole number, got: {value!r}")

    def to_selection(self) -> Selection:
        """Build the validated domain selection; raises InvalidSelection"""
        return Selection.create(self.permit_type, self.vehicle_type, self.carpool, self.months)


# ============================================================================
# OUTPUT DTOs
# ============================================================================

class QuoteDTO(BaseDTO):
    """Priced quote. Amounts keep full precision; use rounded() for display values."""
    permit_type: str
    vehicle_type: str
    carpool: bool
    months: int
    base_monthly: Decimal
    adjusted_monthly: Decimal
    subtotal: Decimal
    campus_fee: Decimal
    total: Decimal
    currency: str = PricingConfig.CURRENCY

    @classmethod
    def from_breakdown(cls, selection: Selection, breakdown: PriceBreakdown) -> 'QuoteDTO':
        return cls(
            permit_type=selection.permit_type.name,
            vehicle_type=selection.vehicle_type.name,
            carpool=selection.carpool,
            months=selection.months,
            base_monthly=breakdown.base_monthly.amount,
            adjusted_monthly=breakdown.adjusted_monthly.amount,
            subtotal=breakdown.subtotal.amount,
            campus_fee=breakdown.campus_fee.amount,
            total=breakdown.total.amount,
            currency=breakdown.total.currency
        )

    def rounded(self) -> Dict[str, Decimal]:
        """Money figures rounded half-up to cents"""
        return {
            name: Money(getattr(self, name), self.currency).rounded()
            for name in ("base_monthly", "adjusted_monthly", "subtotal", "campus_fee", "total")
        }
