# File: src/permit_pricing/domain/models.py
"""
Domain Models for Parking Permit Pricing

This module contains:
1. Configuration: Pricing constants shared by the whole domain
2. Value Objects: Immutable objects with no identity, only values
3. Enums: Permit and vehicle classifications
4. Domain Exceptions and typed validation results

All value objects validate themselves on construction.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Union
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum


# ============================================================================
# PRICING CONFIGURATION
# ============================================================================

class PricingConfig:
    """Pricing constants"""
    CURRENCY = "USD"
    CURRENCY_SYMBOL = "$"

    RESIDENT_BASE_RATE = Decimal('45.00')
    COMMUTER_BASE_RATE = Decimal('35.00')
    COMMUTER_DISCOUNT = Decimal('0.15')   # applied inside the commuter strategy
    CARPOOL_DISCOUNT = Decimal('0.10')
    CAMPUS_FEE_RATE = Decimal('0.05')

    MIN_MONTHS = 1
    MAX_MONTHS = 12

    DISPLAY_QUANTUM = Decimal('0.01')


# ============================================================================
# DOMAIN EXCEPTIONS
# ============================================================================

class InvalidSelection(ValueError):
    """Raised when a permit selection fails validation"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# ============================================================================
# VALUE OBJECTS
# ============================================================================

@dataclass(frozen=True)
class Money:
    """
    Value Object: Monetary amount with currency
    Arithmetic stays in full Decimal precision; rounding happens only
    when the amount is displayed.
    """
    amount: Decimal
    currency: str = PricingConfig.CURRENCY

    def __post_init__(self):
        """Validate money amount"""
        if isinstance(self.amount, float) or isinstance(self.amount, bool):
            raise ValueError(f"Money amount must be Decimal, int or str, got: {self.amount!r}")
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(self.amount))

        if self.amount < Decimal('0'):
            raise ValueError("Money amount cannot be negative")

        if len(self.currency) != 3:
            raise ValueError(f"Currency must be 3-letter code: {self.currency}")

    def __add__(self, other: 'Money') -> 'Money':
        """Add two money amounts (same currency only)"""
        if self.currency != other.currency:
            raise ValueError(f"Cannot add {self.currency} to {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, multiplier: Union[Decimal, int]) -> 'Money':
        """Multiply money by a decimal or whole number"""
        if isinstance(multiplier, float):
            raise ValueError("Multiplier must be Decimal or int, not float")
        if multiplier < 0:
            raise ValueError("Multiplier cannot be negative")
        return Money(self.amount * multiplier, self.currency)

    def rounded(self) -> Decimal:
        """Amount rounded half-up to cents"""
        return self.amount.quantize(PricingConfig.DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)

    def format(self) -> str:
        """Format money for display"""
        return f"{PricingConfig.CURRENCY_SYMBOL}{self.rounded()}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "amount": str(self.amount),
            "rounded": str(self.rounded()),
            "currency": self.currency
        }

    def __str__(self) -> str:
        return self.format()


# ============================================================================
# ENUMS FOR DOMAIN TYPES
# ============================================================================

class PermitType(Enum):
    """
    Enumeration of permit types
    Each type is priced by its own strategy
    """
    RESIDENT = "resident"
    COMMUTER = "commuter"

    @classmethod
    def from_text(cls, text: str) -> 'PermitType':
        """Parse a permit type name, ignoring case and surrounding whitespace"""
        return _parse_enum_name(cls, text, "permit type")

    def __str__(self) -> str:
        return self.name


class VehicleType(Enum):
    """
    Enumeration of vehicle types
    Each type carries a fixed monthly rate multiplier
    """
    CAR = "car"
    SUV = "suv"
    MOTORCYCLE = "motorcycle"

    @classmethod
    def from_text(cls, text: str) -> 'VehicleType':
        """Parse a vehicle type name, ignoring case and surrounding whitespace"""
        return _parse_enum_name(cls, text, "vehicle type")

    def get_rate_multiplier(self) -> Decimal:
        """Get monthly rate multiplier for this vehicle type"""
        multipliers = {
            VehicleType.CAR: Decimal('1.00'),
            VehicleType.SUV: Decimal('1.15'),         # 15% surcharge
            VehicleType.MOTORCYCLE: Decimal('0.70'),  # 30% discount
        }
        return multipliers[self]

    def __str__(self) -> str:
        return self.name


def _parse_enum_name(enum_cls, text: str, label: str):
    if not isinstance(text, str) or not text.strip():
        raise InvalidSelection(f"{label.capitalize()} is required")
    key = text.strip().upper()
    try:
        return enum_cls[key]
    except KeyError:
        valid = ", ".join(member.name for member in enum_cls)
        raise InvalidSelection(
            f"Unknown {label}: {text.strip()!r} (expected one of {valid})"
        ) from None


# ============================================================================
# SELECTION
# ============================================================================

@dataclass(frozen=True)
class Selection:
    """
    Value Object: A validated permit request
    Never exists in an invalid state; construction fails with InvalidSelection
    """
    permit_type: PermitType
    vehicle_type: VehicleType
    carpool: bool
    months: int

    def __post_init__(self):
        """Validate selection after initialization"""
        if self.permit_type is None:
            raise InvalidSelection("Permit type is required")
        if not isinstance(self.permit_type, PermitType):
            raise InvalidSelection(f"Invalid permit type: {self.permit_type!r}")

        if self.vehicle_type is None:
            raise InvalidSelection("Vehicle type is required")
        if not isinstance(self.vehicle_type, VehicleType):
            raise InvalidSelection(f"Invalid vehicle type: {self.vehicle_type!r}")

        if not isinstance(self.carpool, bool):
            raise InvalidSelection(f"Carpool must be True or False, got: {self.carpool!r}")

        # bool is an int subclass, reject it explicitly
        if isinstance(self.months, bool) or not isinstance(self.months, int):
            raise InvalidSelection(f"Months must be a whole number, got: {self.months!r}")
        if not PricingConfig.MIN_MONTHS <= self.months <= PricingConfig.MAX_MONTHS:
            raise InvalidSelection(
                f"Months must be between {PricingConfig.MIN_MONTHS} and "
                f"{PricingConfig.MAX_MONTHS}, got: {self.months}"
            )

    @classmethod
    def create(
        cls,
        permit_type: Optional[PermitType],
        vehicle_type: Optional[VehicleType],
        carpool: bool,
        months: int
    ) -> 'Selection':
        """Validating factory; raises InvalidSelection"""
        return cls(permit_type, vehicle_type, carpool, months)

    @classmethod
    def try_create(
        cls,
        permit_type: Optional[PermitType],
        vehicle_type: Optional[VehicleType],
        carpool: bool,
        months: int
    ) -> 'SelectionResult':
        """Validating factory returning a typed result instead of raising"""
        try:
            return SelectionResult.success(cls(permit_type, vehicle_type, carpool, months))
        except InvalidSelection as e:
            return SelectionResult.failure(e)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "permit_type": self.permit_type.name,
            "vehicle_type": self.vehicle_type.name,
            "carpool": self.carpool,
            "months": self.months
        }


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of validating a selection: exactly one of selection or error is set"""
    selection: Optional[Selection] = None
    error: Optional[InvalidSelection] = None

    def __post_init__(self):
        if (self.selection is None) == (self.error is None):
            raise ValueError("SelectionResult needs exactly one of selection or error")

    @classmethod
    def success(cls, selection: Selection) -> 'SelectionResult':
        return cls(selection=selection)

    @classmethod
    def failure(cls, error: InvalidSelection) -> 'SelectionResult':
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.selection is not None

    def unwrap(self) -> Selection:
        """Return the selection or raise the stored error"""
        if self.error is not None:
            raise self.error
        return self.selection
