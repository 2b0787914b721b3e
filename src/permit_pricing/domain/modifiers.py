# File: src/permit_pricing/domain/modifiers.py
"""
Rate Modifiers for Parking Permit Pricing

A rate modifier turns a monthly rate into an adjusted monthly rate. Modifiers
are pure multiplicative transformations and know nothing about each other;
the ModifierPipeline chains them left to right.

Modifiers:
1. VehicleRateModifier - surcharge/discount from the vehicle type table
2. CarpoolDiscountModifier - flat carpool discount
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Tuple
from decimal import Decimal
import logging

from .models import Money, PricingConfig, Selection, VehicleType


# ============================================================================
# MODIFIER INTERFACE
# ============================================================================

class RateModifier(ABC):
    """
    Abstract base class for rate modifiers
    Implementations must be stateless and side-effect free
    """

    @abstractmethod
    def apply(self, monthly_rate: Money) -> Money:
        """
        Adjust a monthly rate
        Returns: New monthly rate
        """
        pass

    def get_modifier_name(self) -> str:
        """Get human-readable modifier name"""
        return self.__class__.__name__.replace("Modifier", "")

    def __str__(self) -> str:
        return f"{self.get_modifier_name()} Modifier"


class MultiplierModifier(RateModifier):
    """Multiplies the monthly rate by a fixed factor"""

    def __init__(self, multiplier: Decimal, name: str = "Multiplier"):
        if not isinstance(multiplier, Decimal):
            raise ValueError(f"Multiplier must be a Decimal, got: {multiplier!r}")
        if multiplier < Decimal('0'):
            raise ValueError("Multiplier cannot be negative")
        self._multiplier = multiplier
        self._name = name

    @property
    def multiplier(self) -> Decimal:
        return self._multiplier

    def apply(self, monthly_rate: Money) -> Money:
        return monthly_rate * self._multiplier

    def get_modifier_name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._multiplier}, {self._name!r})"


# ============================================================================
# CONCRETE MODIFIERS
# ============================================================================

class VehicleRateModifier(MultiplierModifier):
    """
    Vehicle surcharge or discount
    - CAR: no change
    - SUV: 15% surcharge
    - MOTORCYCLE: 30% discount
    """

    def __init__(self, vehicle_type: VehicleType):
        super().__init__(vehicle_type.get_rate_multiplier(), f"Vehicle ({vehicle_type.name})")
        self.vehicle_type = vehicle_type


class CarpoolDiscountModifier(MultiplierModifier):
    """10% off the monthly rate for carpool permits"""

    def __init__(self):
        super().__init__(Decimal('1') - PricingConfig.CARPOOL_DISCOUNT, "Carpool Discount")


# ============================================================================
# PIPELINE
# ============================================================================

class ModifierPipeline:
    """
    Ordered composition of rate modifiers

    Each modifier receives the output of the previous one. An empty
    pipeline returns its input unchanged.
    """

    def __init__(self, modifiers: Iterable[RateModifier] = ()):
        self._modifiers: Tuple[RateModifier, ...] = tuple(modifiers)
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def for_selection(cls, selection: Selection) -> 'ModifierPipeline':
        """Vehicle modifier first, then the carpool discount when requested"""
        modifiers = [VehicleRateModifier(selection.vehicle_type)]
        if selection.carpool:
            modifiers.append(CarpoolDiscountModifier())
        return cls(modifiers)

    @property
    def modifiers(self) -> Tuple[RateModifier, ...]:
        return self._modifiers

    def apply_all(self, monthly_rate: Money) -> Money:
        """Apply every modifier in sequence, left to right"""
        rate = monthly_rate
        for modifier in self._modifiers:
            adjusted = modifier.apply(rate)
            self.logger.debug(f"{modifier}: {rate.amount} -> {adjusted.amount}")
            rate = adjusted
        return rate

    def __len__(self) -> int:
        return len(self._modifiers)

    def __iter__(self) -> Iterator[RateModifier]:
        return iter(self._modifiers)

    def __str__(self) -> str:
        if not self._modifiers:
            return "ModifierPipeline(empty)"
        return "ModifierPipeline(" + " -> ".join(m.get_modifier_name() for m in self._modifiers) + ")"
