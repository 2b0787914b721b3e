# File: src/permit_pricing/domain/strategies.py
"""
Strategy Pattern Implementation for Permit Pricing

Each permit type has its own pricing strategy that decides the base monthly
rate. Strategies look only at the selection's permit type; vehicle and
carpool adjustments belong to the modifier pipeline.

Strategies:
1. ResidentPricingStrategy - flat resident rate
2. CommuterPricingStrategy - commuter rate with a built-in reduction
"""

from abc import ABC, abstractmethod
from decimal import Decimal
import logging

from .models import Money, PermitType, PricingConfig, Selection


# ============================================================================
# STRATEGY INTERFACE
# ============================================================================

class PricingStrategy(ABC):
    """
    Abstract base class for pricing strategies
    Defines the interface for base monthly rate calculation
    """

    permit_type: PermitType

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def compute_monthly(self, selection: Selection) -> Money:
        """
        Calculate the base monthly rate for the selection
        Returns: Monthly rate before vehicle and carpool modifiers
        """
        if selection.permit_type is not self.permit_type:
            raise ValueError(
                f"{self.__class__.__name__} cannot price {selection.permit_type.name} permits"
            )
        rate = self._base_monthly_rate()
        self.logger.debug(f"Base monthly rate for {self.permit_type.name}: {rate.amount}")
        return rate

    @abstractmethod
    def _base_monthly_rate(self) -> Money:
        pass

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("PricingStrategy", "")

    def __str__(self) -> str:
        return f"{self.get_strategy_name()} Strategy"


# ============================================================================
# PRICING STRATEGIES
# ============================================================================

class ResidentPricingStrategy(PricingStrategy):
    """Residents pay the flat base rate"""

    permit_type = PermitType.RESIDENT

    def _base_monthly_rate(self) -> Money:
        return Money(PricingConfig.RESIDENT_BASE_RATE)


class CommuterPricingStrategy(PricingStrategy):
    """
    Commuters get an unconditional reduction on their base rate
    The reduction stacks with any carpool discount applied later
    """

    permit_type = PermitType.COMMUTER

    def _base_monthly_rate(self) -> Money:
        base = Money(PricingConfig.COMMUTER_BASE_RATE)
        return base * (Decimal('1') - PricingConfig.COMMUTER_DISCOUNT)
