# File: src/permit_pricing/domain/calculator.py
"""
Pricing Calculator

Combines a pricing strategy with a modifier pipeline to produce the
subtotal, campus fee and total for a selection. Figures keep full Decimal
precision; rounding is left to presentation.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from decimal import Decimal
import logging

from .models import Money, PricingConfig, Selection
from .modifiers import ModifierPipeline
from .strategies import PricingStrategy


@dataclass(frozen=True)
class PriceBreakdown:
    """Value Object: every figure of one price computation"""
    base_monthly: Money
    adjusted_monthly: Money
    subtotal: Money
    campus_fee: Money
    total: Money

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_monthly": self.base_monthly.to_dict(),
            "adjusted_monthly": self.adjusted_monthly.to_dict(),
            "subtotal": self.subtotal.to_dict(),
            "campus_fee": self.campus_fee.to_dict(),
            "total": self.total.to_dict()
        }


class PricingCalculator:
    """
    Prices one selection

    Holds one strategy and one pipeline, both stateless. Every method is a
    pure function of its arguments.
    """

    def __init__(
        self,
        strategy: PricingStrategy,
        pipeline: Optional[ModifierPipeline] = None,
        campus_fee_rate: Decimal = PricingConfig.CAMPUS_FEE_RATE
    ):
        if not isinstance(campus_fee_rate, Decimal):
            raise ValueError(f"Campus fee rate must be a Decimal, got: {campus_fee_rate!r}")
        if not Decimal('0') <= campus_fee_rate < Decimal('1'):
            raise ValueError(f"Campus fee rate must be in [0, 1), got: {campus_fee_rate}")

        self.strategy = strategy
        self.pipeline = pipeline if pipeline is not None else ModifierPipeline()
        self.campus_fee_rate = campus_fee_rate
        self.logger = logging.getLogger(self.__class__.__name__)

    def compute_adjusted_monthly(self, selection: Selection) -> Money:
        """Base monthly rate from the strategy, run through the pipeline"""
        monthly = self.strategy.compute_monthly(selection)
        return self.pipeline.apply_all(monthly)

    def compute_subtotal(self, selection: Selection) -> Money:
        """Adjusted monthly rate times the number of months"""
        subtotal = self.compute_adjusted_monthly(selection) * selection.months
        self.logger.debug(f"Subtotal for {selection.months} month(s): {subtotal.amount}")
        return subtotal

    def compute_campus_fee(self, subtotal: Money) -> Money:
        return subtotal * self.campus_fee_rate

    def compute_total(self, subtotal: Money) -> Money:
        return subtotal + self.compute_campus_fee(subtotal)

    def compute_breakdown(self, selection: Selection) -> PriceBreakdown:
        """Compute every figure for the selection in one pass"""
        base_monthly = self.strategy.compute_monthly(selection)
        adjusted_monthly = self.pipeline.apply_all(base_monthly)
        subtotal = adjusted_monthly * selection.months
        campus_fee = self.compute_campus_fee(subtotal)

        return PriceBreakdown(
            base_monthly=base_monthly,
            adjusted_monthly=adjusted_monthly,
            subtotal=subtotal,
            campus_fee=campus_fee,
            total=subtotal + campus_fee
        )
