# File: src/permit_pricing/infrastructure/factories.py
"""
Factory Pattern Implementation for Permit Pricing

This module creates the objects the pricing use case needs:
1. Strategy Factories - pricing strategy per permit type
2. Pipeline Factories - modifier pipeline per selection
3. Calculator Factories - a calculator wired for one selection
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Dict, List, Optional, Type, Union
from decimal import Decimal
import logging

from ..domain.models import PermitType, PricingConfig, Selection
from ..domain.modifiers import ModifierPipeline, RateModifier
from ..domain.strategies import (
    PricingStrategy, ResidentPricingStrategy, CommuterPricingStrategy
)
from ..domain.calculator import PricingCalculator

T = TypeVar('T')


# ============================================================================
# FACTORY INTERFACES
# ============================================================================

class Factory(ABC, Generic[T]):
    """Base factory interface"""

    @abstractmethod
    def create(self, **kwargs) -> T:
        """Create an instance of T"""
        pass


class StrategyFactory(Factory[T], ABC):
    """Factory for strategy objects"""

    @abstractmethod
    def create_by_type(self, strategy_type: str) -> T:
        """Create strategy by type name"""
        pass


# ============================================================================
# STRATEGY FACTORIES
# ============================================================================

class PricingStrategyFactory(StrategyFactory[PricingStrategy]):
    """Factory for creating PricingStrategy instances"""

    STRATEGY_MAP: Dict[PermitType, Type[PricingStrategy]] = {
        PermitType.RESIDENT: ResidentPricingStrategy,
        PermitType.COMMUTER: CommuterPricingStrategy,
    }

    def create(self, **kwargs) -> PricingStrategy:
        """Create a pricing strategy, resident by default"""
        permit_type = kwargs.get("permit_type", PermitType.RESIDENT)
        return self.create_by_type(permit_type)

    def create_by_type(self, strategy_type: Union[str, PermitType]) -> PricingStrategy:
        """Create strategy by permit type or its name"""
        if not isinstance(strategy_type, PermitType):
            strategy_type = PermitType.from_text(strategy_type)
        return self.create_for_permit_type(strategy_type)

    def create_for_permit_type(self, permit_type: PermitType) -> PricingStrategy:
        """Create the strategy that prices the given permit type"""
        strategy_class = self.STRATEGY_MAP.get(permit_type)
        if not strategy_class:
            raise ValueError(f"Unknown pricing strategy type: {permit_type}")
        return strategy_class()


# ============================================================================
# PIPELINE AND CALCULATOR FACTORIES
# ============================================================================

class ModifierPipelineFactory(Factory[ModifierPipeline]):
    """Factory for creating ModifierPipeline instances"""

    def create(self, **kwargs) -> ModifierPipeline:
        """Create a pipeline from an explicit modifier list"""
        modifiers: List[RateModifier] = list(kwargs.get("modifiers", []))
        return ModifierPipeline(modifiers)

    def create_for_selection(self, selection: Selection) -> ModifierPipeline:
        """One vehicle modifier, followed by the carpool discount when requested"""
        return ModifierPipeline.for_selection(selection)


class PricingCalculatorFactory(Factory[PricingCalculator]):
    """Builds a calculator wired for a single selection"""

    def __init__(
        self,
        strategy_factory: Optional[PricingStrategyFactory] = None,
        pipeline_factory: Optional[ModifierPipelineFactory] = None,
        campus_fee_rate: Decimal = PricingConfig.CAMPUS_FEE_RATE
    ):
        self.strategy_factory = strategy_factory or PricingStrategyFactory()
        self.pipeline_factory = pipeline_factory or ModifierPipelineFactory()
        self.campus_fee_rate = campus_fee_rate
        self.logger = logging.getLogger(self.__class__.__name__)

    def create(self, **kwargs) -> PricingCalculator:
        """Create a calculator for the `selection` keyword argument"""
        selection = kwargs.get("selection")
        if selection is None:
            raise ValueError("A selection is required to build a calculator")
        return self.create_for_selection(selection)

    def create_for_selection(self, selection: Selection) -> PricingCalculator:
        strategy = self.strategy_factory.create_for_permit_type(selection.permit_type)
        pipeline = self.pipeline_factory.create_for_selection(selection)
        self.logger.debug(f"Calculator for {selection.permit_type.name}: {strategy}, {pipeline}")
        return PricingCalculator(strategy, pipeline, self.campus_fee_rate)
