# File: tests/unit/test_pricing.py
#!/usr/bin/env python3
"""
Pricing Unit Tests

Tests for rate modifiers, the modifier pipeline, pricing strategies and
the pricing calculator.
"""

import unittest
from decimal import Decimal

from permit_pricing.domain.models import Money, PermitType, Selection, VehicleType
from permit_pricing.domain.modifiers import (
    CarpoolDiscountModifier, ModifierPipeline, MultiplierModifier,
    RateModifier, VehicleRateModifier
)
from permit_pricing.domain.strategies import (
    CommuterPricingStrategy, ResidentPricingStrategy
)
from permit_pricing.domain.calculator import PricingCalculator


def make_selection(permit=PermitType.RESIDENT, vehicle=VehicleType.CAR, carpool=False, months=1):
    return Selection.create(permit, vehicle, carpool, months)


class TestRateModifiers(unittest.TestCase):
    """Unit tests for individual rate modifiers"""

    def test_vehicle_modifiers(self):
        rate = Money(Decimal('100'))
        test_cases = [
            (VehicleType.CAR, Decimal('100')),
            (VehicleType.SUV, Decimal('115')),
            (VehicleType.MOTORCYCLE, Decimal('70')),
        ]
        for vehicle_type, expected in test_cases:
            adjusted = VehicleRateModifier(vehicle_type).apply(rate)
            self.assertEqual(adjusted.amount, expected, msg=f"Failed for {vehicle_type}")

    def test_carpool_discount(self):
        adjusted = CarpoolDiscountModifier().apply(Money(Decimal('100')))
        self.assertEqual(adjusted.amount, Decimal('90'))

    def test_modifier_does_not_change_input(self):
        rate = Money(Decimal('45.00'))
        VehicleRateModifier(VehicleType.SUV).apply(rate)
        self.assertEqual(rate.amount, Decimal('45.00'))

    def test_multiplier_validation(self):
        with self.assertRaises(ValueError):
            MultiplierModifier(0.9)
        with self.assertRaises(ValueError):
            MultiplierModifier(Decimal('-1'))

    def test_names(self):
        self.assertEqual(CarpoolDiscountModifier().get_modifier_name(), "Carpool Discount")
        self.assertEqual(str(VehicleRateModifier(VehicleType.SUV)), "Vehicle (SUV) Modifier")


class TestModifierPipeline(unittest.TestCase):
    """Unit tests for the modifier pipeline"""

    def test_empty_pipeline_is_identity(self):
        rate = Money(Decimal('29.75'))
        self.assertEqual(ModifierPipeline().apply_all(rate), rate)
        self.assertEqual(len(ModifierPipeline()), 0)

    def test_applies_in_supplied_order(self):
        class AddOne(RateModifier):
            def apply(self, monthly_rate):
                return monthly_rate + Money(Decimal('1'))

        double = MultiplierModifier(Decimal('2'))
        rate = Money(Decimal('10'))

        self.assertEqual(ModifierPipeline([AddOne(), double]).apply_all(rate).amount, Decimal('22'))
        self.assertEqual(ModifierPipeline([double, AddOne()]).apply_all(rate).amount, Decimal('21'))

    def test_suv_then_carpool(self):
        rate = Money(Decimal('29.75'))
        pipeline = ModifierPipeline([VehicleRateModifier(VehicleType.SUV), CarpoolDiscountModifier()])
        expected = Decimal('29.75') * Decimal('1.15') * Decimal('0.90')
        self.assertEqual(pipeline.apply_all(rate).amount, expected)
        self.assertEqual(expected, Decimal('30.79125'))

    def test_for_selection_without_carpool(self):
        pipeline = ModifierPipeline.for_selection(make_selection(vehicle=VehicleType.MOTORCYCLE))
        modifiers = list(pipeline)
        self.assertEqual(len(modifiers), 1)
        self.assertIsInstance(modifiers[0], VehicleRateModifier)
        self.assertIs(modifiers[0].vehicle_type, VehicleType.MOTORCYCLE)

    def test_for_selection_with_carpool(self):
        pipeline = ModifierPipeline.for_selection(make_selection(vehicle=VehicleType.SUV, carpool=True))
        modifiers = pipeline.modifiers
        self.assertEqual(len(modifiers), 2)
        self.assertIsInstance(modifiers[0], VehicleRateModifier)
        self.assertIsInstance(modifiers[1], CarpoolDiscountModifier)
        self.assertEqual(str(pipeline), "ModifierPipeline(Vehicle (SUV) -> Carpool Discount)")


class TestPricingStrategies(unittest.TestCase):
    """Unit tests for pricing strategies"""

    def test_resident_base_rate(self):
        rate = ResidentPricingStrategy().compute_monthly(make_selection())
        self.assertEqual(rate.amount, Decimal('45.00'))

    def test_commuter_base_rate_includes_reduction(self):
        rate = CommuterPricingStrategy().compute_monthly(make_selection(permit=PermitType.COMMUTER))
        self.assertEqual(rate.amount, Decimal('29.75'))

    def test_base_rate_ignores_vehicle_carpool_and_months(self):
        strategy = CommuterPricingStrategy()
        plain = strategy.compute_monthly(make_selection(permit=PermitType.COMMUTER))
        loaded = strategy.compute_monthly(make_selection(
            permit=PermitType.COMMUTER, vehicle=VehicleType.SUV, carpool=True, months=12
        ))
        self.assertEqual(plain, loaded)

    def test_strategy_refuses_other_permit_type(self):
        with self.assertRaises(ValueError):
            ResidentPricingStrategy().compute_monthly(make_selection(permit=PermitType.COMMUTER))

    def test_strategy_name(self):
        self.assertEqual(str(CommuterPricingStrategy()), "Commuter Strategy")


class TestPricingCalculator(unittest.TestCase):
    """Unit tests for the pricing calculator, including end-to-end scenarios"""

    def build(self, selection):
        strategy = {
            PermitType.RESIDENT: ResidentPricingStrategy,
            PermitType.COMMUTER: CommuterPricingStrategy,
        }[selection.permit_type]()
        return PricingCalculator(strategy, ModifierPipeline.for_selection(selection))

    def test_resident_car_one_month(self):
        selection = make_selection()
        calculator = self.build(selection)

        subtotal = calculator.compute_subtotal(selection)
        self.assertEqual(subtotal.amount, Decimal('45.00'))
        self.assertEqual(calculator.compute_campus_fee(subtotal).amount, Decimal('2.25'))
        self.assertEqual(calculator.compute_total(subtotal).amount, Decimal('47.25'))

    def test_commuter_suv_carpool_three_months(self):
        selection = make_selection(PermitType.COMMUTER, VehicleType.SUV, True, 3)
        calculator = self.build(selection)

        self.assertEqual(calculator.compute_adjusted_monthly(selection).amount, Decimal('30.79125'))
        subtotal = calculator.compute_subtotal(selection)
        fee = calculator.compute_campus_fee(subtotal)
        total = calculator.compute_total(subtotal)

        self.assertEqual(subtotal.amount, Decimal('92.37375'))
        self.assertEqual(fee.amount, Decimal('4.6186875'))
        self.assertEqual(total.amount, Decimal('96.9924375'))
        self.assertEqual(subtotal.format(), "$92.37")
        self.assertEqual(fee.format(), "$4.62")
        self.assertEqual(total.format(), "$96.99")

    def test_commuter_motorcycle_full_year_rounds_only_at_display(self):
        selection = make_selection(PermitType.COMMUTER, VehicleType.MOTORCYCLE, False, 12)
        calculator = self.build(selection)

        self.assertEqual(calculator.compute_adjusted_monthly(selection).amount, Decimal('20.825'))
        subtotal = calculator.compute_subtotal(selection)
        fee = calculator.compute_campus_fee(subtotal)
        total = calculator.compute_total(subtotal)

        self.assertEqual(subtotal.amount, Decimal('249.9'))
        self.assertEqual(fee.amount, Decimal('12.495'))
        self.assertEqual(total.amount, Decimal('262.395'))
        self.assertEqual(fee.format(), "$12.50")
        self.assertEqual(total.format(), "$262.40")

    def test_repeated_calls_are_stable(self):
        selection = make_selection(PermitType.COMMUTER, VehicleType.SUV, True, 7)
        calculator = self.build(selection)
        self.assertEqual(calculator.compute_subtotal(selection), calculator.compute_subtotal(selection))

    def test_breakdown_matches_individual_methods(self):
        selection = make_selection(PermitType.RESIDENT, VehicleType.SUV, True, 4)
        calculator = self.build(selection)
        breakdown = calculator.compute_breakdown(selection)
        subtotal = calculator.compute_subtotal(selection)

        self.assertEqual(breakdown.base_monthly.amount, Decimal('45.00'))
        self.assertEqual(breakdown.subtotal, subtotal)
        self.assertEqual(breakdown.campus_fee, calculator.compute_campus_fee(subtotal))
        self.assertEqual(breakdown.total, calculator.compute_total(subtotal))
        self.assertEqual(breakdown.to_dict()["total"]["currency"], "USD")

    def test_default_pipeline_is_empty(self):
        calculator = PricingCalculator(ResidentPricingStrategy())
        self.assertEqual(calculator.compute_subtotal(make_selection(vehicle=VehicleType.SUV)).amount,
                         Decimal('45.00'))

    def test_custom_fee_rate(self):
        calculator = PricingCalculator(ResidentPricingStrategy(), campus_fee_rate=Decimal('0.10'))
        self.assertEqual(calculator.compute_campus_fee(Money(Decimal('45'))).amount, Decimal('4.50'))

    def test_invalid_fee_rate(self):
        for rate in (Decimal('-0.01'), Decimal('1'), 0.05):
            with self.assertRaises(ValueError, msg=f"rate={rate!r}"):
                PricingCalculator(ResidentPricingStrategy(), campus_fee_rate=rate)


if __name__ == "__main__":
    unittest.main()
