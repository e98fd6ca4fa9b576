"""
Tests para core/estimation - Simulador de costos.
"""

import pytest

from obracalc.config import CalculationFactors, CostCategory
from obracalc.core.estimation import (
    calculate,
    cascade_breakdown,
    category_percentage,
    labor_with_benefits,
    raw_cost,
    resolve_item,
)
from obracalc.exceptions import InvalidInputError
from obracalc.models import EstimationItem


def item(category, subcategory, quantity=1.0):
    return EstimationItem(category=category, subcategory=subcategory, quantity=quantity)


class TestRawCost:
    """Tests para costo directo de un ítem."""

    def test_basic(self):
        assert raw_cost(10, 1000) == 10000

    def test_zero_quantity(self):
        assert raw_cost(0, 1000) == 0

    def test_monotonic_in_quantity(self):
        values = [raw_cost(q, 2500) for q in [0, 1, 2.5, 10, 100]]
        assert values == sorted(values)
        assert all(v >= 0 for v in values)

    def test_monotonic_in_price(self):
        values = [raw_cost(3, p) for p in [0, 1, 350, 320000]]
        assert values == sorted(values)

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidInputError):
            raw_cost(-1, 1000)

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            raw_cost(1, -5)


class TestFactors:
    """Tests para factores en cascada."""

    def test_labor_with_benefits(self):
        assert labor_with_benefits(1_000_000, 1.58, True) == pytest.approx(1_580_000)

    def test_labor_without_benefits(self):
        assert labor_with_benefits(1_000_000, 1.58, False) == 1_000_000

    def test_factor_below_one_rejected(self):
        with pytest.raises(ValueError):
            labor_with_benefits(100, 0.9, True)

    def test_cascade_order(self):
        factors = CalculationFactors(overhead_percentage=0.1, profit_margin=0.15, contingency=0.05)
        b = cascade_breakdown(10000, 0, 0, factors)

        assert b.overhead == pytest.approx(1000)
        assert b.subtotal == pytest.approx(11000)
        assert b.profit == pytest.approx(1650)
        assert b.contingency == pytest.approx(632.5)
        assert b.total == pytest.approx(13282.5)

    def test_zero_factors(self):
        factors = CalculationFactors(overhead_percentage=0, profit_margin=0, contingency=0)
        b = cascade_breakdown(100, 200, 300, factors)
        assert b.total == pytest.approx(600)

    def test_category_percentage_zero_direct(self):
        assert category_percentage(0, 0) == 0.0

    def test_category_percentage_rounded(self):
        assert category_percentage(1, 3) == 33.3


class TestResolveItem:
    """Tests para resolución de ítems contra la plantilla."""

    def test_resolved(self, construction):
        detail = resolve_item(construction, item("materials", "concrete", 2), 0)

        assert detail.resolved
        assert detail.name == "Concreto"
        assert detail.unit == "m3"
        assert detail.total_cost == pytest.approx(640000)

    def test_unknown_subcategory(self, construction):
        detail = resolve_item(construction, item("materials", "marble", 5), 3)

        assert not detail.resolved
        assert detail.index == 3
        assert detail.total_cost == 0
        assert detail.cost_per_unit == 0

    def test_subcategory_in_other_category(self, construction):
        # 'mason' existe en labor, no en materials
        detail = resolve_item(construction, item("materials", "mason"), 0)
        assert not detail.resolved


class TestCalculateScenarios:
    """Escenarios de referencia del simulador."""

    def test_empty_items(self, construction):
        result = calculate(construction, [], duration_days=30)

        assert result.cost_breakdown.total == 0
        assert result.summary.cost_per_day == 0
        assert result.summary.materials_percentage == 0
        assert result.project_info.items_count == 0
        assert not result.has_warnings

    def test_single_material_cascade(self, simple_template):
        result = calculate(
            simple_template,
            [item("materials", "block", 10)],
            duration_days=30,
            apply_benefits=False,
        )
        b = result.cost_breakdown

        assert b.materials == pytest.approx(10000)
        assert b.labor == 0
        assert b.equipment == 0
        assert b.overhead == pytest.approx(1000)
        assert b.profit == pytest.approx(1650)
        assert b.contingency == pytest.approx(632.5)
        assert b.total == pytest.approx(13282.5)
        assert result.summary.cost_per_day == pytest.approx(442.75)
        assert result.summary.materials_percentage == 100.0

    def test_labor_benefit_factor(self, simple_template):
        result = calculate(
            simple_template,
            [item("labor", "worker", 1)],
            duration_days=30,
            apply_benefits=True,
        )

        assert result.cost_breakdown.labor == pytest.approx(1_580_000)
        assert result.project_info.benefits_applied
        # El detalle conserva el costo sin prestaciones
        assert result.items_detail[0].total_cost == pytest.approx(1_000_000)

    def test_benefits_not_applied(self, simple_template):
        result = calculate(simple_template, [item("labor", "worker", 1)], 30, apply_benefits=False)
        assert result.cost_breakdown.labor == pytest.approx(1_000_000)
        assert not result.project_info.benefits_applied

    def test_zero_quantity_item_kept(self, simple_template):
        result = calculate(
            simple_template,
            [item("materials", "block", 0), item("materials", "block", 10)],
            duration_days=30,
            apply_benefits=False,
        )
        zero = result.items_detail[0]

        assert len(result.items_detail) == 2
        assert zero.resolved
        assert zero.total_cost == 0
        assert result.project_info.items_count == 2
        assert result.unresolved_items == []
        assert result.cost_breakdown.materials == pytest.approx(10000)


class TestCalculateProperties:
    """Propiedades generales del cálculo."""

    @pytest.fixture
    def mixed_items(self):
        return [
            item("materials", "concrete", 12),
            item("materials", "brick", 8000),
            item("labor", "mason", 200),
            item("labor", "helper", 300),
            item("equipment", "mixer", 15),
        ]

    def test_total_at_least_direct(self, construction, mixed_items):
        b = calculate(construction, mixed_items, 60).cost_breakdown
        assert b.total >= b.materials + b.labor + b.equipment

    def test_percentages_sum_to_100(self, construction, mixed_items):
        s = calculate(construction, mixed_items, 60).summary
        total = s.materials_percentage + s.labor_percentage + s.equipment_percentage
        assert total == pytest.approx(100.0, abs=0.2)

    def test_idempotent(self, construction, mixed_items):
        first = calculate(construction, mixed_items, 45)
        second = calculate(construction, mixed_items, 45)
        assert first.model_dump_json() == second.model_dump_json()

    def test_template_factors_used_by_default(self, construction, mixed_items):
        result = calculate(construction, mixed_items, 30)
        assert result.calculation_factors == construction.factors

    def test_custom_factors(self, construction, mixed_items):
        factors = CalculationFactors(overhead_percentage=0, profit_margin=0, contingency=0)
        result = calculate(construction, mixed_items, 30, factors=factors)
        assert result.cost_breakdown.total == pytest.approx(result.cost_breakdown.direct_cost)

    def test_category_totals(self, construction):
        result = calculate(
            construction,
            [item("equipment", "crane", 2), item("equipment", "tools", 1)],
            10,
        )
        assert result.cost_breakdown.equipment == pytest.approx(2 * 450000 + 180000)
        assert result.summary.equipment_percentage == 100.0

    def test_cost_per_day_rounded(self, construction):
        result = calculate(construction, [item("materials", "brick", 1)], 3)
        assert result.summary.cost_per_day == round(result.cost_breakdown.total / 3, 2)


class TestUnresolvedItems:
    """Ítems que no existen en la plantilla."""

    def test_reported_not_raised(self, construction):
        items = [
            item("materials", "concrete", 1),
            item("materials", "unobtainium", 4),
            item("labor", "astronaut", 2),
        ]
        result = calculate(construction, items, 30)

        assert result.unresolved_items == [1, 2]
        assert result.has_warnings
        assert result.project_info.items_count == 3
        assert result.cost_breakdown.materials == pytest.approx(320000)
        assert result.cost_breakdown.labor == 0

    def test_all_unresolved_is_zero(self, construction):
        result = calculate(construction, [item("equipment", "rocket", 1)], 30)
        assert result.cost_breakdown.total == 0
        assert result.unresolved_items == [0]


class TestCalculateErrors:
    """Entradas rechazadas."""

    @pytest.mark.parametrize("days", [0, -5])
    def test_non_positive_duration(self, construction, days):
        with pytest.raises(InvalidInputError):
            calculate(construction, [], duration_days=days)

    def test_negative_quantity_model(self):
        with pytest.raises(ValueError):
            EstimationItem(category=CostCategory.MATERIALS, subcategory="concrete", quantity=-1)

    @pytest.mark.parametrize("quantity", [float("inf"), float("nan")])
    def test_non_finite_quantity_model(self, quantity):
        with pytest.raises(ValueError):
            EstimationItem(category=CostCategory.MATERIALS, subcategory="concrete", quantity=quantity)

    def test_non_finite_quantity_bypassing_validation(self, construction):
        bad = EstimationItem.model_construct(
            category=CostCategory.MATERIALS, subcategory="concrete", quantity=float("inf"),
            name=None, unit=None, cost_per_unit=None,
        )
        with pytest.raises(InvalidInputError):
            calculate(construction, [bad], 30)

    def test_non_finite_factor(self):
        with pytest.raises(ValueError):
            CalculationFactors(labor_benefit_factor=float("inf"))

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            EstimationItem(category="tools", subcategory="hammer")

    def test_negative_quantity_bypassing_validation(self, construction):
        bad = EstimationItem.model_construct(
            category=CostCategory.MATERIALS, subcategory="concrete", quantity=-2,
            name=None, unit=None, cost_per_unit=None,
        )
        with pytest.raises(InvalidInputError):
            calculate(construction, [bad], 30)
