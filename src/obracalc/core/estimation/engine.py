"""
Simulador de costos por plantilla.

Resuelve cada ítem contra la plantilla, suma por categoría y aplica
factor prestacional, gastos generales, utilidad e imprevistos.
"""

import logging
import math
from typing import Iterable, Optional

from obracalc.config import CalculationFactors, CostCategory
from obracalc.core.estimation.factors import (
    cascade_breakdown,
    category_percentage,
    labor_with_benefits,
)
from obracalc.exceptions import InvalidInputError
from obracalc.models import (
    CostEstimation,
    CostSummary,
    CostTemplate,
    EstimationItem,
    ItemDetail,
    ProjectInfo,
)

logger = logging.getLogger(__name__)


def raw_cost(quantity: float, cost_per_unit: float) -> float:
    """
    Costo directo de un ítem: cantidad × precio unitario.

    Args:
        quantity: Cantidad (>= 0)
        cost_per_unit: Precio unitario en COP (>= 0)

    Returns:
        Costo en COP
    """
    if quantity < 0:
        raise InvalidInputError("La cantidad no puede ser negativa")
    if cost_per_unit < 0:
        raise InvalidInputError("El precio unitario no puede ser negativo")
    return quantity * cost_per_unit


def resolve_item(template: CostTemplate, item: EstimationItem, index: int) -> ItemDetail:
    """
    Resuelve un ítem contra la plantilla.

    Un ítem cuya subcategoría no existe en la plantilla aporta costo cero
    y queda marcado con resolved=False.
    """
    entry = template.lookup(item.category, item.subcategory)
    if entry is None:
        return ItemDetail(
            index=index,
            category=item.category,
            subcategory=item.subcategory,
            quantity=item.quantity,
            name=item.name,
            unit=item.unit,
            resolved=False,
        )

    return ItemDetail(
        index=index,
        category=item.category,
        subcategory=item.subcategory,
        quantity=item.quantity,
        name=entry.name,
        unit=entry.unit,
        cost_per_unit=entry.cost_per_unit,
        total_cost=raw_cost(item.quantity, entry.cost_per_unit),
    )


def calculate(
    template: CostTemplate,
    items: Iterable[EstimationItem],
    duration_days: int,
    apply_benefits: bool = True,
    factors: Optional[CalculationFactors] = None,
) -> CostEstimation:
    """
    Calcula la estimación de costos de un proyecto.

    Args:
        template: Plantilla con precios unitarios
        items: Ítems de la estimación (puede ser vacío)
        duration_days: Duración del proyecto en días (> 0)
        apply_benefits: Aplicar factor prestacional a la mano de obra
        factors: Factores a usar; por defecto los de la plantilla

    Returns:
        CostEstimation con desglose, detalle de ítems y resumen.
        Los ítems no encontrados en la plantilla se reportan en
        unresolved_items.

    Raises:
        InvalidInputError: Si la duración no es positiva o hay cantidades negativas
    """
    if duration_days <= 0:
        raise InvalidInputError("La duración del proyecto debe ser > 0 días")

    items = list(items)
    for item in items:
        if not math.isfinite(item.quantity):
            raise InvalidInputError(
                f"Cantidad no finita en {item.category.value}/{item.subcategory}"
            )
        if item.quantity < 0:
            raise InvalidInputError(
                f"Cantidad negativa en {item.category.value}/{item.subcategory}"
            )

    factors = factors or template.factors

    details = [resolve_item(template, item, i) for i, item in enumerate(items)]
    unresolved = [d.index for d in details if not d.resolved]
    if unresolved:
        logger.warning(
            "Plantilla %s: %d ítem(s) sin resolver %s",
            template.id, len(unresolved), unresolved,
        )

    totals = {category: 0.0 for category in CostCategory}
    for detail in details:
        totals[detail.category] += detail.total_cost

    labor = labor_with_benefits(
        totals[CostCategory.LABOR], factors.labor_benefit_factor, apply_benefits
    )
    breakdown = cascade_breakdown(
        materials=totals[CostCategory.MATERIALS],
        labor=labor,
        equipment=totals[CostCategory.EQUIPMENT],
        factors=factors,
    )

    direct = breakdown.direct_cost
    summary = CostSummary(
        cost_per_day=round(breakdown.total / duration_days, 2),
        materials_percentage=category_percentage(breakdown.materials, direct),
        labor_percentage=category_percentage(breakdown.labor, direct),
        equipment_percentage=category_percentage(breakdown.equipment, direct),
    )

    logger.debug(
        "Estimación %s: %d ítems, total %.2f", template.id, len(items), breakdown.total
    )

    return CostEstimation(
        project_info=ProjectInfo(
            template_id=template.id,
            template_name=template.name,
            duration_days=duration_days,
            items_count=len(items),
            benefits_applied=apply_benefits,
        ),
        cost_breakdown=breakdown,
        items_detail=details,
        calculation_factors=factors,
        summary=summary,
        unresolved_items=unresolved,
    )
