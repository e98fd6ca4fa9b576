"""
Aplicación de factores sobre el costo directo.

Gastos generales, utilidad e imprevistos se aplican en cascada:

    overhead    = D × %AG
    profit      = (D + overhead) × %U
    contingency = (D + overhead + profit) × %I

donde D = materiales + mano de obra + equipos.
"""

from obracalc.config import CalculationFactors
from obracalc.models import CostBreakdown


def labor_with_benefits(labor_raw: float, factor: float, apply_benefits: bool) -> float:
    """
    Aplica el factor prestacional a la mano de obra.

    Args:
        labor_raw: Costo de mano de obra sin prestaciones
        factor: Factor prestacional (ej: 1.58)
        apply_benefits: Si False, retorna el costo sin cambios

    Returns:
        Costo de mano de obra cargado
    """
    if factor < 1:
        raise ValueError("El factor prestacional debe ser >= 1")
    return labor_raw * factor if apply_benefits else labor_raw


def cascade_breakdown(
    materials: float,
    labor: float,
    equipment: float,
    factors: CalculationFactors,
) -> CostBreakdown:
    """
    Construye el desglose aplicando los factores en cascada.

    Args:
        materials: Total de materiales
        labor: Total de mano de obra (ya con prestaciones si aplica)
        equipment: Total de equipos
        factors: Factores de cálculo

    Returns:
        CostBreakdown con todos los componentes
    """
    direct = materials + labor + equipment
    overhead = direct * factors.overhead_percentage
    subtotal = direct + overhead
    profit = subtotal * factors.profit_margin
    contingency = (subtotal + profit) * factors.contingency
    total = subtotal + profit + contingency

    return CostBreakdown(
        materials=materials,
        labor=labor,
        equipment=equipment,
        direct_cost=direct,
        overhead=overhead,
        subtotal=subtotal,
        profit=profit,
        contingency=contingency,
        total=total,
    )


def category_percentage(value: float, direct: float) -> float:
    """Porcentaje de una categoría sobre el costo directo (1 decimal)."""
    if direct <= 0:
        return 0.0
    return round(value / direct * 100, 1)
