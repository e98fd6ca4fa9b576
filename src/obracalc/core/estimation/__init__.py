"""
Simulador de costos de obra.

Costeo por plantilla con factor prestacional, gastos generales,
utilidad e imprevistos en cascada.
"""

from .factors import (
    labor_with_benefits,
    cascade_breakdown,
    category_percentage,
)

from .engine import (
    raw_cost,
    resolve_item,
    calculate,
)

__all__ = [
    # Factores
    "labor_with_benefits",
    "cascade_breakdown",
    "category_percentage",
    # Motor
    "raw_cost",
    "resolve_item",
    "calculate",
]
