"""
Modelos de datos para ObraCalc.

Este módulo contiene todos los modelos Pydantic utilizados en la aplicación.
"""

from obracalc.models.base import (
    RecordModel,
    generate_id,
    generate_timestamp,
)
from obracalc.models.estimation import (
    TemplateEntry,
    CostTemplate,
    EstimationItem,
    ProjectPreset,
    ItemDetail,
    CostBreakdown,
    CostSummary,
    ProjectInfo,
    CostEstimation,
)
from obracalc.models.pila import (
    Employee,
    EmployeeContribution,
    PILASubmission,
    EmployeeLiquidation,
)

__all__ = [
    # Clases base
    "RecordModel",
    "generate_id",
    "generate_timestamp",
    # Simulador de costos
    "TemplateEntry",
    "CostTemplate",
    "EstimationItem",
    "ProjectPreset",
    "ItemDetail",
    "CostBreakdown",
    "CostSummary",
    "ProjectInfo",
    "CostEstimation",
    # PILA
    "Employee",
    "EmployeeContribution",
    "PILASubmission",
    "EmployeeLiquidation",
]
