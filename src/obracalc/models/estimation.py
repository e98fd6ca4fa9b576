"""
Modelos del simulador de costos.

Una plantilla (CostTemplate) define precios unitarios por categoría y
subcategoría; los ítems de una estimación referencian esas subcategorías.
"""

from typing import Optional

from pydantic import BaseModel, Field

from obracalc.config import CalculationFactors, CostCategory


class TemplateEntry(BaseModel):
    """Precio unitario de una subcategoría."""
    name: str
    unit: str
    cost_per_unit: float = Field(..., ge=0, allow_inf_nan=False)


class CostTemplate(BaseModel):
    """Plantilla de costos con precios por categoría."""
    id: str
    name: str
    description: str = ""
    categories: dict[CostCategory, dict[str, TemplateEntry]] = Field(default_factory=dict)
    factors: CalculationFactors = Field(default_factory=CalculationFactors)

    model_config = {"frozen": True}

    def lookup(self, category: CostCategory, subcategory: str) -> Optional[TemplateEntry]:
        """Busca la entrada de una subcategoría; None si no existe."""
        return self.categories.get(category, {}).get(subcategory)

    @property
    def n_entries(self) -> int:
        return sum(len(entries) for entries in self.categories.values())


class EstimationItem(BaseModel):
    """Ítem de entrada: categoría, subcategoría y cantidad."""
    category: CostCategory
    subcategory: str = Field(..., min_length=1)
    quantity: float = Field(default=1.0, ge=0, allow_inf_nan=False)
    name: Optional[str] = None
    unit: Optional[str] = None
    cost_per_unit: Optional[float] = Field(default=None, allow_inf_nan=False)


class ProjectPreset(BaseModel):
    """Configuración predefinida de ítems para una plantilla."""
    name: str
    template_id: str
    items: list[EstimationItem] = Field(default_factory=list)


class ItemDetail(BaseModel):
    """Ítem resuelto contra la plantilla, con su costo."""
    index: int
    category: CostCategory
    subcategory: str
    quantity: float
    name: Optional[str] = None
    unit: Optional[str] = None
    cost_per_unit: float = 0.0
    total_cost: float = 0.0  # Costo directo sin factor prestacional
    resolved: bool = True


class CostBreakdown(BaseModel):
    """Desglose de costos de la estimación (COP)."""
    materials: float = 0.0
    labor: float = 0.0  # Incluye factor prestacional si se aplicó
    equipment: float = 0.0
    direct_cost: float = 0.0  # materials + labor + equipment
    overhead: float = 0.0
    subtotal: float = 0.0  # direct_cost + overhead
    profit: float = 0.0
    contingency: float = 0.0
    total: float = 0.0


class CostSummary(BaseModel):
    """Indicadores resumidos."""
    cost_per_day: float = 0.0
    materials_percentage: float = 0.0
    labor_percentage: float = 0.0
    equipment_percentage: float = 0.0


class ProjectInfo(BaseModel):
    """Datos del cálculo (sin timestamps)."""
    template_id: str
    template_name: str
    duration_days: int
    items_count: int
    benefits_applied: bool


class CostEstimation(BaseModel):
    """Resultado completo del simulador."""
    project_info: ProjectInfo
    cost_breakdown: CostBreakdown
    items_detail: list[ItemDetail] = Field(default_factory=list)
    calculation_factors: CalculationFactors
    summary: CostSummary
    unresolved_items: list[int] = Field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """True si algún ítem no se encontró en la plantilla."""
        return bool(self.unresolved_items)
