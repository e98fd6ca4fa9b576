"""
Textos de presentación por idioma.

LABELS es un mapeo inmutable idioma -> tabla de textos. Los comandos
obtienen la tabla con labels_for() y la pasan a las funciones de impresión.
"""

from types import MappingProxyType
from typing import Mapping

DEFAULT_LOCALE = "es"

_ES = {
    # Desglose
    "breakdown": "Desglose de costos",
    "materials": "Materiales",
    "labor": "Mano de obra",
    "equipment": "Equipos",
    "direct_cost": "Costo directo",
    "overhead": "Gastos generales",
    "subtotal": "Subtotal",
    "profit": "Utilidad",
    "contingency": "Imprevistos",
    "total": "Total",
    "template": "Plantilla",
    "duration": "Duración",
    "days": "días",
    "items": "Ítems",
    "benefits": "Factor prestacional",
    "applied": "aplicado",
    "not_applied": "no aplicado",
    "cost_per_day": "Costo por día",
    "share": "Participación",
    "unresolved": "Ítems sin precio en la plantilla",
    # Detalle de ítems
    "items_detail": "Detalle de ítems",
    "category": "Categoría",
    "subcategory": "Subcategoría",
    "description": "Descripción",
    "quantity": "Cantidad",
    "unit": "Unidad",
    "unit_cost": "Costo unitario",
    "item_total": "Costo total",
    # PILA
    "pila": "Planilla PILA",
    "period": "Período",
    "employees": "Empleados",
    "employee": "Empleado",
    "document": "Documento",
    "salary": "Salario",
    "health": "Salud",
    "pension": "Pensión",
    "arl": "ARL",
    "arl_rate": "Tarifa ARL",
    "contributions": "Aportes",
    "status": "Estado",
    "created": "Creada",
}

_EN = {
    "breakdown": "Cost breakdown",
    "materials": "Materials",
    "labor": "Labor",
    "equipment": "Equipment",
    "direct_cost": "Direct cost",
    "overhead": "Overhead",
    "subtotal": "Subtotal",
    "profit": "Profit",
    "contingency": "Contingency",
    "total": "Total",
    "template": "Template",
    "duration": "Duration",
    "days": "days",
    "items": "Items",
    "benefits": "Labor benefit factor",
    "applied": "applied",
    "not_applied": "not applied",
    "cost_per_day": "Cost per day",
    "share": "Share",
    "unresolved": "Items without a template price",
    "items_detail": "Item detail",
    "category": "Category",
    "subcategory": "Subcategory",
    "description": "Description",
    "quantity": "Quantity",
    "unit": "Unit",
    "unit_cost": "Unit cost",
    "item_total": "Total cost",
    "pila": "PILA submission",
    "period": "Period",
    "employees": "Employees",
    "employee": "Employee",
    "document": "Document",
    "salary": "Salary",
    "health": "Health",
    "pension": "Pension",
    "arl": "ARL",
    "arl_rate": "ARL rate",
    "contributions": "Contributions",
    "status": "Status",
    "created": "Created",
}

LABELS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "es": MappingProxyType(_ES),
    "en": MappingProxyType(_EN),
})


def labels_for(locale: str = DEFAULT_LOCALE) -> Mapping[str, str]:
    """
    Tabla de textos para un idioma.

    Raises:
        ValueError: Si el idioma no está disponible
    """
    try:
        return LABELS[locale]
    except KeyError:
        available = ", ".join(LABELS)
        raise ValueError(f"Idioma no soportado: {locale}. Disponibles: {available}") from None
