"""
Modelos de la Planilla Integrada de Liquidación de Aportes (PILA).
"""

from typing import Optional

from pydantic import BaseModel, Field

from obracalc.config import ARLRiskClass, PILAStatus
from obracalc.models.base import RecordModel


class Employee(BaseModel):
    """Empleado con salario mensual ya resuelto (COP)."""
    id: Optional[str] = None
    document_type: str = "CC"
    document_number: str = ""
    name: str = ""
    position: str = ""
    salary: float = Field(..., ge=0, allow_inf_nan=False, description="Salario mensual base (COP)")
    arl_risk_class: Optional[ARLRiskClass] = None


class EmployeeContribution(BaseModel):
    """Aportes patronales de un empleado."""
    employee_id: Optional[str] = None
    document_number: str = ""
    name: str = ""
    salary: float
    health: int
    pension: int
    arl: int
    total: int


class PILASubmission(RecordModel):
    """
    Planilla PILA generada para un período.

    Los aportes por empleado (contributions) usan la misma tarifa ARL de la
    planilla (arl_rate), de modo que cuadran con los totales. La clase de
    riesgo de cada empleado solo se aplica en la liquidación detallada UGPP
    (EmployeeLiquidation), por lo que el ARL de ambos puede diferir.
    """
    period: str  # YYYY-MM
    employee_count: int
    total_salary: float
    total_health: int
    total_pension: int
    total_arl: int
    total_contributions: int
    arl_rate: float
    status: PILAStatus = PILAStatus.GENERADO
    contributions: list[EmployeeContribution] = Field(default_factory=list)


class EmployeeLiquidation(BaseModel):
    """
    Liquidación detallada de un empleado (formato UGPP).

    Todos los valores en pesos enteros.
    """
    document_type: str
    document_number: str
    names: str
    days_worked: int
    ibc: int

    health_employee: int
    pension_employee: int

    health_employer: int
    pension_employer: int
    arl: int
    arl_class: ARLRiskClass

    cesantias: int
    prima: int
    vacaciones: int

    sena: int
    icbf: int
    cajas: int

    total_employee: int
    total_employer: int
