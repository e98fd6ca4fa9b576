"""
Liquidación detallada por empleado para el archivo PILA (formato UGPP).

A diferencia de generate_pila, aquí el IBC se ajusta al salario mínimo,
la ARL depende de la clase de riesgo de cada empleado y se incluyen
aportes del empleado, prestaciones y parafiscales.
"""

import logging

from pydantic import BaseModel, Field

from obracalc.config import ARL_RATES, ARLRiskClass, DEFAULT_ARL_CLASS
from obracalc.core.pila.contributions import round_cop
from obracalc.exceptions import InvalidInputError
from obracalc.models import Employee, EmployeeLiquidation

logger = logging.getLogger(__name__)

MAX_DAYS = 30


class PayrollParameters(BaseModel):
    """Parámetros legales de nómina para un año."""
    year: int
    minimum_wage: float = Field(..., gt=0, description="SMMLV (COP)")
    transport_allowance: float = Field(..., ge=0, description="Auxilio de transporte (COP)")
    uvt: float = Field(..., gt=0, description="Unidad de Valor Tributario (COP)")

    # Aportes del empleado
    health_employee: float = 0.04
    pension_employee: float = 0.04

    # Aportes del empleador
    health_employer: float = 0.085
    pension_employer: float = 0.12
    arl_rates: dict[ARLRiskClass, float] = Field(default_factory=lambda: dict(ARL_RATES))

    # Prestaciones sociales
    cesantias: float = 0.0833
    prima: float = 0.0833
    vacaciones: float = 0.0417

    # Parafiscales
    sena: float = 0.02
    icbf: float = 0.03
    cajas: float = 0.04

    def arl_rate(self, risk_class: ARLRiskClass | None) -> float:
        """Tarifa ARL para una clase de riesgo (clase V si no se indica)."""
        return self.arl_rates[risk_class or DEFAULT_ARL_CLASS]


PAYROLL_PARAMETERS = {
    2025: PayrollParameters(
        year=2025,
        minimum_wage=1_423_500,
        transport_allowance=200_000,
        uvt=47_065,
    ),
}


def load_payroll_parameters(year: int) -> PayrollParameters:
    """
    Obtiene los parámetros de nómina de un año.

    Raises:
        InvalidInputError: Si no hay parámetros para el año
    """
    if year not in PAYROLL_PARAMETERS:
        available = ", ".join(str(y) for y in sorted(PAYROLL_PARAMETERS))
        raise InvalidInputError(
            f"Sin parámetros de nómina para {year}. Disponibles: {available}"
        )
    return PAYROLL_PARAMETERS[year]


def liquidate_employee(
    employee: Employee,
    params: PayrollParameters,
    days_worked: int = MAX_DAYS,
) -> EmployeeLiquidation:
    """
    Liquida los aportes de un empleado para el período.

    Args:
        employee: Empleado con salario mensual
        params: Parámetros legales del año
        days_worked: Días cotizados (máximo 30)

    Returns:
        EmployeeLiquidation con valores redondeados al peso
    """
    if employee.salary < 0:
        raise InvalidInputError("El salario no puede ser negativo")
    if days_worked <= 0:
        raise InvalidInputError("Los días cotizados deben ser > 0")

    days = min(days_worked, MAX_DAYS)
    ibc = max(employee.salary, params.minimum_wage)
    arl_class = employee.arl_risk_class or DEFAULT_ARL_CLASS

    health_employee = ibc * params.health_employee
    pension_employee = ibc * params.pension_employee
    health_employer = ibc * params.health_employer
    pension_employer = ibc * params.pension_employer
    arl = ibc * params.arl_rate(arl_class)

    cesantias = ibc * params.cesantias
    prima = ibc * params.prima
    vacaciones = ibc * params.vacaciones

    sena = ibc * params.sena
    icbf = ibc * params.icbf
    cajas = ibc * params.cajas

    total_employer = (
        health_employer + pension_employer + arl
        + cesantias + prima + vacaciones
        + sena + icbf + cajas
    )

    return EmployeeLiquidation(
        document_type=employee.document_type,
        document_number=employee.document_number,
        names=employee.name,
        days_worked=days,
        ibc=round_cop(ibc),
        health_employee=round_cop(health_employee),
        pension_employee=round_cop(pension_employee),
        health_employer=round_cop(health_employer),
        pension_employer=round_cop(pension_employer),
        arl=round_cop(arl),
        arl_class=arl_class,
        cesantias=round_cop(cesantias),
        prima=round_cop(prima),
        vacaciones=round_cop(vacaciones),
        sena=round_cop(sena),
        icbf=round_cop(icbf),
        cajas=round_cop(cajas),
        total_employee=round_cop(health_employee + pension_employee),
        total_employer=round_cop(total_employer),
    )


def liquidate_period(
    employees: list[Employee],
    year: int,
) -> list[EmployeeLiquidation]:
    """Liquida todos los empleados de un período con los parámetros del año."""
    params = load_payroll_parameters(year)
    liquidations = [liquidate_employee(e, params) for e in employees]
    logger.debug("Liquidados %d empleados con parámetros %d", len(liquidations), year)
    return liquidations
