"""
Aportes patronales a seguridad social (PILA).

Calcula salud (8.5%), pensión (12%) y ARL sobre el salario mensual
de cada empleado y los totales de la planilla del período.
"""

import logging
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from obracalc.config import (
    DEFAULT_ARL_RATE,
    HEALTH_EMPLOYER_RATE,
    MONTHLY_HOURS,
    PENSION_EMPLOYER_RATE,
)
from obracalc.exceptions import InvalidInputError
from obracalc.models import Employee, EmployeeContribution, PILASubmission

logger = logging.getLogger(__name__)

PERIOD_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def round_cop(value: float) -> int:
    """Redondea al peso más cercano (mitades hacia arriba)."""
    if not math.isfinite(value):
        raise InvalidInputError(f"Valor no finito: {value}")
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def validate_period(period: str) -> str:
    """
    Valida un período PILA.

    Args:
        period: Período en formato YYYY-MM

    Returns:
        El mismo período

    Raises:
        InvalidInputError: Si el formato no es válido
    """
    if not isinstance(period, str) or not PERIOD_PATTERN.match(period):
        raise InvalidInputError(
            f"Formato de período inválido: {period!r}. Use YYYY-MM (ej: 2025-09)"
        )
    return period


def resolve_monthly_salary(
    monthly_salary: Optional[float] = None,
    hourly_rate: Optional[float] = None,
) -> float:
    """
    Salario mensual de un empleado.

    Usa el salario mensual si existe; si no, tarifa por hora × 192 horas.
    """
    if monthly_salary:
        return float(monthly_salary)
    return float(hourly_rate or 0) * MONTHLY_HOURS


def employee_contribution(employee: Employee, arl_rate: float = DEFAULT_ARL_RATE) -> EmployeeContribution:
    """
    Aportes patronales de un empleado.

    Cada componente se redondea por separado y el total es su suma. El ARL
    usa arl_rate aunque el empleado tenga clase de riesgo.
    """
    health = round_cop(employee.salary * HEALTH_EMPLOYER_RATE)
    pension = round_cop(employee.salary * PENSION_EMPLOYER_RATE)
    arl = round_cop(employee.salary * arl_rate)
    return EmployeeContribution(
        employee_id=employee.id,
        document_number=employee.document_number,
        name=employee.name,
        salary=employee.salary,
        health=health,
        pension=pension,
        arl=arl,
        total=health + pension + arl,
    )


def generate_pila(
    period: str,
    employees: Sequence[Employee],
    arl_rate: float = DEFAULT_ARL_RATE,
) -> PILASubmission:
    """
    Genera la planilla PILA de un período.

    Los totales se calculan sobre la suma de salarios:
        total_health  = round(Σ salario × 0.085)
        total_pension = round(Σ salario × 0.12)
        total_arl     = round(Σ salario × arl_rate)

    Args:
        period: Período YYYY-MM
        employees: Empleados con salario mensual (al menos uno)
        arl_rate: Tarifa ARL; por defecto clase V (6.96%)

    Returns:
        PILASubmission en estado GENERADO

    Raises:
        InvalidInputError: Período mal formado, lista vacía, salario
            negativo o no finito, o tarifa ARL fuera de [0, 1]
    """
    validate_period(period)

    if not employees:
        raise InvalidInputError("La planilla PILA requiere al menos un empleado")
    if not 0 <= arl_rate <= 1:
        raise InvalidInputError("La tarifa ARL debe estar entre 0 y 1")

    for employee in employees:
        if not math.isfinite(employee.salary):
            raise InvalidInputError(
                f"Salario no finito para el empleado {employee.name or employee.id}"
            )
        if employee.salary < 0:
            raise InvalidInputError(
                f"Salario negativo para el empleado {employee.name or employee.id}"
            )

    total_salary = sum(e.salary for e in employees)
    total_health = round_cop(total_salary * HEALTH_EMPLOYER_RATE)
    total_pension = round_cop(total_salary * PENSION_EMPLOYER_RATE)
    total_arl = round_cop(total_salary * arl_rate)

    submission = PILASubmission(
        period=period,
        employee_count=len(employees),
        total_salary=total_salary,
        total_health=total_health,
        total_pension=total_pension,
        total_arl=total_arl,
        total_contributions=total_health + total_pension + total_arl,
        arl_rate=arl_rate,
        contributions=[employee_contribution(e, arl_rate) for e in employees],
    )

    logger.info(
        "PILA %s generada: %d empleados, aportes %d",
        period, submission.employee_count, submission.total_contributions,
    )
    return submission
