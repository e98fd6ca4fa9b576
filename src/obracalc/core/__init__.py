"""Módulos de cálculo: simulador de costos y aportes PILA."""

from obracalc.core.estimation import (
    raw_cost,
    resolve_item,
    calculate,
    cascade_breakdown,
)

from obracalc.core.pila import (
    generate_pila,
    employee_contribution,
    resolve_monthly_salary,
    validate_period,
    advance_status,
    liquidate_employee,
    liquidate_period,
    load_payroll_parameters,
)

__all__ = [
    # Simulador
    "raw_cost",
    "resolve_item",
    "calculate",
    "cascade_breakdown",
    # PILA
    "generate_pila",
    "employee_contribution",
    "resolve_monthly_salary",
    "validate_period",
    "advance_status",
    "liquidate_employee",
    "liquidate_period",
    "load_payroll_parameters",
]
