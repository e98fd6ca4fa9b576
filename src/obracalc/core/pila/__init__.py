"""
Aportes a seguridad social (PILA).

- Planilla del período: salud, pensión y ARL patronales
- Liquidación detallada por empleado (formato UGPP)
- Estados de la planilla
"""

# Planilla
from .contributions import (
    PERIOD_PATTERN,
    round_cop,
    validate_period,
    resolve_monthly_salary,
    employee_contribution,
    generate_pila,
)

# Estados
from .status import (
    ALLOWED_TRANSITIONS,
    can_transition,
    advance_status,
)

# Liquidación detallada
from .liquidation import (
    PayrollParameters,
    PAYROLL_PARAMETERS,
    load_payroll_parameters,
    liquidate_employee,
    liquidate_period,
)

__all__ = [
    # Planilla
    "PERIOD_PATTERN",
    "round_cop",
    "validate_period",
    "resolve_monthly_salary",
    "employee_contribution",
    "generate_pila",
    # Estados
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "advance_status",
    # Liquidación
    "PayrollParameters",
    "PAYROLL_PARAMETERS",
    "load_payroll_parameters",
    "liquidate_employee",
    "liquidate_period",
]
