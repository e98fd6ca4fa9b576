"""Modelos Pydantic para configuración y parámetros de cálculo."""

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CostCategory(str, Enum):
    """Categorías de costo directo."""
    MATERIALS = "materials"
    LABOR = "labor"
    EQUIPMENT = "equipment"


class ARLRiskClass(str, Enum):
    """Clases de riesgo ARL (Decreto 1295 de 1994)."""
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"


class PILAStatus(str, Enum):
    """Estados de una planilla PILA."""
    PENDIENTE = "PENDIENTE"
    GENERADO = "GENERADO"
    ENVIADO = "ENVIADO"
    PROCESADO = "PROCESADO"


class EstimationStatus(str, Enum):
    """Estados de una estimación guardada."""
    DRAFT = "draft"


# ============================================================================
# Factores del simulador de costos
# ============================================================================

class CalculationFactors(BaseModel):
    """
    Factores aplicados sobre los costos directos.

    overhead, profit y contingency se aplican en cascada: cada uno sobre
    el subtotal acumulado que incluye los anteriores.
    """
    labor_benefit_factor: float = Field(
        default=1.58, ge=1, description="Factor prestacional colombiano"
    )
    overhead_percentage: float = Field(
        default=0.15, ge=0, le=1, description="Gastos generales (fracción)"
    )
    profit_margin: float = Field(
        default=0.20, ge=0, le=1, description="Utilidad esperada (fracción)"
    )
    contingency: float = Field(
        default=0.10, ge=0, le=1, description="Imprevistos (fracción)"
    )

    model_config = {"allow_inf_nan": False}


DEFAULT_FACTORS = CalculationFactors()

DEFAULT_DURATION_DAYS = 30


# ============================================================================
# Aportes PILA
# ============================================================================

# Aportes patronales sobre salario
HEALTH_EMPLOYER_RATE = 0.085
PENSION_EMPLOYER_RATE = 0.12

# Tarifas ARL por clase de riesgo
ARL_RATES = {
    ARLRiskClass.I: 0.00522,
    ARLRiskClass.II: 0.01044,
    ARLRiskClass.III: 0.02436,
    ARLRiskClass.IV: 0.04350,
    ARLRiskClass.V: 0.06960,
}

DEFAULT_ARL_CLASS = ARLRiskClass.V
DEFAULT_ARL_RATE = ARL_RATES[DEFAULT_ARL_CLASS]

# Horas mensuales para convertir tarifa por hora a salario mensual
MONTHLY_HOURS = 192


# ============================================================================
# Rutas
# ============================================================================

HOME_ENV_VAR = "OBRACALC_HOME"


def get_data_dir() -> Path:
    """Directorio de datos del usuario (~/.obracalc o $OBRACALC_HOME)."""
    custom = os.environ.get(HOME_ENV_VAR)
    if custom:
        return Path(custom)
    return Path.home() / ".obracalc"
