"""
Clases base para modelos Pydantic.

Proporciona identificadores cortos y timestamps para los registros
que se guardan (planillas PILA, estimaciones).
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


def generate_id() -> str:
    """Genera un ID corto único (8 caracteres)."""
    return uuid.uuid4().hex[:8]


def generate_timestamp() -> str:
    """Genera timestamp ISO actual."""
    return datetime.now().isoformat()


class RecordModel(BaseModel):
    """
    Registro con ID y fecha de creación.

    Los resultados puros de cálculo (CostEstimation) no heredan de aquí:
    no deben depender del reloj.
    """

    id: str = Field(default_factory=generate_id)
    created_at: str = Field(default_factory=generate_timestamp)
