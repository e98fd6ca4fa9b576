"""
Utilidades comunes para los comandos CLI.

Lectura de archivos de entrada (YAML o JSON) y catálogo de plantillas.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from obracalc.core.pila import resolve_monthly_salary
from obracalc.data import TemplateCatalog
from obracalc.exceptions import InvalidInputError
from obracalc.models import Employee, EstimationItem

logger = logging.getLogger(__name__)


# Instancia global del catálogo
_catalog: Optional[TemplateCatalog] = None


def get_catalog() -> TemplateCatalog:
    """Obtiene el catálogo de plantillas (singleton)."""
    global _catalog
    if _catalog is None:
        _catalog = TemplateCatalog()
    return _catalog


def load_data_file(path: str | Path) -> Any:
    """
    Lee un archivo YAML o JSON según su extensión.

    Raises:
        InvalidInputError: Si el archivo no existe o no se puede leer
    """
    path = Path(path)
    if not path.exists():
        raise InvalidInputError(f"Archivo no encontrado: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise InvalidInputError(f"No se pudo leer {path.name}: {e}") from e


def _records(data: Any, key: str) -> list[dict]:
    """Acepta una lista o un mapeo con la lista bajo `key`."""
    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        raise InvalidInputError(f"Se esperaba una lista de '{key}'")
    return data


def parse_item_spec(spec: str) -> EstimationItem:
    """
    Convierte 'categoria:subcategoria[:cantidad]' en un ítem.

    Ejemplo:
        materials:concrete:12 -> 12 m3 de concreto
    """
    parts = spec.split(":")
    if len(parts) not in (2, 3):
        raise InvalidInputError(
            f"Ítem inválido: {spec!r}. Use categoria:subcategoria[:cantidad]"
        )

    data = {"category": parts[0].strip(), "subcategory": parts[1].strip()}
    if len(parts) == 3:
        try:
            data["quantity"] = float(parts[2])
        except ValueError:
            raise InvalidInputError(f"Cantidad inválida en {spec!r}") from None

    try:
        return EstimationItem(**data)
    except ValidationError as e:
        raise InvalidInputError(f"Ítem inválido {spec!r}: {e.errors()[0]['msg']}") from e


def load_items_file(path: str | Path) -> list[EstimationItem]:
    """
    Lee los ítems de una estimación.

    Formato YAML:
    ```yaml
    items:
      - category: materials
        subcategory: concrete
        quantity: 12
    ```
    """
    records = _records(load_data_file(path), "items")
    try:
        return [EstimationItem(**r) for r in records]
    except (TypeError, ValidationError) as e:
        raise InvalidInputError(f"Ítems inválidos en {path}: {e}") from e


def load_employees_file(path: str | Path) -> list[Employee]:
    """
    Lee la nómina de un período.

    Cada empleado define `salary` (o `monthly_salary`) o bien
    `hourly_rate`, que se convierte a mensual con 192 horas.

    Formato YAML:
    ```yaml
    employees:
      - name: Juan Pérez
        document_number: "1010101"
        monthly_salary: 2000000
        arl_risk_class: V
      - name: Ana Gómez
        hourly_rate: 15000
    ```
    """
    employees = []
    for r in _records(load_data_file(path), "employees"):
        if not isinstance(r, dict):
            raise InvalidInputError(f"Empleado inválido en {path}: {r!r}")
        data = dict(r)
        monthly = data.pop("monthly_salary", None) or data.pop("salary", None)
        hourly = data.pop("hourly_rate", None)
        data["salary"] = resolve_monthly_salary(monthly, hourly)
        for key in ("id", "document_number", "name"):
            if data.get(key) is not None:
                data[key] = str(data[key])
        try:
            employees.append(Employee(**data))
        except ValidationError as e:
            raise InvalidInputError(f"Empleado inválido en {path}: {e}") from e

    logger.debug("Leídos %d empleados de %s", len(employees), path)
    return employees
