"""
Exportación de resultados a CSV y JSON.

Incluye el formato de planilla PILA compatible con UGPP.
"""

import json
from pathlib import Path
from typing import Any

from obracalc.models import CostEstimation, EmployeeLiquidation


# ============================================================================
# Exportación genérica
# ============================================================================

def format_csv(
    headers: list[str],
    rows: list[list[Any]],
    delimiter: str = ",",
) -> str:
    """
    Construye el contenido CSV en memoria.

    Las líneas se separan con '\\n' y no hay salto final.
    """
    lines = [delimiter.join(str(h) for h in headers)]
    for row in rows:
        lines.append(delimiter.join(str(v) for v in row))
    return "\n".join(lines)


def export_to_csv(
    headers: list[str],
    rows: list[list[Any]],
    filepath: str | Path,
    delimiter: str = ",",
    bom: bool = False,
) -> Path:
    """
    Exporta datos a CSV.

    Args:
        headers: Lista de encabezados
        rows: Lista de filas (cada fila es una lista de valores)
        filepath: Ruta del archivo
        delimiter: Delimitador (default: coma)
        bom: Escribir marca BOM UTF-8 (para abrir en Excel)

    Returns:
        Ruta del archivo escrito
    """
    return write_csv_content(format_csv(headers, rows, delimiter), filepath, bom)


def write_csv_content(content: str, filepath: str | Path, bom: bool = False) -> Path:
    """Escribe contenido CSV ya construido, con salto de línea final."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    encoding = "utf-8-sig" if bom else "utf-8"
    with open(filepath, "w", encoding=encoding, newline="") as f:
        f.write(content + "\n")

    return filepath


def export_to_json(data: Any, filepath: str | Path) -> Path:
    """Exporta un diccionario o modelo Pydantic a JSON indentado."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    return filepath


# ============================================================================
# Estimaciones
# ============================================================================

ESTIMATION_CSV_HEADERS = [
    "Item",
    "Categoria",
    "Subcategoria",
    "Descripcion",
    "Cantidad",
    "Unidad",
    "Costo_Unitario",
    "Costo_Total",
    "Resuelto",
]


def estimation_to_csv(estimation: CostEstimation, filepath: str | Path) -> Path:
    """Exporta el detalle de ítems de una estimación a CSV."""
    rows = [
        [
            d.index + 1,
            d.category.value,
            d.subcategory,
            (d.name or "").replace(",", ""),
            d.quantity,
            d.unit or "",
            d.cost_per_unit,
            d.total_cost,
            "si" if d.resolved else "no",
        ]
        for d in estimation.items_detail
    ]
    return export_to_csv(ESTIMATION_CSV_HEADERS, rows, filepath)


# ============================================================================
# Planilla PILA (formato UGPP)
# ============================================================================

PILA_CSV_DELIMITER = ";"

PILA_CSV_HEADERS = [
    "TIPO_DOCUMENTO",
    "NUMERO_DOCUMENTO",
    "APELLIDOS_NOMBRES",
    "DIAS_COTIZADOS",
    "IBC",
    "SALUD_EMPLEADO",
    "SALUD_EMPLEADOR",
    "PENSION_EMPLEADO",
    "PENSION_EMPLEADOR",
    "ARL",
    "CLASE_RIESGO_ARL",
    "CESANTIAS",
    "PRIMA_SERVICIOS",
    "VACACIONES",
    "SENA",
    "ICBF",
    "CAJAS_COMPENSACION",
    "TOTAL_EMPLEADO",
    "TOTAL_EMPLEADOR",
]


def pila_rows(liquidations: list[EmployeeLiquidation]) -> list[list[Any]]:
    """Filas UGPP, una por empleado, en el orden de PILA_CSV_HEADERS."""
    return [
        [
            liq.document_type,
            liq.document_number,
            liq.names.replace(",", ""),
            liq.days_worked,
            liq.ibc,
            liq.health_employee,
            liq.health_employer,
            liq.pension_employee,
            liq.pension_employer,
            liq.arl,
            liq.arl_class.value,
            liq.cesantias,
            liq.prima,
            liq.vacaciones,
            liq.sena,
            liq.icbf,
            liq.cajas,
            liq.total_employee,
            liq.total_employer,
        ]
        for liq in liquidations
    ]


def pila_csv_content(liquidations: list[EmployeeLiquidation]) -> str:
    """Contenido CSV de la planilla (sin BOM), tal como se guarda en la BD."""
    return format_csv(PILA_CSV_HEADERS, pila_rows(liquidations), PILA_CSV_DELIMITER)


def pila_to_csv(liquidations: list[EmployeeLiquidation], filepath: str | Path) -> Path:
    """
    Escribe la planilla PILA en formato UGPP.

    Delimitador ';' y codificación UTF-8 con BOM.
    """
    return export_to_csv(
        PILA_CSV_HEADERS,
        pila_rows(liquidations),
        filepath,
        delimiter=PILA_CSV_DELIMITER,
        bom=True,
    )


def pila_filename(period: str) -> str:
    """Nombre de archivo por defecto: pila_YYYY_MM.csv"""
    return f"pila_{period.replace('-', '_')}.csv"
