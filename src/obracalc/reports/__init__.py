"""
Módulo de exportación de resultados.
"""

from obracalc.reports.exporters import (
    ESTIMATION_CSV_HEADERS,
    PILA_CSV_DELIMITER,
    PILA_CSV_HEADERS,
    estimation_to_csv,
    export_to_csv,
    export_to_json,
    format_csv,
    pila_csv_content,
    pila_filename,
    pila_rows,
    pila_to_csv,
    write_csv_content,
)

__all__ = [
    "ESTIMATION_CSV_HEADERS",
    "PILA_CSV_DELIMITER",
    "PILA_CSV_HEADERS",
    "estimation_to_csv",
    "export_to_csv",
    "export_to_json",
    "format_csv",
    "pila_csv_content",
    "pila_filename",
    "pila_rows",
    "pila_to_csv",
    "write_csv_content",
]
