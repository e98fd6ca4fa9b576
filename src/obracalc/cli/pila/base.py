"""
Comandos de planillas PILA: generación, listado, estados y exportación.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from obracalc.config import DEFAULT_ARL_RATE, PILAStatus
from obracalc.core.pila import PAYROLL_PARAMETERS, generate_pila, liquidate_period
from obracalc.database import get_database
from obracalc.exceptions import InvalidStatusTransitionError, SubmissionExistsError
from obracalc.reports import pila_csv_content, pila_filename, pila_to_csv, write_csv_content
from obracalc.cli.common import load_employees_file
from obracalc.cli.labels import DEFAULT_LOCALE, labels_for
from obracalc.cli.theme import (
    get_console, print_contributions_table, print_error, print_field,
    print_info, print_pila_summary, print_pila_table, print_success,
    print_warning, format_cop,
)


def pila_generate(
    period: Annotated[str, typer.Argument(help="Período YYYY-MM")],
    employees_file: Annotated[str, typer.Argument(help="Archivo YAML/JSON con empleados")],
    arl_rate: Annotated[float, typer.Option("--arl-rate", help="Tarifa ARL (fracción)")] = DEFAULT_ARL_RATE,
    csv_out: Annotated[Optional[Path], typer.Option("--csv", help="Escribir archivo UGPP en esta ruta")] = None,
    save: Annotated[bool, typer.Option("--save/--no-save", help="Guardar la planilla en la base de datos")] = True,
    lang: Annotated[str, typer.Option("--lang", "-l", help="Idioma de salida (es, en)")] = DEFAULT_LOCALE,
) -> None:
    """
    Genera la planilla PILA de un período.

    Calcula salud, pensión y ARL patronales de cada empleado. Si hay
    parámetros de nómina para el año del período, también se genera el
    archivo detallado en formato UGPP.

    Ejemplo:
        obracalc pila generate 2025-09 nomina.yaml --csv pila_2025_09.csv
    """
    try:
        labels = labels_for(lang)
        employees = load_employees_file(employees_file)
        submission = generate_pila(period, employees, arl_rate=arl_rate)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    db = get_database() if save else None
    if db is not None and db.get_pila(period) is not None:
        print_error(str(SubmissionExistsError(period)))
        raise typer.Exit(1)

    print_pila_summary(submission.model_dump(), labels)
    print_contributions_table([c.model_dump() for c in submission.contributions], labels)

    csv_content = None
    file_path = None
    year = int(period[:4])
    if year in PAYROLL_PARAMETERS:
        liquidations = liquidate_period(employees, year)
        csv_content = pila_csv_content(liquidations)
        if csv_out:
            pila_to_csv(liquidations, csv_out)
            file_path = str(csv_out)
            print_success(f"Archivo UGPP escrito en {csv_out}")
    else:
        print_warning(f"Sin parámetros de nómina para {year}: no se genera archivo UGPP.")

    if db is not None:
        db.save_pila(submission, csv_content=csv_content, file_path=file_path)
        print_success(f"Planilla {period} guardada ({submission.status.value}).")


def pila_list(
    status: Annotated[Optional[PILAStatus], typer.Option("--status", help="Filtrar por estado")] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Filtrar por año")] = None,
    lang: Annotated[str, typer.Option("--lang", "-l", help="Idioma de salida (es, en)")] = DEFAULT_LOCALE,
) -> None:
    """
    Lista las planillas PILA guardadas.
    """
    try:
        labels = labels_for(lang)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    db = get_database()
    submissions = db.list_pila(status=status, year=year)

    if not submissions:
        print_info("No hay planillas PILA guardadas.")
        return

    summary = db.pila_summary(submissions)

    console = get_console()
    console.print()
    print_pila_table(submissions, labels, title=f"{labels['pila']} ({summary['total_submissions']})")
    print_field(labels["employees"], summary["total_employees"])
    print_field(labels["contributions"], format_cop(summary["total_contributions"]))
    print_field(
        labels["status"],
        ", ".join(f"{k}: {v}" for k, v in sorted(summary["status_counts"].items())),
    )
    console.print()


def pila_status(
    period: Annotated[str, typer.Argument(help="Período YYYY-MM")],
    new_status: Annotated[PILAStatus, typer.Argument(help="Nuevo estado")],
) -> None:
    """
    Cambia el estado de una planilla.

    Secuencia: PENDIENTE -> GENERADO -> ENVIADO -> PROCESADO

    Ejemplo:
        obracalc pila status 2025-09 ENVIADO
    """
    try:
        updated = get_database().update_pila_status(period, new_status)
    except InvalidStatusTransitionError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if updated is None:
        print_error(f"No existe planilla para el período {period}.")
        raise typer.Exit(1)

    print_success(f"Planilla {period}: {updated['status']}")


def pila_export(
    period: Annotated[str, typer.Argument(help="Período YYYY-MM")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo CSV de salida")] = None,
) -> None:
    """
    Exporta el archivo UGPP guardado de un período.

    Ejemplo:
        obracalc pila export 2025-09 -o exports/pila_2025_09.csv
    """
    record = get_database().get_pila(period)
    if record is None:
        print_error(f"No existe planilla para el período {period}.")
        raise typer.Exit(1)

    if not record["csv_content"]:
        print_error(f"La planilla {period} no tiene archivo UGPP.")
        raise typer.Exit(1)

    output = output or Path(pila_filename(period))
    write_csv_content(record["csv_content"], output, bom=True)
    print_success(f"Archivo exportado: {output}")
