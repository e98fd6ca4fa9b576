"""
Comandos para estimaciones guardadas.
"""

from typing import Annotated

import typer

from obracalc.database import get_database
from obracalc.cli.labels import DEFAULT_LOCALE, labels_for
from obracalc.cli.theme import (
    get_console, print_error, print_field, print_info, print_success,
    print_estimation, print_estimations_table,
)


def estimate_list() -> None:
    """
    Lista las estimaciones guardadas, más recientes primero.
    """
    estimations = get_database().list_estimations()

    if not estimations:
        print_info("No hay estimaciones guardadas.")
        print_info("Usa 'obracalc estimate calculate ... --save <nombre>' para guardar una.")
        return

    console = get_console()
    console.print()
    print_estimations_table(estimations, title=f"Estimaciones ({len(estimations)})")
    console.print()


def estimate_show(
    estimation_id: Annotated[str, typer.Argument(help="ID de la estimación (parcial o completo)")],
    no_items: Annotated[bool, typer.Option("--no-items", help="Omitir detalle de ítems")] = False,
    lang: Annotated[str, typer.Option("--lang", "-l", help="Idioma de salida (es, en)")] = DEFAULT_LOCALE,
) -> None:
    """
    Muestra una estimación guardada.
    """
    try:
        labels = labels_for(lang)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    db = get_database()
    record = db.get_estimation(estimation_id)
    if record is None:
        print_error(f"Estimación '{estimation_id}' no encontrada.")
        raise typer.Exit(1)

    estimation = db.get_estimation_model(record["id"])

    console = get_console()
    console.print()
    print_field("Proyecto", record["project_name"])
    if record["client_name"]:
        print_field("Cliente", record["client_name"])
    print_field("ID", record["id"])
    print_field("Estado", record["status"])
    if record["notes"]:
        print_field("Notas", record["notes"])

    print_estimation(estimation, labels, show_items=not no_items)


def estimate_duplicate(
    estimation_id: Annotated[str, typer.Argument(help="ID de la estimación a duplicar")],
) -> None:
    """
    Duplica una estimación como borrador nuevo.
    """
    copy = get_database().duplicate_estimation(estimation_id)
    if copy is None:
        print_error(f"Estimación '{estimation_id}' no encontrada.")
        raise typer.Exit(1)

    print_success(f"Estimación duplicada: {copy['id']} ({copy['project_name']})")


def estimate_delete(
    estimation_id: Annotated[str, typer.Argument(help="ID de la estimación a eliminar")],
    force: Annotated[bool, typer.Option("--force", "-f", help="No pedir confirmación")] = False,
) -> None:
    """
    Elimina una estimación guardada.

    Esta acción es irreversible.
    """
    db = get_database()
    record = db.get_estimation(estimation_id)

    if record is None:
        print_error(f"Estimación '{estimation_id}' no encontrada.")
        raise typer.Exit(1)

    if not force:
        msg = f"¿Eliminar estimación '{record['project_name']}'?"
        if not typer.confirm(msg, default=False):
            print_info("Cancelado.")
            raise typer.Exit(0)

    db.delete_estimation(record["id"])
    print_success(f"Estimación '{record['project_name']}' eliminada.")
