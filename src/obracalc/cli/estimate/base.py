"""
Comandos del simulador de costos: plantillas, presets y cálculo.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from obracalc.config import DEFAULT_DURATION_DAYS
from obracalc.core.estimation import calculate
from obracalc.database import get_database
from obracalc.exceptions import InvalidInputError, TemplateNotFoundError
from obracalc.models import EstimationItem
from obracalc.reports import estimation_to_csv, export_to_json
from obracalc.cli.common import get_catalog, load_items_file, parse_item_spec
from obracalc.cli.labels import DEFAULT_LOCALE, labels_for
from obracalc.cli.theme import (
    get_console, print_error, print_info, print_success, print_warning,
    print_estimation, print_presets_table, print_template_prices,
    print_templates_table,
)


def estimate_templates(
    detail: Annotated[bool, typer.Option("--detail", "-d", help="Mostrar precios unitarios")] = False,
) -> None:
    """
    Lista las plantillas de costos disponibles.

    Ejemplo:
        obracalc estimate templates --detail
    """
    catalog = get_catalog()
    templates = catalog.list_templates()

    console = get_console()
    console.print()
    print_templates_table(templates, title=f"Plantillas ({len(templates)})")

    if detail:
        for template in templates:
            console.print()
            print_template_prices(template)
    console.print()


def estimate_presets(
    template_id: Annotated[str, typer.Argument(help="ID de la plantilla")],
) -> None:
    """
    Lista las configuraciones predefinidas de una plantilla.

    Ejemplo:
        obracalc estimate presets construction
    """
    try:
        presets = get_catalog().get_presets(template_id)
    except TemplateNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not presets:
        print_info(f"La plantilla '{template_id}' no tiene presets.")
        return

    console = get_console()
    console.print()
    print_presets_table(presets, title=f"Presets - {template_id}")
    console.print()


def _collect_items(
    template_id: str,
    preset: Optional[str],
    items_file: Optional[str],
    item_specs: Optional[list[str]],
) -> list[EstimationItem]:
    """Une los ítems del preset, del archivo y de --item, en ese orden."""
    items: list[EstimationItem] = []

    if preset:
        found = get_catalog().get_preset(template_id, preset)
        if found is None:
            raise InvalidInputError(f"Preset '{preset}' no encontrado para '{template_id}'")
        items.extend(found.items)

    if items_file:
        items.extend(load_items_file(items_file))

    for spec in item_specs or []:
        items.append(parse_item_spec(spec))

    return items


def estimate_calculate(
    template_id: Annotated[str, typer.Argument(help="ID de la plantilla (construction, welding)")],
    item: Annotated[Optional[list[str]], typer.Option("--item", "-i", help="Ítem categoria:subcategoria:cantidad (repetible)")] = None,
    items_file: Annotated[Optional[str], typer.Option("--file", "-f", help="Archivo YAML/JSON con ítems")] = None,
    preset: Annotated[Optional[str], typer.Option("--preset", "-p", help="Nombre de un preset de la plantilla")] = None,
    days: Annotated[int, typer.Option("--days", "-d", help="Duración del proyecto en días")] = DEFAULT_DURATION_DAYS,
    no_benefits: Annotated[bool, typer.Option("--no-benefits", help="No aplicar factor prestacional")] = False,
    save: Annotated[Optional[str], typer.Option("--save", "-s", help="Guardar con este nombre de proyecto")] = None,
    client: Annotated[str, typer.Option("--client", "-c", help="Cliente (al guardar)")] = "",
    notes: Annotated[Optional[str], typer.Option("--notes", help="Notas (al guardar)")] = None,
    csv_out: Annotated[Optional[Path], typer.Option("--csv", help="Exportar detalle de ítems a CSV")] = None,
    json_out: Annotated[Optional[Path], typer.Option("--json", help="Exportar resultado completo a JSON")] = None,
    lang: Annotated[str, typer.Option("--lang", "-l", help="Idioma de salida (es, en)")] = DEFAULT_LOCALE,
) -> None:
    """
    Calcula la estimación de costos de un proyecto.

    Los ítems pueden venir de un preset, de un archivo y de --item;
    se combinan en ese orden.

    Ejemplo:
        obracalc estimate calculate construction -i materials:concrete:10 -i labor:mason:100 -d 30
        obracalc estimate calculate welding --preset "Tanque 1000L" --save "Tanque planta norte"
    """
    try:
        labels = labels_for(lang)
        template = get_catalog().get_template(template_id)
        items = _collect_items(template_id, preset, items_file, item)
        estimation = calculate(
            template,
            items,
            duration_days=days,
            apply_benefits=not no_benefits,
        )
    except (ValueError, TemplateNotFoundError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not items:
        print_warning("Sin ítems: la estimación queda en cero.")

    print_estimation(estimation, labels)

    if csv_out:
        estimation_to_csv(estimation, csv_out)
        print_success(f"Detalle exportado a {csv_out}")

    if json_out:
        export_to_json(estimation, json_out)
        print_success(f"Estimación exportada a {json_out}")

    if save:
        record = get_database().save_estimation(
            project_name=save,
            estimation=estimation,
            client_name=client,
            notes=notes,
        )
        print_success(f"Estimación guardada: {record['id']}")
        print_info(f"Usa 'obracalc estimate show {record['id']}' para verla.")
