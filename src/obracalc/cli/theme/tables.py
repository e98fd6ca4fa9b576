"""
Funciones para crear e imprimir tablas Rich.
"""

from typing import Mapping

from rich.table import Table
from rich.text import Text
from rich import box

from obracalc.cli.theme.palette import get_console, get_palette
from obracalc.cli.theme.printing import format_cop
from obracalc.cli.theme.styled import styled_status
from obracalc.models import CostTemplate, ItemDetail, ProjectPreset


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada para resultados."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_templates_table(templates: list[CostTemplate], title: str = None) -> None:
    """Imprime las plantillas disponibles."""
    console = get_console()
    p = get_palette()

    table = create_results_table(title, [
        ("ID", "left"),
        ("Nombre", "left"),
        ("Precios", "right"),
        ("Descripción", "left"),
    ])
    for t in templates:
        table.add_row(
            Text(t.id, style=f"bold {p.accent}"),
            t.name,
            str(t.n_entries),
            Text(t.description, style=p.muted),
        )
    console.print(table)


def print_template_prices(template: CostTemplate) -> None:
    """Imprime los precios unitarios de una plantilla por categoría."""
    console = get_console()
    p = get_palette()

    table = create_results_table(f"Precios - {template.name}", [
        ("Categoría", "left"),
        ("Subcategoría", "left"),
        ("Descripción", "left"),
        ("Unidad", "center"),
        ("Costo unitario", "right"),
    ])
    for category, entries in template.categories.items():
        for key, entry in entries.items():
            table.add_row(
                Text(category.value, style=p.secondary),
                key,
                entry.name,
                entry.unit,
                format_cop(entry.cost_per_unit),
            )
    console.print(table)


def print_presets_table(presets: list[ProjectPreset], title: str = None) -> None:
    """Imprime las configuraciones predefinidas de una plantilla."""
    console = get_console()

    table = create_results_table(title, [
        ("Nombre", "left"),
        ("Ítems", "right"),
        ("Contenido", "left"),
    ])
    for preset in presets:
        content = ", ".join(
            f"{item.subcategory} x{item.quantity:g}" for item in preset.items
        )
        table.add_row(preset.name, str(len(preset.items)), content)
    console.print(table)


def print_items_table(items: list[ItemDetail], labels: Mapping[str, str]) -> None:
    """Imprime el detalle de ítems resueltos de una estimación."""
    console = get_console()
    p = get_palette()

    table = create_results_table(labels["items_detail"], [
        ("#", "right"),
        (labels["category"], "left"),
        (labels["subcategory"], "left"),
        (labels["description"], "left"),
        (labels["quantity"], "right"),
        (labels["unit"], "center"),
        (labels["unit_cost"], "right"),
        (labels["item_total"], "right"),
    ])
    for d in items:
        style = None if d.resolved else p.warning
        table.add_row(
            str(d.index + 1),
            labels[d.category.value],
            d.subcategory,
            d.name or "-",
            f"{d.quantity:g}",
            d.unit or "-",
            format_cop(d.cost_per_unit),
            format_cop(d.total_cost),
            style=style,
        )
    console.print(table)


def print_estimations_table(estimations: list[dict], title: str = None) -> None:
    """Imprime estimaciones guardadas (dicts del repositorio)."""
    console = get_console()
    p = get_palette()

    table = create_results_table(title, [
        ("ID", "left"),
        ("Proyecto", "left"),
        ("Cliente", "left"),
        ("Plantilla", "left"),
        ("Total", "right"),
        ("Estado", "center"),
        ("Fecha", "left"),
    ])
    for e in estimations:
        table.add_row(
            Text(e["id"], style=f"bold {p.accent}"),
            e["project_name"],
            e["client_name"] or "-",
            e["template_id"],
            format_cop(e["total"]),
            e["status"],
            e["created_at"][:10],
        )
    console.print(table)


def print_pila_table(
    submissions: list[dict],
    labels: Mapping[str, str],
    title: str = None,
) -> None:
    """Imprime planillas PILA guardadas."""
    console = get_console()

    table = create_results_table(title, [
        (labels["period"], "left"),
        (labels["employees"], "right"),
        (labels["salary"], "right"),
        (labels["contributions"], "right"),
        (labels["status"], "center"),
        (labels["created"], "left"),
    ])
    for s in submissions:
        table.add_row(
            s["period"],
            str(s["employee_count"]),
            format_cop(s["total_salary"]),
            format_cop(s["total_contributions"]),
            styled_status(s["status"]),
            s["created_at"][:10],
        )
    console.print(table)


def print_contributions_table(contributions: list[dict], labels: Mapping[str, str]) -> None:
    """Imprime los aportes por empleado de una planilla."""
    console = get_console()

    table = create_results_table(labels["contributions"], [
        (labels["document"], "left"),
        (labels["employee"], "left"),
        (labels["salary"], "right"),
        (labels["health"], "right"),
        (labels["pension"], "right"),
        (labels["arl"], "right"),
        (labels["total"], "right"),
    ])
    for c in contributions:
        table.add_row(
            c["document_number"] or "-",
            c["name"] or "-",
            format_cop(c["salary"]),
            format_cop(c["health"]),
            format_cop(c["pension"]),
            format_cop(c["arl"]),
            format_cop(c["total"]),
        )
    console.print(table)
