"""
Funciones que imprimen directamente a la consola.

Las funciones de resultados reciben la tabla de textos del idioma
(ver obracalc.cli.labels) en lugar de leer un estado global.
"""

from typing import Mapping

from rich.panel import Panel
from rich.text import Text
from rich import box

from obracalc.cli.theme.palette import get_console, get_palette
from obracalc.cli.theme.styled import (
    styled_header, styled_label, styled_success, styled_warning,
    styled_error, styled_info, styled_status,
)
from obracalc.models import CostEstimation


def format_cop(value: float, decimals: int = 0) -> str:
    """
    Formatea un monto en pesos colombianos.

    Usa punto como separador de miles y coma decimal: 1580000 -> "$1.580.000".
    """
    text = f"{abs(value):,.{decimals}f}"
    text = text.translate(str.maketrans({",": ".", ".": ","}))
    sign = "-" if value < 0 else ""
    return f"{sign}${text}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Formatea un porcentaje ya expresado en unidades de 0 a 100."""
    return f"{value:.{decimals}f}%"


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Imprime un campo con valor."""
    console = get_console()
    prefix = " " * indent
    console.print(prefix, styled_label(label, value, unit))


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    console = get_console()
    console.print(styled_success(text))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    console = get_console()
    console.print(styled_warning(text))


def print_error(text: str) -> None:
    """Imprime error."""
    console = get_console()
    console.print(styled_error(text))


def print_info(text: str) -> None:
    """Imprime información."""
    console = get_console()
    console.print(styled_info(text))


# ============================================================================
# Resultados del simulador
# ============================================================================

def print_cost_breakdown(estimation: CostEstimation, labels: Mapping[str, str]) -> None:
    """
    Imprime el desglose en cascada dentro de un panel.

    Args:
        estimation: Resultado del simulador
        labels: Tabla de textos del idioma
    """
    console = get_console()
    p = get_palette()
    b = estimation.cost_breakdown
    f = estimation.calculation_factors

    rows = [
        (labels["materials"], b.materials, None),
        (labels["labor"], b.labor, None),
        (labels["equipment"], b.equipment, None),
        (labels["direct_cost"], b.direct_cost, "bold"),
        (f"{labels['overhead']} ({f.overhead_percentage:.0%})", b.overhead, None),
        (labels["subtotal"], b.subtotal, "bold"),
        (f"{labels['profit']} ({f.profit_margin:.0%})", b.profit, None),
        (f"{labels['contingency']} ({f.contingency:.0%})", b.contingency, None),
    ]

    width = max(len(name) for name, _, _ in rows) + 2
    content = Text()
    for name, value, weight in rows:
        content.append(f"{name:<{width}}", style=f"{weight or ''} {p.label}".strip())
        content.append(f"{format_cop(value):>18}\n", style=f"bold {p.number}")
    content.append(f"{labels['total']:<{width}}", style=f"bold {p.accent}")
    content.append(f"{format_cop(b.total):>18}", style=f"bold {p.accent}")

    console.print(Panel(
        content,
        title=f"[bold {p.primary}]{labels['breakdown']}[/]",
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_estimation(
    estimation: CostEstimation,
    labels: Mapping[str, str],
    show_items: bool = True,
) -> None:
    """Imprime información, desglose, resumen y detalle de una estimación."""
    from obracalc.cli.theme.tables import print_items_table

    console = get_console()
    info = estimation.project_info
    summary = estimation.summary

    console.print()
    print_header(f"{labels['template']}: {info.template_name}", info.template_id)
    print_field(labels["duration"], info.duration_days, labels["days"])
    print_field(labels["items"], info.items_count)
    print_field(
        labels["benefits"],
        f"{estimation.calculation_factors.labor_benefit_factor} "
        f"({labels['applied'] if info.benefits_applied else labels['not_applied']})",
    )
    console.print()

    print_cost_breakdown(estimation, labels)

    print_field(labels["cost_per_day"], format_cop(summary.cost_per_day, 2))
    print_field(
        labels["share"],
        f"{labels['materials']} {format_percent(summary.materials_percentage)} | "
        f"{labels['labor']} {format_percent(summary.labor_percentage)} | "
        f"{labels['equipment']} {format_percent(summary.equipment_percentage)}",
    )

    if show_items and estimation.items_detail:
        console.print()
        print_items_table(estimation.items_detail, labels)

    if estimation.has_warnings:
        console.print()
        positions = ", ".join(str(i + 1) for i in estimation.unresolved_items)
        print_warning(f"{labels['unresolved']}: {positions}")

    console.print()


# ============================================================================
# Planillas PILA
# ============================================================================

def print_pila_summary(submission: dict, labels: Mapping[str, str]) -> None:
    """Imprime los totales de una planilla (dict de la BD o model_dump)."""
    console = get_console()
    status = submission["status"]
    if hasattr(status, "value"):
        status = status.value

    console.print()
    print_header(f"{labels['pila']} {submission['period']}")
    console.print("  ", Text(f"{labels['status']}: ", style=get_palette().label), styled_status(status))
    print_field(labels["employees"], submission["employee_count"])
    print_field(labels["salary"], format_cop(submission["total_salary"]))
    print_field(labels["health"], format_cop(submission["total_health"]))
    print_field(labels["pension"], format_cop(submission["total_pension"]))
    print_field(
        f"{labels['arl']} ({format_percent(submission['arl_rate'] * 100, 2)})",
        format_cop(submission["total_arl"]),
    )
    print_field(labels["contributions"], format_cop(submission["total_contributions"]))
    console.print()
