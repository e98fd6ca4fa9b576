"""
Comandos CLI del simulador de costos.
"""

import typer

from obracalc.cli.estimate.base import (
    estimate_templates,
    estimate_presets,
    estimate_calculate,
)
from obracalc.cli.estimate.saved import (
    estimate_list,
    estimate_show,
    estimate_duplicate,
    estimate_delete,
)

# Crear sub-aplicación
estimate_app = typer.Typer(help="Simulador de costos por plantilla")

# Catálogo y cálculo
estimate_app.command("templates")(estimate_templates)
estimate_app.command("presets")(estimate_presets)
estimate_app.command("calculate")(estimate_calculate)

# Estimaciones guardadas
estimate_app.command("list")(estimate_list)
estimate_app.command("show")(estimate_show)
estimate_app.command("duplicate")(estimate_duplicate)
estimate_app.command("delete")(estimate_delete)

__all__ = ["estimate_app"]
