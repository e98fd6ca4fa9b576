"""
Comandos CLI de planillas PILA.
"""

import typer

from obracalc.cli.pila.base import (
    pila_generate,
    pila_list,
    pila_status,
    pila_export,
)

# Crear sub-aplicación
pila_app = typer.Typer(help="Aportes a seguridad social (PILA)")

pila_app.command("generate")(pila_generate)
pila_app.command("list")(pila_list)
pila_app.command("status")(pila_status)
pila_app.command("export")(pila_export)

__all__ = ["pila_app"]
