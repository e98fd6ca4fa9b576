"""
CLI de ObraCalc - Costos de obra y aportes PILA.

Este módulo organiza los comandos CLI en sub-aplicaciones temáticas:
- estimate: Simulador de costos por plantilla y estimaciones guardadas
- pila: Planillas de aportes a seguridad social
"""

import logging

import typer

from obracalc import __version__

# Crear aplicación principal
app = typer.Typer(
    name="obracalc",
    help="Estimación de costos de obra y aportes PILA para Colombia.",
    no_args_is_help=True,
)


def _register_subapps():
    """Registra las sub-aplicaciones (imports locales)."""
    from obracalc.cli.estimate import estimate_app
    from obracalc.cli.pila import pila_app

    app.add_typer(estimate_app, name="estimate")
    app.add_typer(pila_app, name="pila")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"obracalc {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Mostrar mensajes de log"),
    theme: str = typer.Option("default", "--theme", help="Tema de colores (default, minimal)"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Mostrar versión"
    ),
):
    """
    ObraCalc - Costos de obra y seguridad social.

    Calcula estimaciones de costos con factor prestacional colombiano
    y genera planillas PILA con salud, pensión y ARL.
    """
    from obracalc.cli.theme import CLITheme, ThemeName

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        CLITheme.set_theme(ThemeName(theme))
    except ValueError:
        raise typer.BadParameter(f"Tema desconocido: {theme}", param_hint="--theme")


# Las sub-aplicaciones deben existir antes de que typer resuelva el comando
_register_subapps()

__all__ = ["app"]
