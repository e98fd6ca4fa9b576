"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    MINIMAL = "minimal"


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, destacados
    secondary: str    # Subtítulos
    accent: str       # Totales

    # Colores semánticos
    success: str
    warning: str
    error: str
    info: str
    muted: str

    # Colores para datos
    number: str       # Valores monetarios
    label: str        # Etiquetas

    # Bordes
    border: str


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    number="#d7af5f",       # Amarillo para montos
    label="#afafaf",        # Gris claro para etiquetas
    border="#5f5f5f",       # Gris oscuro para bordes
)

# Tema Minimal - grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    number="#ffffff",
    label="#909090",
    border="#404040",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _instance: Optional["CLITheme"] = None
    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Se recrea con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "number": p.number,
                "label": p.label,
                "title": f"bold {p.primary}",
                "value": f"bold {p.number}",
                "total": f"bold {p.accent}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
