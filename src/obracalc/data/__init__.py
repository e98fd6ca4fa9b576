"""
Módulo de datos: plantillas de costos y presets del sistema.
"""

from obracalc.data.template_loader import TemplateCatalog

__all__ = [
    "TemplateCatalog",
]
