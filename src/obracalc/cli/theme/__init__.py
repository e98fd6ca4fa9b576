"""
Sistema de temas para la interfaz CLI de ObraCalc.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
- tables: Funciones para crear e imprimir tablas Rich
"""

from obracalc.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from obracalc.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_status,
)

from obracalc.cli.theme.printing import (
    format_cop,
    format_percent,
    print_header,
    print_field,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_cost_breakdown,
    print_estimation,
    print_pila_summary,
)

from obracalc.cli.theme.tables import (
    create_results_table,
    print_templates_table,
    print_template_prices,
    print_presets_table,
    print_items_table,
    print_estimations_table,
    print_pila_table,
    print_contributions_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_header",
    "styled_label",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_status",
    # printing
    "format_cop",
    "format_percent",
    "print_header",
    "print_field",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_cost_breakdown",
    "print_estimation",
    "print_pila_summary",
    # tables
    "create_results_table",
    "print_templates_table",
    "print_template_prices",
    "print_presets_table",
    "print_items_table",
    "print_estimations_table",
    "print_pila_table",
    "print_contributions_table",
]
