"""
ObraCalc - Costeo de obras y aportes a seguridad social (Colombia).

Incluye el simulador de costos por plantillas y el cálculo de
aportes PILA (salud, pensión y ARL).
"""

__version__ = "0.1.0"
