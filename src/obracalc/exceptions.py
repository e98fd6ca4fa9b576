"""
Excepciones de ObraCalc.

Los errores de entrada heredan de ValueError, de modo que el código que
ya captura ValueError sigue funcionando.
"""


class InvalidInputError(ValueError):
    """Entrada rechazada antes de calcular (duración, período, salario...)."""


class TemplateNotFoundError(LookupError):
    """Plantilla de costos inexistente en el catálogo."""

    def __init__(self, template_id: str):
        super().__init__(f"Plantilla no encontrada: {template_id}")
        self.template_id = template_id


class InvalidStatusTransitionError(InvalidInputError):
    """Cambio de estado PILA no permitido."""

    def __init__(self, current: str, new: str):
        super().__init__(f"Transición de estado inválida: {current} -> {new}")
        self.current = current
        self.new = new


class SubmissionExistsError(ValueError):
    """Ya existe una planilla PILA para el período."""

    def __init__(self, period: str):
        super().__init__(f"Ya existe archivo PILA para el período {period}")
        self.period = period
