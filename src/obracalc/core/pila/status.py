"""
Estados de la planilla PILA.

    PENDIENTE -> GENERADO -> ENVIADO -> PROCESADO

Sin retrocesos ni reingreso al mismo estado.
"""

from obracalc.config import PILAStatus
from obracalc.exceptions import InvalidStatusTransitionError

ALLOWED_TRANSITIONS = {
    PILAStatus.PENDIENTE: {PILAStatus.GENERADO},
    PILAStatus.GENERADO: {PILAStatus.ENVIADO},
    PILAStatus.ENVIADO: {PILAStatus.PROCESADO},
    PILAStatus.PROCESADO: set(),
}


def can_transition(current: PILAStatus, new: PILAStatus) -> bool:
    """True si se permite pasar de current a new."""
    return PILAStatus(new) in ALLOWED_TRANSITIONS[PILAStatus(current)]


def advance_status(current: PILAStatus | str, new: PILAStatus | str) -> PILAStatus:
    """
    Valida un cambio de estado.

    Returns:
        El nuevo estado

    Raises:
        InvalidStatusTransitionError: Si la transición no está permitida
            o alguno de los estados no existe
    """
    raw_current = getattr(current, "value", current)
    raw_new = getattr(new, "value", new)
    try:
        current = PILAStatus(raw_current)
        new = PILAStatus(raw_new)
    except ValueError:
        raise InvalidStatusTransitionError(str(raw_current), str(raw_new))

    if not can_transition(current, new):
        raise InvalidStatusTransitionError(current.value, new.value)
    return new
