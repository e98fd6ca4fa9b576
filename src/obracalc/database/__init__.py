"""
Módulo de base de datos SQLite para ObraCalc.

Guarda estimaciones del simulador y planillas PILA generadas.
La clase Database es una fachada sobre los repositorios especializados.
"""

from pathlib import Path
from typing import Optional

from obracalc.config import PILAStatus
from obracalc.database.connection import DatabaseConnection
from obracalc.database.estimations import EstimationRepository
from obracalc.database.pila import PILARepository

from obracalc.models import CostEstimation, PILASubmission


class Database:
    """Gestor de base de datos SQLite para ObraCalc."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Inicializa la conexión a la base de datos.

        Args:
            db_path: Ruta al archivo SQLite. Default: ~/.obracalc/obracalc.db
        """
        self._conn = DatabaseConnection(db_path)
        self._estimations = EstimationRepository(self._conn)
        self._pila = PILARepository(self._conn)

    @property
    def db_path(self) -> Path:
        """Ruta al archivo de base de datos."""
        return self._conn.db_path

    # ========================================================================
    # Estimaciones
    # ========================================================================

    def save_estimation(
        self,
        project_name: str,
        estimation: CostEstimation,
        client_name: str = "",
        notes: Optional[str] = None,
    ) -> dict:
        """Guarda una estimación como borrador."""
        return self._estimations.save(project_name, estimation, client_name, notes)

    def get_estimation(self, estimation_id: str) -> Optional[dict]:
        """Obtiene una estimación por ID (parcial o completo)."""
        return self._estimations.get(estimation_id)

    def get_estimation_model(self, estimation_id: str) -> Optional[CostEstimation]:
        """Obtiene una estimación como modelo Pydantic."""
        d = self.get_estimation(estimation_id)
        if d is None:
            return None
        return CostEstimation.model_validate(d["estimation_data"])

    def list_estimations(self) -> list[dict]:
        """Lista todas las estimaciones guardadas."""
        return self._estimations.list_all()

    def duplicate_estimation(self, estimation_id: str) -> Optional[dict]:
        """Duplica una estimación."""
        return self._estimations.duplicate(estimation_id)

    def delete_estimation(self, estimation_id: str) -> bool:
        """Elimina una estimación."""
        return self._estimations.delete(estimation_id)

    # ========================================================================
    # Planillas PILA
    # ========================================================================

    def save_pila(
        self,
        submission: PILASubmission,
        csv_content: Optional[str] = None,
        file_path: Optional[str] = None,
    ) -> dict:
        """Guarda una planilla PILA (una por período)."""
        return self._pila.create(submission, csv_content, file_path)

    def get_pila(self, period: str) -> Optional[dict]:
        """Obtiene la planilla de un período."""
        return self._pila.get_by_period(period)

    def list_pila(
        self,
        status: Optional[PILAStatus] = None,
        year: Optional[int] = None,
    ) -> list[dict]:
        """Lista planillas PILA con filtros opcionales."""
        return self._pila.list_all(status, year)

    def pila_summary(self, submissions: list[dict]) -> dict:
        """Totales y conteo por estado de un listado de planillas."""
        return self._pila.summary(submissions)

    def update_pila_status(self, period: str, status: PILAStatus) -> Optional[dict]:
        """Cambia el estado de una planilla validando la transición."""
        return self._pila.update_status(period, status)

    # ========================================================================
    # Estadísticas
    # ========================================================================

    def get_stats(self) -> dict:
        """Obtiene estadísticas generales de la base de datos."""
        with self._conn.connection() as conn:
            stats = {}

            cursor = conn.execute("SELECT COUNT(*) FROM cost_estimations")
            stats["n_estimations"] = cursor.fetchone()[0]

            cursor = conn.execute("SELECT COUNT(*) FROM pila_submissions")
            stats["n_pila"] = cursor.fetchone()[0]

            stats["db_size_bytes"] = self.db_path.stat().st_size if self.db_path.exists() else 0

            return stats


# Instancia global
_database: Optional[Database] = None


def get_database() -> Database:
    """Retorna la instancia global de la base de datos."""
    global _database
    if _database is None:
        _database = Database()
    return _database


def reset_database() -> None:
    """Reinicia la instancia global (útil para tests)."""
    global _database
    _database = None


__all__ = [
    "Database",
    "DatabaseConnection",
    "EstimationRepository",
    "PILARepository",
    "get_database",
    "reset_database",
]
