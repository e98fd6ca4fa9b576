"""
Operaciones de base de datos para planillas PILA.
"""

import json
import logging
from datetime import datetime
from typing import Optional

from obracalc.config import PILAStatus
from obracalc.core.pila import advance_status
from obracalc.database.connection import DatabaseConnection, _json_list
from obracalc.exceptions import SubmissionExistsError
from obracalc.models import PILASubmission

logger = logging.getLogger(__name__)


class PILARepository:
    """Repositorio de planillas PILA (una por período)."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def create(
        self,
        submission: PILASubmission,
        csv_content: Optional[str] = None,
        file_path: Optional[str] = None,
    ) -> dict:
        """
        Guarda una planilla generada.

        Raises:
            SubmissionExistsError: Si ya existe planilla para el período
        """
        if self.get_by_period(submission.period) is not None:
            raise SubmissionExistsError(submission.period)

        contributions = [c.model_dump(mode="json") for c in submission.contributions]

        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO pila_submissions (id, period, employee_count, total_salary,
                                              total_health, total_pension, total_arl,
                                              total_contributions, arl_rate, contributions,
                                              file_path, csv_content, status,
                                              created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (submission.id, submission.period, submission.employee_count,
                 submission.total_salary, submission.total_health,
                 submission.total_pension, submission.total_arl,
                 submission.total_contributions, submission.arl_rate,
                 json.dumps(contributions), file_path, csv_content,
                 PILAStatus(submission.status).value,
                 submission.created_at, submission.created_at)
            )

        logger.info("Planilla PILA %s guardada", submission.period)
        return self.get_by_period(submission.period)

    def get_by_period(self, period: str) -> Optional[dict]:
        """Obtiene la planilla de un período."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "SELECT * FROM pila_submissions WHERE period = ?", (period,)
            )
            row = cursor.fetchone()

            if row is None:
                return None

            return self._row_to_dict(row)

    def _row_to_dict(self, row) -> dict:
        """Convierte una fila de la BD a diccionario."""
        return {
            "id": row["id"],
            "period": row["period"],
            "employee_count": row["employee_count"],
            "total_salary": row["total_salary"],
            "total_health": row["total_health"],
            "total_pension": row["total_pension"],
            "total_arl": row["total_arl"],
            "total_contributions": row["total_contributions"],
            "arl_rate": row["arl_rate"],
            "contributions": _json_list(row["contributions"]),
            "file_path": row["file_path"],
            "csv_content": row["csv_content"],
            "status": row["status"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }

    def list_all(
        self,
        status: Optional[PILAStatus] = None,
        year: Optional[int] = None,
    ) -> list[dict]:
        """Lista planillas, opcionalmente filtradas por estado y año."""
        conditions = []
        params = []

        if status is not None:
            conditions.append("status = ?")
            params.append(PILAStatus(status).value)
        if year is not None:
            conditions.append("period LIKE ?")
            params.append(f"{year}-%")

        query = "SELECT * FROM pila_submissions"
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY period DESC, created_at DESC"

        with self._db.connection() as conn:
            cursor = conn.execute(query, params)
            return [self._row_to_dict(row) for row in cursor]

    def summary(self, submissions: list[dict]) -> dict:
        """Resumen de un listado: totales y conteo por estado."""
        status_counts: dict[str, int] = {}
        for s in submissions:
            status_counts[s["status"]] = status_counts.get(s["status"], 0) + 1

        return {
            "total_submissions": len(submissions),
            "total_employees": sum(s["employee_count"] for s in submissions),
            "total_contributions": sum(s["total_contributions"] for s in submissions),
            "status_counts": status_counts,
        }

    def update_status(self, period: str, status: PILAStatus) -> Optional[dict]:
        """
        Cambia el estado de la planilla de un período.

        Returns:
            Planilla actualizada o None si no existe

        Raises:
            InvalidStatusTransitionError: Si la transición no está permitida
        """
        current = self.get_by_period(period)
        if current is None:
            return None

        new_status = advance_status(current["status"], status)

        with self._db.connection() as conn:
            conn.execute(
                "UPDATE pila_submissions SET status = ?, updated_at = ? WHERE period = ?",
                (new_status.value, datetime.now().isoformat(), period)
            )

        logger.info("PILA %s: %s -> %s", period, current["status"], new_status.value)
        return self.get_by_period(period)
