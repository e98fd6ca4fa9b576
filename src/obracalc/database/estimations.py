"""
Operaciones de base de datos para estimaciones de costos.
"""

import json
import logging
from datetime import datetime
from typing import Optional

from obracalc.config import EstimationStatus
from obracalc.database.connection import DatabaseConnection, _json_dict
from obracalc.models import CostEstimation, generate_id

logger = logging.getLogger(__name__)


class EstimationRepository:
    """Repositorio para operaciones CRUD de estimaciones."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def save(
        self,
        project_name: str,
        estimation: CostEstimation,
        client_name: str = "",
        notes: Optional[str] = None,
    ) -> dict:
        """Guarda una estimación en estado borrador."""
        estimation_id = generate_id()
        now = datetime.now().isoformat()
        data = estimation.model_dump(mode="json")

        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO cost_estimations (id, project_name, client_name, template_id,
                                              estimation_data, total, notes, status,
                                              created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (estimation_id, project_name, client_name,
                 estimation.project_info.template_id, json.dumps(data),
                 estimation.cost_breakdown.total, notes,
                 EstimationStatus.DRAFT.value, now, now)
            )

        logger.info("Estimación %s guardada (%s)", estimation_id, project_name)
        return {
            "id": estimation_id,
            "project_name": project_name,
            "client_name": client_name,
            "template_id": estimation.project_info.template_id,
            "estimation_data": data,
            "total": estimation.cost_breakdown.total,
            "notes": notes,
            "status": EstimationStatus.DRAFT.value,
            "created_at": now,
            "updated_at": now,
        }

    def get(self, estimation_id: str) -> Optional[dict]:
        """Obtiene una estimación por ID (parcial o completo)."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "SELECT * FROM cost_estimations WHERE id = ? OR id LIKE ?",
                (estimation_id, f"{estimation_id}%")
            )
            row = cursor.fetchone()

            if row is None:
                return None

            return self._row_to_dict(row)

    def _row_to_dict(self, row) -> dict:
        """Convierte una fila de la BD a diccionario."""
        return {
            "id": row["id"],
            "project_name": row["project_name"],
            "client_name": row["client_name"],
            "template_id": row["template_id"],
            "estimation_data": _json_dict(row["estimation_data"]),
            "total": row["total"],
            "notes": row["notes"],
            "status": row["status"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }

    def list_all(self) -> list[dict]:
        """Lista todas las estimaciones, más recientes primero."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "SELECT * FROM cost_estimations ORDER BY created_at DESC"
            )
            return [self._row_to_dict(row) for row in cursor]

    def duplicate(self, estimation_id: str) -> Optional[dict]:
        """Duplica una estimación como borrador nuevo ('<nombre> - Copia')."""
        original = self.get(estimation_id)
        if original is None:
            return None

        estimation = CostEstimation.model_validate(original["estimation_data"])
        return self.save(
            project_name=f"{original['project_name']} - Copia",
            estimation=estimation,
            client_name=original["client_name"],
            notes=original["notes"],
        )

    def delete(self, estimation_id: str) -> bool:
        """Elimina una estimación."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                "DELETE FROM cost_estimations WHERE id = ? OR id LIKE ?",
                (estimation_id, f"{estimation_id}%")
            )
            return cursor.rowcount > 0
