"""
Módulo de conexión a base de datos SQLite.

Proporciona la clase base con manejo de conexión y esquema.
"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Iterator, TypeVar, Any

from obracalc.config import get_data_dir

logger = logging.getLogger(__name__)


# ============================================================================
# Helpers para JSON
# ============================================================================

T = TypeVar("T")


def _json_loads(value: Optional[str], default: T = None) -> T | Any:
    """
    Deserializa JSON de forma segura.

    Args:
        value: String JSON o None
        default: Valor por defecto si value es None o vacío

    Returns:
        Objeto deserializado o default
    """
    if not value:
        return default
    return json.loads(value)


def _json_list(value: Optional[str]) -> list:
    """Deserializa JSON a lista, retorna lista vacía si es None."""
    return _json_loads(value, [])


def _json_dict(value: Optional[str]) -> dict:
    """Deserializa JSON a dict, retorna dict vacío si es None."""
    return _json_loads(value, {})


# ============================================================================
# Esquema de la Base de Datos
# ============================================================================

SCHEMA_VERSION = 1

SCHEMA_SQL = """
-- Estimaciones guardadas del simulador de costos
CREATE TABLE IF NOT EXISTS cost_estimations (
    id TEXT PRIMARY KEY,
    project_name TEXT NOT NULL,
    client_name TEXT DEFAULT '',
    template_id TEXT NOT NULL,
    estimation_data TEXT NOT NULL,  -- JSON CostEstimation
    total REAL NOT NULL,
    notes TEXT,
    status TEXT NOT NULL DEFAULT 'draft',
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

-- Planillas PILA (una por período)
CREATE TABLE IF NOT EXISTS pila_submissions (
    id TEXT PRIMARY KEY,
    period TEXT NOT NULL UNIQUE,
    employee_count INTEGER NOT NULL,
    total_salary REAL NOT NULL,
    total_health INTEGER NOT NULL,
    total_pension INTEGER NOT NULL,
    total_arl INTEGER NOT NULL,
    total_contributions INTEGER NOT NULL,
    arl_rate REAL NOT NULL,
    contributions TEXT,  -- JSON list[EmployeeContribution]
    file_path TEXT,
    csv_content TEXT,
    status TEXT NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

-- Índices para búsquedas rápidas
CREATE INDEX IF NOT EXISTS idx_estimations_created ON cost_estimations(created_at);
CREATE INDEX IF NOT EXISTS idx_pila_status ON pila_submissions(status);

-- Tabla de metadatos
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


# ============================================================================
# Clase DatabaseConnection
# ============================================================================

class DatabaseConnection:
    """Gestor de conexión a base de datos SQLite."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Inicializa la conexión a la base de datos.

        Args:
            db_path: Ruta al archivo SQLite. Default: ~/.obracalc/obracalc.db
        """
        if db_path is None:
            db_path = get_data_dir() / "obracalc.db"

        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._init_database()

    def _init_database(self) -> None:
        """Inicializa el esquema de la base de datos."""
        with self.connection() as conn:
            conn.executescript(SCHEMA_SQL)

            cursor = conn.execute(
                "SELECT value FROM metadata WHERE key = 'schema_version'"
            )
            row = cursor.fetchone()

            if row is None:
                conn.execute(
                    "INSERT INTO metadata (key, value) VALUES (?, ?)",
                    ("schema_version", str(SCHEMA_VERSION))
                )
                logger.info("Base de datos creada en %s", self.db_path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager para conexiones a la base de datos."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
