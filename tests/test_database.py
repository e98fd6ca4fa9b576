"""
Tests para el módulo de base de datos SQLite.
"""

import pytest

from obracalc.config import PILAStatus
from obracalc.core.estimation import calculate
from obracalc.core.pila import generate_pila
from obracalc.database import Database, get_database, reset_database
from obracalc.exceptions import InvalidStatusTransitionError, SubmissionExistsError
from obracalc.models import CostEstimation, EstimationItem


@pytest.fixture
def sample_estimation(construction):
    """Estimación de ejemplo."""
    items = [
        EstimationItem(category="materials", subcategory="concrete", quantity=10),
        EstimationItem(category="labor", subcategory="mason", quantity=100),
    ]
    return calculate(construction, items, duration_days=30)


class TestDatabaseSetup:
    """Creación del archivo y del esquema."""

    def test_creates_file(self, tmp_path):
        db = Database(tmp_path / "sub" / "obracalc.db")
        assert db.db_path.exists()

    def test_default_path_uses_home(self, isolated_home):
        db = get_database()
        assert db.db_path == isolated_home / "obracalc.db"

    def test_global_instance(self):
        assert get_database() is get_database()
        first = get_database()
        reset_database()
        assert get_database() is not first

    def test_stats(self, temp_db, sample_estimation):
        temp_db.save_estimation("Casa", sample_estimation)
        stats = temp_db.get_stats()
        assert stats["n_estimations"] == 1
        assert stats["n_pila"] == 0
        assert stats["db_size_bytes"] > 0


class TestDatabaseEstimations:
    """Operaciones de estimaciones."""

    def test_save_and_get(self, temp_db, sample_estimation):
        saved = temp_db.save_estimation("Casa Norte", sample_estimation, client_name="ACME")

        assert saved["status"] == "draft"
        assert len(saved["id"]) == 8

        loaded = temp_db.get_estimation(saved["id"])
        assert loaded["project_name"] == "Casa Norte"
        assert loaded["client_name"] == "ACME"
        assert loaded["template_id"] == "construction"
        assert loaded["total"] == pytest.approx(sample_estimation.cost_breakdown.total)

    def test_get_by_prefix(self, temp_db, sample_estimation):
        saved = temp_db.save_estimation("Casa", sample_estimation)
        assert temp_db.get_estimation(saved["id"][:4])["id"] == saved["id"]

    def test_get_missing(self, temp_db):
        assert temp_db.get_estimation("zzzzzzzz") is None

    def test_model_round_trip(self, temp_db, sample_estimation):
        saved = temp_db.save_estimation("Casa", sample_estimation)
        model = temp_db.get_estimation_model(saved["id"])

        assert isinstance(model, CostEstimation)
        assert model == sample_estimation

    def test_list(self, temp_db, sample_estimation):
        temp_db.save_estimation("A", sample_estimation)
        temp_db.save_estimation("B", sample_estimation)

        names = {e["project_name"] for e in temp_db.list_estimations()}
        assert names == {"A", "B"}

    def test_duplicate(self, temp_db, sample_estimation):
        saved = temp_db.save_estimation("Casa", sample_estimation, notes="v1")
        copy = temp_db.duplicate_estimation(saved["id"])

        assert copy["id"] != saved["id"]
        assert copy["project_name"] == "Casa - Copia"
        assert copy["notes"] == "v1"
        assert copy["total"] == saved["total"]
        assert len(temp_db.list_estimations()) == 2

    def test_duplicate_missing(self, temp_db):
        assert temp_db.duplicate_estimation("nada") is None

    def test_delete(self, temp_db, sample_estimation):
        saved = temp_db.save_estimation("Casa", sample_estimation)

        assert temp_db.delete_estimation(saved["id"])
        assert temp_db.get_estimation(saved["id"]) is None
        assert not temp_db.delete_estimation(saved["id"])


class TestDatabasePila:
    """Operaciones de planillas PILA."""

    def test_save_and_get(self, temp_db, employees):
        submission = generate_pila("2025-09", employees)
        saved = temp_db.save_pila(submission, csv_content="A;B\n1;2", file_path="pila.csv")

        assert saved["period"] == "2025-09"
        assert saved["status"] == "GENERADO"
        assert saved["employee_count"] == 2
        assert saved["total_contributions"] == submission.total_contributions
        assert saved["csv_content"] == "A;B\n1;2"
        assert saved["file_path"] == "pila.csv"
        assert [c["employee_id"] for c in saved["contributions"]] == ["e1", "e2"]

    def test_one_per_period(self, temp_db, employees):
        temp_db.save_pila(generate_pila("2025-09", employees))

        with pytest.raises(SubmissionExistsError) as exc:
            temp_db.save_pila(generate_pila("2025-09", employees))
        assert exc.value.period == "2025-09"

    def test_get_missing(self, temp_db):
        assert temp_db.get_pila("2025-01") is None

    def test_list_filters(self, temp_db, employees):
        for period in ["2024-12", "2025-01", "2025-02"]:
            temp_db.save_pila(generate_pila(period, employees))
        temp_db.update_pila_status("2025-01", PILAStatus.ENVIADO)

        assert [s["period"] for s in temp_db.list_pila()] == ["2025-02", "2025-01", "2024-12"]
        assert [s["period"] for s in temp_db.list_pila(year=2025)] == ["2025-02", "2025-01"]
        assert [s["period"] for s in temp_db.list_pila(status=PILAStatus.ENVIADO)] == ["2025-01"]
        assert temp_db.list_pila(status=PILAStatus.PROCESADO, year=2024) == []

    def test_summary(self, temp_db, employees):
        temp_db.save_pila(generate_pila("2025-01", employees))
        temp_db.save_pila(generate_pila("2025-02", employees[:1]))
        temp_db.update_pila_status("2025-02", PILAStatus.ENVIADO)

        summary = temp_db.pila_summary(temp_db.list_pila())

        assert summary["total_submissions"] == 2
        assert summary["total_employees"] == 3
        assert summary["total_contributions"] == 961_100 + 686_500
        assert summary["status_counts"] == {"GENERADO": 1, "ENVIADO": 1}

    def test_status_sequence(self, temp_db, employees):
        temp_db.save_pila(generate_pila("2025-09", employees))

        assert temp_db.update_pila_status("2025-09", PILAStatus.ENVIADO)["status"] == "ENVIADO"
        assert temp_db.update_pila_status("2025-09", "PROCESADO")["status"] == "PROCESADO"

    def test_invalid_transition_keeps_status(self, temp_db, employees):
        temp_db.save_pila(generate_pila("2025-09", employees))

        with pytest.raises(InvalidStatusTransitionError):
            temp_db.update_pila_status("2025-09", PILAStatus.PROCESADO)
        assert temp_db.get_pila("2025-09")["status"] == "GENERADO"

    def test_status_missing_period(self, temp_db):
        assert temp_db.update_pila_status("2030-01", PILAStatus.ENVIADO) is None
