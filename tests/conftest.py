"""Configuración de pytest para tests de obracalc."""

import pytest

from obracalc.cli.theme import CLITheme
from obracalc.config import CalculationFactors, CostCategory
from obracalc.data import TemplateCatalog
from obracalc.database import Database, reset_database
from obracalc.models import CostTemplate, Employee, TemplateEntry


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Directorio de datos temporal y consola ancha para cada test."""
    monkeypatch.setenv("OBRACALC_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("COLUMNS", "200")
    reset_database()
    CLITheme._console = None
    yield tmp_path / "home"
    reset_database()
    CLITheme._console = None


@pytest.fixture
def catalog():
    """Catálogo con las plantillas del paquete."""
    return TemplateCatalog()


@pytest.fixture
def construction(catalog):
    """Plantilla de construcción general."""
    return catalog.get_template("construction")


@pytest.fixture
def simple_template():
    """Plantilla mínima con un precio por categoría y factores del escenario B."""
    return CostTemplate(
        id="simple",
        name="Simple",
        categories={
            CostCategory.MATERIALS: {
                "block": TemplateEntry(name="Bloque", unit="und", cost_per_unit=1000),
            },
            CostCategory.LABOR: {
                "worker": TemplateEntry(name="Obrero", unit="mes", cost_per_unit=1_000_000),
            },
            CostCategory.EQUIPMENT: {
                "drill": TemplateEntry(name="Taladro", unit="día", cost_per_unit=50_000),
            },
        },
        factors=CalculationFactors(
            labor_benefit_factor=1.58,
            overhead_percentage=0.10,
            profit_margin=0.15,
            contingency=0.05,
        ),
    )


@pytest.fixture
def employees():
    """Nómina de ejemplo."""
    return [
        Employee(id="e1", document_number="1010101", name="Pérez, Juan", salary=2_500_000),
        Employee(id="e2", document_number="2020202", name="Ana Gómez", salary=1_000_000,
                 arl_risk_class="I"),
    ]


@pytest.fixture
def temp_db(tmp_path):
    """Base de datos temporal para tests."""
    return Database(tmp_path / "test.db")
