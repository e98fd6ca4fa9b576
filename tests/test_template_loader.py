"""
Tests para data/template_loader.py - Catálogo de plantillas.
"""

import json

import pytest

from obracalc.config import CalculationFactors, CostCategory
from obracalc.data import TemplateCatalog
from obracalc.exceptions import TemplateNotFoundError


class TestBundledCatalog:
    """Plantillas empaquetadas."""

    def test_lists_both_templates(self, catalog):
        ids = {t.id for t in catalog.list_templates()}
        assert ids == {"construction", "welding"}

    def test_construction_prices(self, construction):
        assert construction.name == "Construcción General"
        assert construction.lookup(CostCategory.MATERIALS, "concrete").cost_per_unit == 320_000
        assert construction.lookup(CostCategory.LABOR, "mason").cost_per_unit == 22_000
        assert construction.lookup(CostCategory.EQUIPMENT, "crane").cost_per_unit == 450_000

    def test_welding_prices(self, catalog):
        welding = catalog.get_template("welding")
        assert welding.lookup(CostCategory.MATERIALS, "electrode").unit == "kg"
        assert welding.lookup(CostCategory.LABOR, "inspector").cost_per_unit == 45_000

    def test_lookup_missing(self, construction):
        assert construction.lookup(CostCategory.MATERIALS, "marble") is None

    def test_n_entries(self, construction):
        assert construction.n_entries == 12

    def test_unknown_template(self, catalog):
        with pytest.raises(TemplateNotFoundError) as exc:
            catalog.get_template("plumbing")
        assert exc.value.template_id == "plumbing"
        assert isinstance(exc.value, LookupError)

    def test_has_template(self, catalog):
        assert catalog.has_template("welding")
        assert not catalog.has_template("plumbing")

    def test_default_factors(self, construction):
        assert construction.factors == CalculationFactors()

    def test_templates_are_frozen(self, construction):
        with pytest.raises(ValueError):
            construction.name = "Otra"


class TestPresets:
    """Configuraciones predefinidas."""

    def test_two_per_template(self, catalog):
        assert len(catalog.get_presets("construction")) == 2
        assert len(catalog.get_presets("welding")) == 2

    def test_preset_by_name_case_insensitive(self, catalog):
        preset = catalog.get_preset("construction", "casa pequeña (80m²)")
        assert preset is not None
        assert preset.template_id == "construction"
        assert preset.items[0].subcategory == "concrete"

    def test_preset_not_found(self, catalog):
        assert catalog.get_preset("welding", "Puente") is None

    def test_presets_unknown_template(self, catalog):
        with pytest.raises(TemplateNotFoundError):
            catalog.get_presets("plumbing")

    def test_presets_resolve_against_template(self, catalog):
        for template in catalog.list_templates():
            for preset in catalog.get_presets(template.id):
                for item in preset.items:
                    assert template.lookup(item.category, item.subcategory) is not None


class TestCustomCatalog:
    """Catálogo desde un directorio propio."""

    @pytest.fixture
    def data_dir(self, tmp_path):
        templates = {
            "paint": {
                "name": "Pintura",
                "categories": {
                    "materials": {"vinilo": {"name": "Vinilo", "unit": "galón", "cost_per_unit": 60000}},
                },
                "factors": {"labor_benefit_factor": 1.5, "overhead_percentage": 0.05,
                            "profit_margin": 0.1, "contingency": 0.0},
            },
        }
        presets = {"paint": [{"name": "Apartamento", "items": [
            {"category": "materials", "subcategory": "vinilo", "quantity": 10},
        ]}]}
        (tmp_path / "templates.json").write_text(json.dumps(templates), encoding="utf-8")
        (tmp_path / "presets.json").write_text(json.dumps(presets), encoding="utf-8")
        return tmp_path

    def test_loads_from_directory(self, data_dir):
        catalog = TemplateCatalog(data_dir=data_dir)
        template = catalog.get_template("paint")

        assert template.factors.labor_benefit_factor == 1.5
        assert template.lookup(CostCategory.MATERIALS, "vinilo").cost_per_unit == 60000
        assert catalog.get_preset("paint", "apartamento").items[0].quantity == 10

    def test_custom_default_factors(self):
        factors = CalculationFactors(overhead_percentage=0.2)
        catalog = TemplateCatalog(factors=factors)
        assert catalog.get_template("construction").factors.overhead_percentage == 0.2
        # El catálogo por defecto no se ve afectado
        assert TemplateCatalog().get_template("construction").factors.overhead_percentage == 0.15
