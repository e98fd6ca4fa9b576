"""
Catálogo de plantillas de costos.

Lee las plantillas y configuraciones predefinidas del sistema desde
JSON empaquetado. Las plantillas se cargan una vez por proceso y no
se modifican durante un cálculo.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from obracalc.config import CalculationFactors
from obracalc.exceptions import TemplateNotFoundError
from obracalc.models import CostTemplate, ProjectPreset

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """
    Catálogo de plantillas y presets.

    Example:
        >>> catalog = TemplateCatalog()
        >>> template = catalog.get_template("construction")
        >>> template.lookup("materials", "concrete").cost_per_unit
        320000.0
    """

    _data_dir = Path(__file__).parent
    _raw_cache: dict[str, dict] = {}

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        factors: Optional[CalculationFactors] = None,
    ):
        """
        Inicializa el catálogo.

        Args:
            data_dir: Directorio con templates.json y presets.json.
                Default: datos del paquete (con caché compartida)
            factors: Factores por defecto para plantillas que no los definan
        """
        self.data_dir = Path(data_dir) if data_dir else None
        self.factors = factors or CalculationFactors()
        self._templates: Optional[dict[str, CostTemplate]] = None
        self._presets: Optional[dict[str, list[ProjectPreset]]] = None

    # =========================================================================
    # Plantillas
    # =========================================================================

    def list_templates(self) -> list[CostTemplate]:
        """Lista todas las plantillas disponibles."""
        return list(self._load_templates().values())

    def get_template(self, template_id: str) -> CostTemplate:
        """
        Obtiene una plantilla por ID.

        Raises:
            TemplateNotFoundError: Si la plantilla no existe
        """
        templates = self._load_templates()
        if template_id not in templates:
            raise TemplateNotFoundError(template_id)
        return templates[template_id]

    def has_template(self, template_id: str) -> bool:
        return template_id in self._load_templates()

    # =========================================================================
    # Presets
    # =========================================================================

    def get_presets(self, template_id: str) -> list[ProjectPreset]:
        """
        Lista los presets de una plantilla.

        Raises:
            TemplateNotFoundError: Si la plantilla no existe
        """
        if not self.has_template(template_id):
            raise TemplateNotFoundError(template_id)
        return list(self._load_presets().get(template_id, []))

    def get_preset(self, template_id: str, name: str) -> Optional[ProjectPreset]:
        """Busca un preset por nombre (sin distinguir mayúsculas)."""
        for preset in self.get_presets(template_id):
            if preset.name.lower() == name.lower():
                return preset
        return None

    # =========================================================================
    # Carga de datos
    # =========================================================================

    def _read_json(self, filename: str) -> dict:
        """Lee un JSON del catálogo; los del paquete se leen una sola vez."""
        if self.data_dir is not None:
            with open(self.data_dir / filename, encoding="utf-8") as f:
                return json.load(f)

        if filename not in TemplateCatalog._raw_cache:
            with open(self._data_dir / filename, encoding="utf-8") as f:
                TemplateCatalog._raw_cache[filename] = json.load(f)
        return TemplateCatalog._raw_cache[filename]

    def _load_templates(self) -> dict[str, CostTemplate]:
        if self._templates is None:
            raw = self._read_json("templates.json")
            self._templates = {
                key: CostTemplate(
                    id=key,
                    name=info["name"],
                    description=info.get("description", ""),
                    categories=info.get("categories", {}),
                    factors=info.get("factors") or self.factors,
                )
                for key, info in raw.items()
            }
            logger.debug("Cargadas %d plantillas", len(self._templates))
        return self._templates

    def _load_presets(self) -> dict[str, list[ProjectPreset]]:
        if self._presets is None:
            raw = self._read_json("presets.json")
            self._presets = {
                key: [
                    ProjectPreset(name=p["name"], template_id=key, items=p.get("items", []))
                    for p in entries
                ]
                for key, entries in raw.items()
            }
        return self._presets
