"""
Tests para la liquidación detallada por empleado (formato UGPP).
"""

import pytest

from obracalc.config import ARLRiskClass
from obracalc.core.pila import (
    PAYROLL_PARAMETERS,
    liquidate_employee,
    liquidate_period,
    load_payroll_parameters,
)
from obracalc.exceptions import InvalidInputError
from obracalc.models import Employee


@pytest.fixture
def params_2025():
    return load_payroll_parameters(2025)


class TestPayrollParameters:
    """Parámetros legales por año."""

    def test_2025_values(self, params_2025):
        assert params_2025.minimum_wage == 1_423_500
        assert params_2025.transport_allowance == 200_000
        assert params_2025.uvt == 47_065

    def test_unknown_year(self):
        with pytest.raises(InvalidInputError):
            load_payroll_parameters(1990)

    def test_arl_by_class(self, params_2025):
        assert params_2025.arl_rate(ARLRiskClass.I) == 0.00522
        assert params_2025.arl_rate(ARLRiskClass.III) == 0.02436
        assert params_2025.arl_rate(None) == 0.0696

    def test_bundled_years(self):
        assert 2025 in PAYROLL_PARAMETERS


class TestLiquidateEmployee:
    """Liquidación de un empleado."""

    def test_above_minimum_wage(self, params_2025):
        employee = Employee(document_number="1010101", name="Juan Pérez", salary=2_500_000)
        liq = liquidate_employee(employee, params_2025)

        assert liq.ibc == 2_500_000
        assert liq.days_worked == 30
        assert liq.health_employee == 100_000
        assert liq.pension_employee == 100_000
        assert liq.health_employer == 212_500
        assert liq.pension_employer == 300_000
        assert liq.arl == 174_000
        assert liq.arl_class == ARLRiskClass.V
        assert liq.cesantias == 208_250
        assert liq.prima == 208_250
        assert liq.vacaciones == 104_250
        assert liq.sena == 50_000
        assert liq.icbf == 75_000
        assert liq.cajas == 100_000
        assert liq.total_employee == 200_000
        assert liq.total_employer == 1_432_250

    def test_ibc_floor_is_minimum_wage(self, params_2025):
        liq = liquidate_employee(Employee(salary=900_000, arl_risk_class="I"), params_2025)

        assert liq.ibc == 1_423_500
        assert liq.arl_class == ARLRiskClass.I
        assert liq.arl == 7_431

    def test_days_capped_at_30(self, params_2025):
        liq = liquidate_employee(Employee(salary=2_000_000), params_2025, days_worked=31)
        assert liq.days_worked == 30

    def test_partial_days_kept(self, params_2025):
        liq = liquidate_employee(Employee(salary=2_000_000), params_2025, days_worked=15)
        assert liq.days_worked == 15

    def test_non_positive_days(self, params_2025):
        with pytest.raises(InvalidInputError):
            liquidate_employee(Employee(salary=2_000_000), params_2025, days_worked=0)

    def test_document_fields_copied(self, params_2025):
        employee = Employee(document_type="CE", document_number="99", name="Ana", salary=2_000_000)
        liq = liquidate_employee(employee, params_2025)

        assert liq.document_type == "CE"
        assert liq.document_number == "99"
        assert liq.names == "Ana"


class TestLiquidatePeriod:
    """Liquidación de toda la nómina."""

    def test_one_row_per_employee(self, employees):
        liquidations = liquidate_period(employees, 2025)

        assert len(liquidations) == 2
        assert [l.document_number for l in liquidations] == ["1010101", "2020202"]

    def test_unknown_year(self, employees):
        with pytest.raises(InvalidInputError):
            liquidate_period(employees, 2019)
