from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import EmploymentCategory
from ..employees.repository import EmployeeRepository
from ..points.aggregator import PeriodAggregator
from .bonus_config import BonusRateConfig
from .calculator.base import BonusCalculator
from .calculator.standard_calculator import StandardBonusCalculator


@dataclass(frozen=True)
class BonusReportRow:
    employee_id: str
    name: str
    category: Optional[str]
    total_points: int
    rate: float | int
    bonus: float | int

    def to_dict(self) -> dict:
        return asdict(self)


class BonusService:
    def __init__(
        self,
        aggregator: PeriodAggregator,
        employees: EmployeeRepository,
        rates: BonusRateConfig,
        *,
        calculator: Optional[BonusCalculator] = None,
    ):
        self._aggregator = aggregator
        self._employees = employees
        self._rates = rates
        self._calculator = calculator or StandardBonusCalculator(rates)

    def compute_bonus(self, employee_id: str, month: int, year: int) -> float | int:
        total = self._aggregator.aggregate(employee_id, month, year)
        if total <= 0:
            return 0

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return 0
        return self._calculator.bonus_for(total, employee.category)

    def build_bonus_report(self, month: int, year: int) -> list[BonusReportRow]:
        """One row per registered employee with ledger activity in the period.

        Employees missing from the registry are skipped: they cannot be paid.
        """
        totals = self._aggregator.totals_by_employee(month, year)

        rows: list[BonusReportRow] = []
        for employee_id in sorted(totals):
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                continue
            total = totals[employee_id]
            category = employee.category or EmploymentCategory.PERMANENT
            rows.append(
                BonusReportRow(
                    employee_id=employee_id,
                    name=employee.name,
                    category=employee.category.value if employee.category else None,
                    total_points=total,
                    rate=self._rates.rate_for(category),
                    bonus=self._calculator.bonus_for(total, employee.category),
                )
            )

        rows.sort(key=lambda r: (-r.bonus, r.employee_id))
        return rows
