from src.incentive_system.incentive_system.core.enums import EmploymentCategory
from src.incentive_system.incentive_system.payroll.bonus_config import BonusRateConfig
from src.incentive_system.incentive_system.payroll.calculator.standard_calculator import StandardBonusCalculator


def test_standard_calculator_multiplies_by_category_rate():
    calc = StandardBonusCalculator(BonusRateConfig())
    assert calc.bonus_for(4, EmploymentCategory.PERMANENT) == 20000
    assert calc.bonus_for(4, EmploymentCategory.PROBATION) == 12000
    assert calc.bonus_for(4, EmploymentCategory.DAILY_WORKER) == 8000


def test_standard_calculator_floors_non_positive_totals():
    calc = StandardBonusCalculator(BonusRateConfig())
    assert calc.bonus_for(0, EmploymentCategory.PERMANENT) == 0
    assert calc.bonus_for(-6, EmploymentCategory.PERMANENT) == 0
