from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmploymentCategory


@dataclass(frozen=True)
class Employee:
    """Registry snapshot of an employee, as far as incentives need it.

    `category` is None when the registry holds a value we do not recognize.
    """

    employee_id: str
    name: str
    avatar_url: Optional[str] = None
    category: Optional[EmploymentCategory] = EmploymentCategory.PERMANENT
