from __future__ import annotations

from typing import Optional

from ..core.enums import EmploymentCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_one
from .model import Employee
from .repository import EmployeeRepository


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        name=str(r["name"]),
        avatar_url=r.get("avatar_url"),
        category=EmploymentCategory.parse(r.get("employment_category")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        r = query_one(
            self._conn_factory,
            """
            SELECT employee_id, name, avatar_url, employment_category
            FROM employees
            WHERE employee_id=%s
            """,
            (str(employee_id),),
        )
        return _row_to_employee(r) if r else None
