"""Identity registry: the source of truth for one run's employees and review cycles."""

from __future__ import annotations
from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Optional

from synthetic_org.generators.errors import DuplicateIdentityError, HierarchyError
from synthetic_org.generators.identity import employee_id as derive_employee_id
from synthetic_org.generators.temporal import active_on, iso, parse_iso

_EMPLOYEE_DATE_FIELDS = ("hire_date", "date_of_birth", "termination_date")
_CYCLE_DATE_FIELDS = ("start_date", "end_date")


@dataclass
class Employee:
    employee_id: str
    email: str
    full_name: str
    department: str
    job_title: str
    manager_id: Optional[str]
    hire_date: date
    work_state: str
    status: str = "active"
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    ethnicity: Optional[str] = None
    termination_date: Optional[date] = None
    termination_reason: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        """Flat record as consumed by the import adapter (``id`` as the key)."""
        record: dict[str, Any] = {"id": self.employee_id}
        for f in fields(self):
            if f.name == "employee_id":
                continue
            value = getattr(self, f.name)
            record[f.name] = iso(value) if f.name in _EMPLOYEE_DATE_FIELDS else value
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Employee:
        values = {k: v for k, v in record.items() if k != "id"}
        for name in _EMPLOYEE_DATE_FIELDS:
            values[name] = parse_iso(values.get(name))
        return cls(employee_id=record["id"], **values)


@dataclass
class ReviewCycle:
    cycle_id: str
    name: str
    cycle_type: str
    start_date: date
    end_date: date
    status: str

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.cycle_id,
            "name": self.name,
            "cycle_type": self.cycle_type,
            "start_date": iso(self.start_date),
            "end_date": iso(self.end_date),
            "status": self.status,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> ReviewCycle:
        values = {k: v for k, v in record.items() if k != "id"}
        for name in _CYCLE_DATE_FIELDS:
            values[name] = parse_iso(values[name])
        return cls(cycle_id=record["id"], **values)


class Registry:
    """Authoritative store of employees and review cycles for one generation run.

    Employee ids are derived from emails, never assigned, so phase 2 can look
    people up by email and get the same ids phase 1 produced. Insertion order
    is registration order; the org tree index is kept in step with it.
    """

    def __init__(self) -> None:
        self.employees: dict[str, Employee] = {}
        self.email_index: dict[str, str] = {}
        self.review_cycles: dict[str, ReviewCycle] = {}

        # Org tree: manager_id -> list of direct report employee_ids
        self.org_tree: dict[str, list[str]] = {}

    def register(self, **attributes: Any) -> Employee:
        """Register an employee (all fields except the id) and return it with its id."""
        emp_id = derive_employee_id(attributes["email"])

        if emp_id in self.employees or attributes["email"] in self.email_index:
            raise DuplicateIdentityError(
                f"Duplicate employee ID {emp_id} generated for {attributes['email']}"
            )

        manager_id = attributes.get("manager_id")
        if manager_id is None:
            if self.root() is not None:
                raise HierarchyError(
                    f"{attributes['email']} has no manager but the root is already registered"
                )
        elif manager_id not in self.employees:
            raise HierarchyError(
                f"{attributes['email']} reports to unregistered manager {manager_id}"
            )

        emp = Employee(employee_id=emp_id, **attributes)
        self._index(emp)
        return emp

    def _index(self, emp: Employee) -> None:
        self.employees[emp.employee_id] = emp
        self.email_index[emp.email] = emp.employee_id
        if emp.manager_id:
            self.org_tree.setdefault(emp.manager_id, []).append(emp.employee_id)

    def register_cycle(self, cycle: ReviewCycle) -> None:
        """Store a review cycle by its explicit id, replacing any previous one."""
        self.review_cycles[cycle.cycle_id] = cycle

    # -- lookups ---------------------------------------------------------

    def get_by_id(self, emp_id: str) -> Optional[Employee]:
        return self.employees.get(emp_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        emp_id = self.email_index.get(email)
        return self.employees.get(emp_id) if emp_id else None

    def manager_id_of(self, emp_id: str) -> Optional[str]:
        emp = self.employees.get(emp_id)
        return emp.manager_id if emp else None

    def root(self) -> Optional[Employee]:
        return next((e for e in self.employees.values() if e.manager_id is None), None)

    def all_employees(self) -> list[Employee]:
        return list(self.employees.values())

    def employees_in_department(self, department: str) -> list[Employee]:
        return [e for e in self.employees.values() if e.department == department]

    def get_by_status(self, status: str) -> list[Employee]:
        return [e for e in self.employees.values() if e.status == status]

    def direct_reports(self, manager_id: str) -> list[Employee]:
        return [self.employees[i] for i in self.org_tree.get(manager_id, [])]

    def active_on(self, day: date) -> list[Employee]:
        """Employees hired by ``day`` and not terminated before it."""
        return [e for e in self.employees.values() if active_on(e, day)]

    def all_cycles(self) -> list[ReviewCycle]:
        return list(self.review_cycles.values())

    def get_cycle(self, cycle_id: str) -> Optional[ReviewCycle]:
        return self.review_cycles.get(cycle_id)

    def __len__(self) -> int:
        return len(self.employees)

    def __contains__(self, emp_id: object) -> bool:
        return emp_id in self.employees
