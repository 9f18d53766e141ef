"""Hierarchy generator: employees and the reporting tree, built strictly top-down.

Generation order: root -> department heads -> managers -> named individual
contributors -> generic fill to department targets -> global top-up. No step
references an employee that an earlier step has not registered.
"""

import re
from collections import Counter
from datetime import date
from typing import Optional

import pandas as pd
from rich.table import Table

from config.company_profile import (
    COMPANY, DEPARTMENTS, ETHNICITY_DISTRIBUTION, GENDER_DISTRIBUTION,
    HEAD_HIRE_WINDOW, ROOT_EMPLOYEE, STATUS_TARGETS, TENURE_RANGES,
    TERMINATION_REASONS, TERMINATION_WINDOW, WORK_STATE_DISTRIBUTION,
)
from config.name_pools import FIRST_NAMES, GENDER_NAME_POOL, LAST_NAMES
from config.settings import HIERARCHY_SEED
from synthetic_org.generators.base_generator import BaseGenerator, console
from synthetic_org.generators.distributions import birth_date_from_age, random_date_between
from synthetic_org.generators.overrides import NarrativePolicy, OverrideTable
from synthetic_org.generators.registry import Employee
from synthetic_org.generators.temporal import days_after


class HierarchyGenerator(BaseGenerator):
    name = "employees"
    default_seed = HIERARCHY_SEED

    def __init__(self, registry, seed=None, output_dir=None, departments=None,
                 total_employees=None, status_targets=None, overrides=None):
        super().__init__(registry, seed=seed, output_dir=output_dir)
        self.departments = DEPARTMENTS if departments is None else departments
        self.total_employees = (
            COMPANY["total_employees"] if total_employees is None else total_employees
        )
        self.status_targets = STATUS_TARGETS if status_targets is None else status_targets
        self.overrides = OverrideTable.from_config() if overrides is None else overrides

        self._dept_by_name = {d["name"]: d for d in self.departments}
        self._used_emails: set[str] = set()
        self.heads: dict[str, str] = {}
        self.managers: dict[str, list[str]] = {}

    def generate(self) -> None:
        # Fixed identities are reserved up front so generic names never take them
        self._used_emails = {ROOT_EMPLOYEE["email"], *self.overrides.emails()}

        # 1. Root of the tree
        root = self._register_root()

        # 2. One head per department, reporting to the root
        self._register_heads(root)

        # 3. Managers reporting to their department head
        self._register_managers()

        # 4. Named individual contributors with their exact attributes
        self._register_named_contributors()

        # 5. Generic individual contributors up to each department's target
        self._fill_departments()

        # 6. Anything still missing from the company total
        self._top_up()

        self.register_table(
            "employees", pd.DataFrame([e.to_record() for e in self.registry.all_employees()])
        )

    # -- steps -------------------------------------------------------------

    def _register_root(self) -> Employee:
        return self.registry.register(manager_id=None, **ROOT_EMPLOYEE)

    def _register_heads(self, root: Employee) -> None:
        for dept in self.departments:
            hire_date = random_date_between(self.sampler.rng, *HEAD_HIRE_WINDOW)[0]
            head = self._create_generic(
                dept["name"], dept["head_title"], root.employee_id, hire_date=hire_date,
            )
            self.heads[dept["name"]] = head.employee_id

    def _register_managers(self) -> None:
        for dept in self.departments:
            name = dept["name"]
            head_id = self.heads[name]
            managers = []

            # Named managers count against the department's quota
            for policy in self.overrides.managers_in(name):
                managers.append(self._register_named(policy, head_id).employee_id)

            for _ in range(max(0, dept["manager_count"] - len(managers))):
                manager = self._create_generic(name, dept["manager_title"], head_id)
                managers.append(manager.employee_id)

            self.managers[name] = managers

    def _register_named_contributors(self) -> None:
        for policy in self.overrides.contributors():
            dept = policy.department
            managers = self.managers.get(dept, [])

            if "Manager" in policy.profile["job_title"] or not managers:
                manager_id = self.heads[dept]
            else:
                manager_id = self.sampler.choice(managers)

            self._register_named(policy, manager_id)

    def _fill_departments(self) -> None:
        counts = Counter(e.department for e in self.registry.all_employees())
        needed = {
            d["name"]: max(0, d["target"] - counts[d["name"]]) for d in self.departments
        }
        total_needed = sum(needed.values())

        # Spread terminations and leaves evenly across the generic population.
        # Integer division makes this approximate for some size/target mixes.
        terminated_count = len(self.registry.get_by_status("terminated"))
        leave_count = len(self.registry.get_by_status("leave"))
        terminated_target = self.status_targets.get("terminated", 0)
        leave_target = self.status_targets.get("leave", 0)

        terminated_interval = total_needed // (max(0, terminated_target - terminated_count) + 1)
        leave_interval = total_needed // (max(0, leave_target - leave_count) + 1)
        next_terminated_at = terminated_interval
        next_leave_at = int(leave_interval * 0.5)  # offset so the two rarely coincide

        ic_index = 0
        for dept in self.departments:
            name = dept["name"]
            for i in range(needed[name]):
                status = "active"
                if terminated_count < terminated_target and ic_index >= next_terminated_at:
                    status = "terminated"
                    terminated_count += 1
                    next_terminated_at = ic_index + terminated_interval
                elif leave_count < leave_target and ic_index >= next_leave_at:
                    status = "leave"
                    leave_count += 1
                    next_leave_at = ic_index + leave_interval

                self._create_generic(
                    name, self._pick_job_title(dept, ic_index),
                    self._round_robin_manager(name, i), status=status,
                )
                ic_index += 1

    def _top_up(self) -> None:
        remaining = self.total_employees - len(self.registry)
        for i in range(max(0, remaining)):
            dept = self.departments[i % len(self.departments)]
            self._create_generic(
                dept["name"], self._pick_job_title(dept, i),
                self._round_robin_manager(dept["name"], i),
            )

    # -- helpers -------------------------------------------------------------

    def _round_robin_manager(self, department: str, index: int) -> str:
        managers = self.managers.get(department, [])
        return managers[index % len(managers)] if managers else self.heads[department]

    @staticmethod
    def _pick_job_title(dept: dict, index: int) -> str:
        titles = dept.get("ic_titles") or ["Specialist"]
        return titles[index % len(titles)]

    def _register_named(self, policy: NarrativePolicy, manager_id: str) -> Employee:
        profile = dict(policy.profile)
        if "date_of_birth" not in profile:
            profile["date_of_birth"] = birth_date_from_age(
                self.sampler.rng, profile["hire_date"]
            )[0]
        if "ethnicity" not in profile:
            profile["ethnicity"] = self.sampler.weighted_choice(ETHNICITY_DISTRIBUTION)
        return self.registry.register(manager_id=manager_id, **profile)

    def _create_generic(self, department: str, job_title: str, manager_id: Optional[str],
                        hire_date: Optional[date] = None, status: str = "active") -> Employee:
        gender = self.sampler.weighted_choice(GENDER_DISTRIBUTION)
        first_name = self.sampler.choice(FIRST_NAMES[GENDER_NAME_POOL.get(gender, "neutral")])
        last_name = self.sampler.choice(LAST_NAMES)
        email = self._unique_email(first_name, last_name)

        if hire_date is None:
            hire_date = self._pick_hire_date()

        termination_date = None
        termination_reason = None
        if status == "terminated":
            termination_date = self._pick_termination_date(hire_date)
            termination_reason = self.sampler.weighted_choice(TERMINATION_REASONS)

        return self.registry.register(
            email=email,
            full_name=f"{first_name} {last_name}",
            department=department,
            job_title=job_title,
            manager_id=manager_id,
            hire_date=hire_date,
            work_state=self.sampler.weighted_choice(WORK_STATE_DISTRIBUTION),
            status=status,
            date_of_birth=birth_date_from_age(self.sampler.rng, hire_date)[0],
            gender=gender,
            ethnicity=self.sampler.weighted_choice(ETHNICITY_DISTRIBUTION),
            termination_date=termination_date,
            termination_reason=termination_reason,
        )

    def _unique_email(self, first_name: str, last_name: str) -> str:
        first = re.sub(r"[^a-z]", "", first_name.lower())
        last = re.sub(r"[^a-z]", "", last_name.lower())
        domain = COMPANY["email_domain"]

        email = f"{first}.{last}@{domain}"
        counter = 2
        while email in self._used_emails:
            email = f"{first}.{last}{counter}@{domain}"
            counter += 1

        self._used_emails.add(email)
        return email

    def _pick_hire_date(self) -> date:
        start, end = self.sampler.weighted_choice(
            [((start, end), weight) for weight, start, end in TENURE_RANGES]
        )
        return random_date_between(self.sampler.rng, start, end)[0]

    def _pick_termination_date(self, hire_date: date) -> date:
        """A date strictly after hire, never after the reference date."""
        window_start, window_end = TERMINATION_WINDOW
        start = max(window_start, days_after(hire_date, 1))
        end = window_end
        if start > end:
            start, end = days_after(hire_date, 1), COMPANY["reference_date"]
        return random_date_between(self.sampler.rng, start, days_after(end, 1))[0]

    # -- validation ----------------------------------------------------------

    def validate(self) -> list[str]:
        errors = super().validate()

        seen: set[str] = set()
        roots = 0
        for emp in self.registry.all_employees():
            if emp.manager_id is None:
                roots += 1
            elif emp.manager_id not in seen:
                errors.append(f"{emp.email} reports to {emp.manager_id}, not registered earlier")
            seen.add(emp.employee_id)

            if emp.termination_date is not None:
                if emp.termination_date <= emp.hire_date:
                    errors.append(f"{emp.email} terminated on or before hire date")
                if emp.termination_date > COMPANY["reference_date"]:
                    errors.append(f"{emp.email} terminated in the future")

        if roots != 1:
            errors.append(f"Expected exactly one root employee, found {roots}")

        if len(self.registry) < self.total_employees:
            errors.append(
                f"Generated {len(self.registry)} employees, expected {self.total_employees}"
            )

        return errors

    def summary(self) -> None:
        super().summary()

        employees = self.registry.all_employees()
        dept_counts = Counter(e.department for e in employees)
        table = Table(title="Department Distribution")
        table.add_column("Department", style="cyan")
        table.add_column("Target", justify="right")
        table.add_column("Actual", justify="right", style="green")
        for dept in self.departments:
            table.add_row(dept["name"], str(dept["target"]), str(dept_counts[dept["name"]]))
        console.print(table)

        status_counts = Counter(e.status for e in employees)
        console.print(
            f"  Status: active={status_counts['active']}  "
            f"terminated={status_counts['terminated']}  leave={status_counts['leave']}"
        )
