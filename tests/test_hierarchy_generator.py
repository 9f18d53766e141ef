"""Employee hierarchy: shape, headcounts, status mix and named individuals."""

from collections import Counter
from datetime import date

from config.company_profile import COMPANY, DEPARTMENTS, ROOT_EMPLOYEE
from synthetic_org.generators.hierarchy_generator import HierarchyGenerator
from synthetic_org.generators.registry import Registry


def test_exactly_one_root(registry):
    roots = [e for e in registry.all_employees() if e.manager_id is None]
    assert len(roots) == 1
    assert roots[0].email == ROOT_EMPLOYEE["email"]
    assert registry.all_employees()[0] is roots[0]


def test_managers_registered_before_reports(registry):
    seen = set()
    for emp in registry.all_employees():
        if emp.manager_id is not None:
            assert emp.manager_id in seen
        seen.add(emp.employee_id)


def test_every_chain_reaches_root(registry):
    root_id = registry.root().employee_id
    for emp in registry.all_employees():
        current, hops = emp, 0
        while current.manager_id is not None:
            current = registry.get_by_id(current.manager_id)
            hops += 1
            assert hops < 10
        assert current.employee_id == root_id


def test_total_headcount(registry):
    assert len(registry) == COMPANY["total_employees"]


def test_department_targets_met(registry):
    counts = Counter(e.department for e in registry.all_employees())
    assert counts == {d["name"]: d["target"] for d in DEPARTMENTS}


def test_status_mix(registry):
    counts = Counter(e.status for e in registry.all_employees())
    assert counts == {"active": 82, "terminated": 12, "leave": 6}


def test_department_heads_report_to_root(hierarchy, registry):
    root_id = registry.root().employee_id
    assert set(hierarchy.heads) == {d["name"] for d in DEPARTMENTS}
    for dept in DEPARTMENTS:
        head = registry.get_by_id(hierarchy.heads[dept["name"]])
        assert head.manager_id == root_id
        assert head.job_title == dept["head_title"]
        assert date(2015, 1, 1) <= head.hire_date <= date(2021, 12, 31)


def test_manager_counts(hierarchy):
    for dept in DEPARTMENTS:
        assert len(hierarchy.managers[dept["name"]]) == dept["manager_count"]


def test_emails_unique(registry):
    emails = [e.email for e in registry.all_employees()]
    assert len(emails) == len(set(emails))
    assert all(e.endswith("@" + COMPANY["email_domain"]) for e in emails)


def test_terminations_after_hire_and_not_in_future(registry):
    for emp in registry.get_by_status("terminated"):
        assert emp.termination_date is not None
        assert emp.termination_reason is not None
        assert emp.hire_date < emp.termination_date <= COMPANY["reference_date"]
    for emp in registry.all_employees():
        if emp.status != "terminated":
            assert emp.termination_date is None


def test_every_employee_has_demographics(registry):
    for emp in registry.all_employees():
        assert emp.date_of_birth is not None
        assert emp.date_of_birth < emp.hire_date
        assert emp.gender
        assert emp.ethnicity
        assert emp.work_state


def test_named_individuals_present_with_exact_attributes(registry):
    sarah = registry.get_by_email("sarah.chen@acmecorp.com")
    assert sarah.full_name == "Sarah Chen"
    assert sarah.department == "Marketing"
    assert sarah.hire_date == date(2021, 3, 15)

    amanda = registry.get_by_email("amanda.foster@acmecorp.com")
    assert amanda.status == "terminated"
    assert amanda.termination_date == date(2024, 11, 15)
    assert amanda.termination_reason == "voluntary"

    assert registry.get_by_email("david.nguyen@acmecorp.com").status == "leave"
    assert registry.get_by_email("lisa.thompson@acmecorp.com").hire_date == date(2020, 12, 20)
    assert registry.get_by_email("michael.brown@acmecorp.com").work_state == "California"


def test_named_manager_leads_a_team(hierarchy, registry):
    jennifer = registry.get_by_email("jennifer.walsh@acmecorp.com")
    assert jennifer.employee_id in hierarchy.managers["Engineering"]
    assert jennifer.manager_id == hierarchy.heads["Engineering"]
    assert jennifer.date_of_birth == date(1985, 4, 22)
    assert jennifer.ethnicity == "White"
    assert len(registry.direct_reports(jennifer.employee_id)) > 0


def test_named_contributors_report_within_department(registry):
    for email in ["elena.rodriguez@acmecorp.com", "marcus.johnson@acmecorp.com",
                  "robert.kim@acmecorp.com"]:
        emp = registry.get_by_email(email)
        assert registry.get_by_id(emp.manager_id).department == emp.department


def test_generation_is_deterministic(registry):
    again = Registry()
    HierarchyGenerator(again).generate()
    assert [e.to_record() for e in again.all_employees()] == [
        e.to_record() for e in registry.all_employees()
    ]


def test_different_seed_changes_generic_people(registry):
    other = Registry()
    HierarchyGenerator(other, seed=7).generate()
    assert len(other) == len(registry)
    assert [e.email for e in other.all_employees()] != [e.email for e in registry.all_employees()]
    # Named identities are seed independent
    assert other.get_by_email("sarah.chen@acmecorp.com").employee_id == (
        registry.get_by_email("sarah.chen@acmecorp.com").employee_id
    )


def test_validate_passes(hierarchy):
    assert hierarchy.validate() == []


def test_top_up_fills_missing_headcount():
    registry = Registry()
    gen = HierarchyGenerator(registry, total_employees=105)
    gen.generate()
    assert len(registry) == 105
