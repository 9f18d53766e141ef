"""Shared fixtures: one generated organization per test session."""

import pytest

from synthetic_org.generators.enps_generator import EnpsGenerator
from synthetic_org.generators.hierarchy_generator import HierarchyGenerator
from synthetic_org.generators.performance_generator import PerformanceGenerator
from synthetic_org.generators.registry import Registry
from synthetic_org.generators.review_cycle_generator import ReviewCycleGenerator


@pytest.fixture(scope="session")
def output_dir(tmp_path_factory):
    return tmp_path_factory.mktemp("generated")


@pytest.fixture(scope="session")
def hierarchy(output_dir):
    """Phase 1 generators, run but not saved."""
    registry = Registry()
    cycles = ReviewCycleGenerator(registry, output_dir=output_dir)
    cycles.generate()
    gen = HierarchyGenerator(registry, output_dir=output_dir)
    gen.generate()
    return gen


@pytest.fixture(scope="session")
def registry(hierarchy):
    return hierarchy.registry


@pytest.fixture(scope="session")
def performance(registry, output_dir):
    gen = PerformanceGenerator(registry, output_dir=output_dir)
    gen.generate()
    return gen


@pytest.fixture(scope="session")
def ratings(performance):
    return performance.dataframes["ratings"]


@pytest.fixture(scope="session")
def reviews(performance):
    return performance.dataframes["reviews"]


@pytest.fixture(scope="session")
def enps(registry, output_dir):
    gen = EnpsGenerator(registry, output_dir=output_dir)
    gen.generate()
    return gen


@pytest.fixture(scope="session")
def responses(enps):
    return enps.dataframes["enps_responses"]


@pytest.fixture
def small_registry():
    """Root, one manager, one report."""
    from datetime import date

    registry = Registry()
    root = registry.register(
        email="root@example.com", full_name="Root Person", department="Executive",
        job_title="CEO", manager_id=None, hire_date=date(2015, 1, 1), work_state="California",
    )
    manager = registry.register(
        email="manager@example.com", full_name="Mid Person", department="Engineering",
        job_title="Engineering Manager", manager_id=root.employee_id,
        hire_date=date(2018, 6, 1), work_state="Texas",
    )
    registry.register(
        email="ic@example.com", full_name="Leaf Person", department="Engineering",
        job_title="Software Engineer", manager_id=manager.employee_id,
        hire_date=date(2023, 2, 1), work_state="Texas", status="terminated",
        termination_date=date(2024, 7, 1), termination_reason="voluntary",
    )
    return registry
