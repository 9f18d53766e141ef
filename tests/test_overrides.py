"""Named-individual override table."""

from synthetic_org.generators.distributions import SeededSampler
from synthetic_org.generators.overrides import OverrideTable, PerformancePolicy


def test_table_loads_all_named_individuals():
    table = OverrideTable.from_config()
    assert len(table) == 10
    assert "sarah.chen@acmecorp.com" in table
    assert table.get("nobody@acmecorp.com") is None
    assert table.by_key("SARAH_CHEN").email == "sarah.chen@acmecorp.com"


def test_managers_and_contributors_partition_table():
    table = OverrideTable.from_config()
    managers = table.managers_in("Engineering")
    assert [p.key for p in managers] == ["JENNIFER_WALSH"]
    assert table.managers_in("Sales") == []
    assert len(table.contributors()) + len(managers) == len(table)


def test_engagement_policies():
    table = OverrideTable.from_config()
    sarah = table.by_key("SARAH_CHEN").engagement
    assert sarah.pattern == "declining"
    assert sarah.scores == (9, 7, 6)
    assert table.by_key("JENNIFER_WALSH").engagement.team_pattern == "manager_driven_low"
    assert table.by_key("ROBERT_KIM").engagement.pattern is None


def test_eligibility_windows():
    table = OverrideTable.from_config()
    james = table.by_key("JAMES_PARK").performance
    assert not james.allows("rc_2023_annual")
    assert james.allows("rc_2024_annual")

    amanda = table.by_key("AMANDA_FOSTER").performance
    assert amanda.allows("rc_2024_annual")
    assert not amanda.allows("rc_2025_q1")

    assert PerformancePolicy().allows("anything")


def test_per_cycle_values_fall_back_to_default():
    marcus = OverrideTable.from_config().by_key("MARCUS_JOHNSON").performance
    assert marcus.band_weights("rc_2023_annual") == {"unsatisfactory": 0.7, "developing": 0.3}
    assert marcus.band_weights("rc_2025_q1") == {"developing": 1.0}
    assert PerformancePolicy().band_weights("rc_2023_annual") is None


def test_adjust_applies_range_then_floor_then_ceiling():
    sampler = SeededSampler(1)
    pinned = PerformancePolicy(score_range={"*": (2.7, 3.0)})
    for _ in range(50):
        assert 2.7 <= pinned.adjust(4.9, "rc_x", sampler) < 3.0

    floored = PerformancePolicy(floor={"*": 4.5})
    assert floored.adjust(4.1, "rc_x", sampler) == 4.5
    assert floored.adjust(4.9, "rc_x", sampler) == 4.9

    capped = PerformancePolicy(ceiling={"rc_a": 2.4})
    assert capped.adjust(2.8, "rc_a", sampler) == 2.4
    assert capped.adjust(2.8, "rc_b", sampler) == 2.8


def test_team_pattern_follows_manager(registry):
    table = OverrideTable.from_config()
    jennifer = registry.get_by_email("jennifer.walsh@acmecorp.com")
    report = registry.direct_reports(jennifer.employee_id)[0]
    assert table.team_pattern_for(report, registry) == "manager_driven_low"
    assert table.team_pattern_for(registry.root(), registry) is None
    assert table.team_pattern_for(jennifer, registry) is None


def test_custom_config():
    table = OverrideTable.from_config([
        {"key": "X", "email": "x@example.com", "department": "HR", "role": "manager"},
    ])
    assert table.managers_in("HR")[0].key == "X"
    assert table.contributors() == []
