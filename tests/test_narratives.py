"""Template filling and the malformed-template fallback."""

import pytest

from synthetic_org.generators.distributions import SeededSampler
from synthetic_org.generators.errors import MalformedTemplateError
from synthetic_org.generators.narratives import NarrativeBuilder, fill_template


def test_fill_template_draws_per_occurrence():
    counter = iter(range(10))
    result = fill_template("{n} and {n}", {"n": lambda: str(next(counter))})
    assert result == "0 and 1"


def test_fill_template_rejects_unknown_placeholder():
    with pytest.raises(MalformedTemplateError) as excinfo:
        fill_template("Shipped {feature} for {widget}", {"feature": lambda: "x"})
    assert excinfo.value.unknown == ["widget"]


def test_builder_falls_back_to_literal_text():
    templates = {
        "strengths": {"meets": ["Reliable on {gizmo}"]},
        "areas_for_improvement": {"meets": ["Could own more of the {project}"]},
        "manager_comments": {"meets": ["Good cycle, {name}."]},
        "accomplishments": {"generic": ["Delivered {count} things", "Fixed {gizmo}"]},
    }
    builder = NarrativeBuilder(SeededSampler(1), templates=templates)
    sections = builder.review_sections("Pat Doe", "unknown_department", "meets")

    assert sections["strengths"] == "Reliable on {gizmo}"
    assert "{project}" not in sections["areas_for_improvement"]
    assert sections["manager_comments"] == "Good cycle, Pat."
    assert "Fixed {gizmo}" in sections["accomplishments"]
    assert len(builder.malformed) == 2
    assert all(isinstance(e, MalformedTemplateError) for e in builder.malformed)


def test_accomplishment_count_follows_band():
    builder = NarrativeBuilder(SeededSampler(2))
    high = builder.accomplishments("engineering", "exceptional")
    low = builder.accomplishments("engineering", "developing")
    assert high.count(". ") == 2
    assert low.count(". ") == 1
    assert high.endswith(".") and low.endswith(".")


def test_unknown_band_uses_meets_templates():
    builder = NarrativeBuilder(SeededSampler(3))
    assert builder.fill(builder._pick("strengths", "no_such_band", "meets"))


def test_same_seed_same_narrative():
    first = NarrativeBuilder(SeededSampler(4)).review_sections("Sam Lee", "sales", "exceeds")
    second = NarrativeBuilder(SeededSampler(4)).review_sections("Sam Lee", "sales", "exceeds")
    assert first == second
