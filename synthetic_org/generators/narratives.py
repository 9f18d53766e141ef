"""Review narrative assembly from band- and department-keyed templates."""

import re
from typing import Callable

from faker import Faker
from rich.markup import escape

from config.review_templates import (
    ACCOMPLISHMENTS, AREAS_FOR_IMPROVEMENT, FEATURES, MANAGER_COMMENTS, PROJECTS,
    STRENGTHS, SYSTEMS,
)
from synthetic_org.generators.base_generator import console
from synthetic_org.generators.distributions import SeededSampler
from synthetic_org.generators.errors import MalformedTemplateError

PLACEHOLDER = re.compile(r"\{(\w+)\}")


def fill_template(template: str, fillers: dict[str, Callable[[], str]]) -> str:
    """Substitute every placeholder, drawing a fresh value per occurrence.

    Raises MalformedTemplateError before substituting anything if the template
    uses a placeholder with no filler.
    """
    unknown = sorted({m for m in PLACEHOLDER.findall(template) if m not in fillers})
    if unknown:
        raise MalformedTemplateError(template, unknown)
    return PLACEHOLDER.sub(lambda m: fillers[m.group(1)](), template)


class NarrativeBuilder:
    """Builds the four free-text sections of a performance review.

    Draws come from the owning generator's sampler; named artifacts such as
    client names come from a Faker instance seeded from the same seed.
    """

    def __init__(self, sampler: SeededSampler, templates=None):
        self.sampler = sampler
        self.fake = Faker("en_US")
        self.fake.seed_instance(sampler.seed)
        self.templates = templates or {
            "strengths": STRENGTHS,
            "areas_for_improvement": AREAS_FOR_IMPROVEMENT,
            "manager_comments": MANAGER_COMMENTS,
            "accomplishments": ACCOMPLISHMENTS,
        }
        self.malformed: list[MalformedTemplateError] = []

    def _fillers(self, first_name: str) -> dict[str, Callable[[], str]]:
        s = self.sampler
        return {
            "feature": lambda: s.choice(FEATURES),
            "system": lambda: s.choice(SYSTEMS),
            "project": lambda: s.choice(PROJECTS),
            "client": lambda: self.fake.company(),
            "percent": lambda: str(s.integer(10, 50)),
            "count": lambda: str(s.integer(2, 8)),
            "amount": lambda: str(s.integer(20, 100)),
            "hours": lambda: str(s.integer(5, 20)),
            "days": lambda: str(s.integer(2, 7)),
            "points": lambda: str(s.integer(5, 15)),
            "name": lambda: first_name,
        }

    def fill(self, template: str, first_name: str = "") -> str:
        """Fill a template; on unknown placeholders warn and keep the literal text."""
        try:
            return fill_template(template, self._fillers(first_name))
        except MalformedTemplateError as exc:
            self.malformed.append(exc)
            console.print(f"  [yellow]WARNING: {escape(str(exc))}. Using template text as-is.[/yellow]")
            return template

    def _pick(self, section: str, key: str, fallback: str) -> str:
        options = self.templates[section]
        return self.sampler.choice(options.get(key) or options[fallback])

    def accomplishments(self, template_key: str, band: str) -> str:
        pool = self.templates["accomplishments"]
        templates = pool.get(template_key) or pool["generic"]
        count = 3 if band in ("exceptional", "exceeds") else 2
        items = [self.fill(t) for t in self.sampler.sample(templates, count)]
        return ". ".join(items) + "."

    def review_sections(self, full_name: str, template_key: str, band: str) -> dict[str, str]:
        first_name = full_name.split(" ")[0]
        return {
            "strengths": self.fill(self._pick("strengths", band, "meets"), first_name),
            "areas_for_improvement": self.fill(
                self._pick("areas_for_improvement", band, "meets"), first_name
            ),
            "accomplishments": self.accomplishments(template_key, band),
            "manager_comments": self.fill(
                self._pick("manager_comments", band, "meets"), first_name
            ),
        }
