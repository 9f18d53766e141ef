"""Performance generator: ratings and narrative reviews per eligible (employee, cycle)."""

import pandas as pd
from rich.table import Table

from config.company_profile import DEPARTMENTS, RATING_BAND_FLOORS, RATING_DISTRIBUTION, RATING_RANGES
from config.settings import PERFORMANCE_SEED
from synthetic_org.generators.base_generator import BaseGenerator, console
from synthetic_org.generators.identity import rating_id, review_id
from synthetic_org.generators.narratives import NarrativeBuilder
from synthetic_org.generators.overrides import OverrideTable
from synthetic_org.generators.registry import Employee, ReviewCycle
from synthetic_org.generators.temporal import days_before, employed_during

TEMPLATE_KEYS = {d["name"]: d["template_key"] for d in DEPARTMENTS}


def band_for_score(score: float) -> str:
    """Classify a final overall score into its band."""
    for band, floor in RATING_BAND_FLOORS:
        if score >= floor:
            return band
    return RATING_BAND_FLOORS[-1][0]


def performance_stats(ratings: pd.DataFrame) -> dict:
    """Band distribution, per-cycle counts and mean rating. Read-only view."""
    if ratings.empty:
        return {"total": 0, "distribution": {}, "by_cycle": {}, "average": None}
    bands = ratings["overall_rating"].map(band_for_score)
    distribution = bands.value_counts().reindex(list(RATING_DISTRIBUTION), fill_value=0)
    return {
        "total": len(ratings),
        "distribution": {band: int(n) for band, n in distribution.items()},
        "distribution_pct": {
            band: round(100.0 * int(n) / len(ratings), 1) for band, n in distribution.items()
        },
        "by_cycle": {k: int(v) for k, v in ratings.groupby("review_cycle_id").size().items()},
        "average": round(float(ratings["overall_rating"].mean()), 2),
    }


class PerformanceGenerator(BaseGenerator):
    name = "performance"
    default_seed = PERFORMANCE_SEED

    def __init__(self, registry, seed=None, output_dir=None, overrides=None):
        super().__init__(registry, seed=seed, output_dir=output_dir)
        self.overrides = OverrideTable.from_config() if overrides is None else overrides
        self.narratives = NarrativeBuilder(self.sampler)

    def generate(self) -> None:
        ratings = []
        reviews = []
        cycles = self.registry.all_cycles()

        for emp in self.registry.all_employees():
            # The root has nobody to review them
            if emp.manager_id is None:
                continue

            for cycle in cycles:
                if not self.is_eligible(emp, cycle):
                    continue

                rating = self._generate_rating(emp, cycle)
                ratings.append(rating)
                reviews.append(self._generate_review(emp, cycle, rating))

        self.register_table("ratings", pd.DataFrame(ratings))
        self.register_table("reviews", pd.DataFrame(reviews))

    def is_eligible(self, emp: Employee, cycle: ReviewCycle) -> bool:
        """Employed at some point during the cycle, within any narrative window."""
        if not employed_during(emp, cycle.start_date, cycle.end_date):
            return False
        policy = self.overrides.get(emp.email)
        return policy.performance.allows(cycle.cycle_id) if policy else True

    def _pick_band(self, emp: Employee, cycle: ReviewCycle) -> str:
        policy = self.overrides.get(emp.email)
        weights = policy.performance.band_weights(cycle.cycle_id) if policy else None
        return self.sampler.weighted_choice(weights or RATING_DISTRIBUTION)

    def _overall_score(self, emp: Employee, cycle: ReviewCycle, band: str) -> float:
        low, high = RATING_RANGES[band]
        score = self.sampler.uniform(low, high)

        policy = self.overrides.get(emp.email)
        if policy:
            score = policy.performance.adjust(score, cycle.cycle_id, self.sampler)

        return round(min(5.0, max(1.0, score)), 1)

    def _sub_score(self, overall: float) -> float:
        jitter = (self.sampler.random() - 0.5) * 0.4
        return round(max(1.0, min(5.0, overall + jitter)), 1)

    def _generate_rating(self, emp: Employee, cycle: ReviewCycle) -> dict:
        band = self._pick_band(emp, cycle)
        overall = self._overall_score(emp, cycle, band)
        goals = self._sub_score(overall)
        competency = self._sub_score(overall)

        # Submitted within two weeks of the cycle end
        submitted_at = days_before(cycle.end_date, self.sampler.integer(0, 14))

        return {
            "id": rating_id(emp.employee_id, cycle.cycle_id),
            "employee_id": emp.employee_id,
            "review_cycle_id": cycle.cycle_id,
            "reviewer_id": emp.manager_id,
            "overall_rating": overall,
            "goals_rating": goals,
            "competency_rating": competency,
            "submitted_at": submitted_at.isoformat(),
        }

    def _generate_review(self, emp: Employee, cycle: ReviewCycle, rating: dict) -> dict:
        # Narrative follows the final score, so pinned narratives read consistently
        band = band_for_score(rating["overall_rating"])
        sections = self.narratives.review_sections(
            emp.full_name, TEMPLATE_KEYS.get(emp.department, "generic"), band,
        )
        return {
            "id": review_id(emp.employee_id, cycle.cycle_id),
            "employee_id": emp.employee_id,
            "review_cycle_id": cycle.cycle_id,
            "reviewer_id": emp.manager_id,
            **sections,
            "submitted_at": rating["submitted_at"],
        }

    def validate(self) -> list[str]:
        errors = super().validate()

        ratings_df = self._dataframes.get("ratings")
        if ratings_df is not None and not ratings_df.empty:
            for col in ("overall_rating", "goals_rating", "competency_rating"):
                out_of_range = ratings_df[(ratings_df[col] < 1.0) | (ratings_df[col] > 5.0)]
                if len(out_of_range) > 0:
                    errors.append(f"{len(out_of_range)} ratings with {col} outside 1.0-5.0")

            orphans = set(ratings_df["employee_id"]) - set(self.registry.employees)
            if orphans:
                errors.append(f"{len(orphans)} ratings reference non-existent employees")

            unknown_cycles = set(ratings_df["review_cycle_id"]) - set(self.registry.review_cycles)
            if unknown_cycles:
                errors.append(f"Ratings reference unknown cycles: {unknown_cycles}")

            if ratings_df["id"].duplicated().any():
                errors.append("Duplicate rating ids generated")

        return errors

    def summary(self) -> None:
        super().summary()

        stats = performance_stats(self._dataframes.get("ratings", pd.DataFrame()))
        table = Table(title="Rating Distribution")
        table.add_column("Band", style="cyan")
        table.add_column("Target", justify="right")
        table.add_column("Actual", justify="right", style="green")
        for band, target in RATING_DISTRIBUTION.items():
            table.add_row(
                band, f"{target * 100:.0f}%", f"{stats.get('distribution_pct', {}).get(band, 0)}%"
            )
        console.print(table)
        console.print(f"  Average rating: {stats['average']}")
        if self.narratives.malformed:
            console.print(
                f"  [yellow]{len(self.narratives.malformed)} malformed templates fell back "
                f"to literal text[/yellow]"
            )
