"""eNPS generator: pulse-survey responses with per-employee score trajectories."""

from dataclasses import dataclass
from typing import Optional

import pandas as pd
from rich.table import Table

from config.company_profile import (
    ENPS_PATTERN_WEIGHTS, FEEDBACK_RATE, MANAGER_DRIVEN_SCORES, SURVEY_RESPONSE_RATE,
    SURVEYS, TEAM_AVERAGE_TARGET,
)
from config.enps_feedback import FEEDBACK
from config.settings import ENPS_SEED
from synthetic_org.generators.base_generator import BaseGenerator, console
from synthetic_org.generators.identity import enps_response_id
from synthetic_org.generators.overrides import OverrideTable
from synthetic_org.generators.registry import Employee, Registry
from synthetic_org.generators.temporal import active_on, days_after

STABLE_RANGES = {
    "stable_high": (9, 10),
    "stable_mid": (7, 8),
    "stable_low": (4, 6),
}


def score_tier(score: int) -> str:
    if score >= 9:
        return "promoter"
    if score >= 7:
        return "passive"
    return "detractor"


def enps_score(scores) -> int:
    """%promoters minus %detractors, rounded to an integer."""
    scores = list(scores)
    if not scores:
        return 0
    promoters = sum(1 for s in scores if s >= 9)
    detractors = sum(1 for s in scores if s <= 6)
    return round(100.0 * (promoters - detractors) / len(scores))


def enps_by_survey(responses: pd.DataFrame, surveys: list[dict] = SURVEYS) -> dict[str, int]:
    """eNPS per survey, in survey order."""
    if responses.empty:
        return {}
    result = {}
    for survey in surveys:
        scores = responses.loc[responses["survey_name"] == survey["name"], "score"]
        if len(scores) > 0:
            result[survey["name"]] = enps_score(scores)
    return result


def score_distribution(responses: pd.DataFrame) -> dict[int, int]:
    """Count of responses for every score 0-10."""
    counts = {score: 0 for score in range(11)}
    if not responses.empty:
        for score, n in responses["score"].value_counts().items():
            counts[int(score)] = int(n)
    return counts


def team_average(responses: pd.DataFrame, registry: Registry, manager_id: str) -> Optional[float]:
    """Mean score over the responses of a manager's direct reports."""
    team = {e.employee_id for e in registry.direct_reports(manager_id)}
    if responses.empty or not team:
        return None
    scores = responses.loc[responses["employee_id"].isin(team), "score"]
    return round(float(scores.mean()), 2) if len(scores) > 0 else None


def team_averages(responses: pd.DataFrame, registry: Registry) -> dict[str, float]:
    """Per-manager team averages for every manager with at least one response."""
    averages = {}
    for emp in registry.all_employees():
        avg = team_average(responses, registry, emp.employee_id)
        if avg is not None:
            averages[emp.employee_id] = avg
    return averages


@dataclass(frozen=True)
class Trajectory:
    """One employee's engagement behavior across all surveys."""

    pattern: str
    base: int = 0
    delta: int = 0
    fixed: Optional[tuple[int, ...]] = None


class EnpsGenerator(BaseGenerator):
    name = "enps_responses"
    default_seed = ENPS_SEED

    def __init__(self, registry, seed=None, output_dir=None, overrides=None, surveys=None):
        super().__init__(registry, seed=seed, output_dir=output_dir)
        self.overrides = OverrideTable.from_config() if overrides is None else overrides
        self.surveys = SURVEYS if surveys is None else surveys
        self._trajectories: dict[str, Trajectory] = {}

    def generate(self) -> None:
        responses = []

        for survey_index, survey in enumerate(self.surveys):
            for emp in self.registry.all_employees():
                if not self._responds(emp, survey["date"]):
                    continue

                trajectory = self.trajectory_for(emp)
                score = self._score(trajectory, survey_index)
                feedback = self._feedback(score, trajectory.pattern)
                # Submitted within a few days of the survey
                submitted_at = days_after(survey["date"], self.sampler.integer(0, 5))

                responses.append({
                    "id": enps_response_id(emp.employee_id, survey["date"].isoformat()),
                    "employee_id": emp.employee_id,
                    "survey_date": survey["date"].isoformat(),
                    "survey_name": survey["name"],
                    "score": score,
                    "feedback_text": feedback,
                    "submitted_at": submitted_at.isoformat(),
                })

        self.register_table("enps_responses", pd.DataFrame(responses))

    def _responds(self, emp: Employee, survey_date) -> bool:
        if emp.manager_id is None:
            return False
        if not active_on(emp, survey_date):
            return False
        if emp.email in self.overrides:
            return True
        return self.sampler.random() < SURVEY_RESPONSE_RATE

    def trajectory_for(self, emp: Employee) -> Trajectory:
        """Memoized on first encounter so every survey follows the same path."""
        if emp.employee_id not in self._trajectories:
            self._trajectories[emp.employee_id] = self._draw_trajectory(emp)
        return self._trajectories[emp.employee_id]

    def _draw_trajectory(self, emp: Employee) -> Trajectory:
        policy = self.overrides.get(emp.email)
        fixed = policy.engagement.scores if policy else None
        pattern = policy.engagement.pattern if policy else None

        if pattern is None:
            pattern = self.overrides.team_pattern_for(emp, self.registry)
        if pattern is None:
            pattern = self.sampler.weighted_choice(ENPS_PATTERN_WEIGHTS)

        if pattern == "declining":
            return Trajectory(pattern, self.sampler.integer(8, 10), self.sampler.integer(1, 3), fixed)
        if pattern == "improving":
            return Trajectory(pattern, self.sampler.integer(5, 7), self.sampler.integer(1, 3), fixed)
        return Trajectory(pattern, fixed=fixed)

    def _score(self, trajectory: Trajectory, survey_index: int) -> int:
        if trajectory.fixed is not None and survey_index < len(trajectory.fixed):
            return trajectory.fixed[survey_index]

        pattern = trajectory.pattern
        if pattern in STABLE_RANGES:
            low, high = STABLE_RANGES[pattern]
            return self.sampler.integer(low, high + 1)
        if pattern == "declining":
            return max(0, min(10, trajectory.base - survey_index * trajectory.delta))
        if pattern == "improving":
            return max(0, min(10, trajectory.base + survey_index * trajectory.delta))
        if pattern == "manager_driven_low":
            return self.sampler.weighted_choice(MANAGER_DRIVEN_SCORES)
        raise ValueError(f"Unknown eNPS pattern: {pattern}")

    def _feedback(self, score: int, pattern: str) -> Optional[str]:
        if self.sampler.random() > FEEDBACK_RATE:
            return None

        tier = score_tier(score)
        if tier == "detractor":
            if pattern == "manager_driven_low":
                tier = "manager_issue"
            elif pattern == "declining":
                tier = "declining"
        return self.sampler.choice(FEEDBACK[tier])

    def validate(self) -> list[str]:
        errors = super().validate()

        df = self._dataframes.get("enps_responses")
        if df is None or df.empty:
            return errors

        out_of_range = df[(df["score"] < 0) | (df["score"] > 10)]
        if len(out_of_range) > 0:
            errors.append(f"{len(out_of_range)} responses with score outside 0-10")

        orphans = set(df["employee_id"]) - set(self.registry.employees)
        if orphans:
            errors.append(f"{len(orphans)} responses reference non-existent employees")

        if df["id"].duplicated().any():
            errors.append("Duplicate eNPS response ids generated")

        # Fixed narratives must come through unchanged
        for policy in self.overrides:
            fixed = policy.engagement.scores
            emp = self.registry.get_by_email(policy.email)
            if fixed is None or emp is None:
                continue
            actual = df.loc[df["employee_id"] == emp.employee_id, "score"].tolist()
            if actual != list(fixed[:len(actual)]):
                errors.append(f"{policy.email} scores {actual} do not follow {list(fixed)}")

        return errors

    def summary(self) -> None:
        super().summary()

        df = self._dataframes.get("enps_responses", pd.DataFrame())
        table = Table(title="eNPS by Survey")
        table.add_column("Survey", style="cyan")
        table.add_column("Responses", justify="right")
        table.add_column("eNPS", justify="right", style="green")
        per_survey = enps_by_survey(df, self.surveys)
        for survey in self.surveys:
            n = int((df["survey_name"] == survey["name"]).sum()) if not df.empty else 0
            table.add_row(survey["name"], str(n), str(per_survey.get(survey["name"], "-")))
        console.print(table)

        low, high = TEAM_AVERAGE_TARGET
        for policy in self.overrides:
            if policy.engagement.team_pattern is None:
                continue
            manager = self.registry.get_by_email(policy.email)
            if manager is None:
                continue
            avg = team_average(df, self.registry, manager.employee_id)
            style = "green" if avg is not None and low <= avg <= high else "yellow"
            console.print(f"  [{style}]{manager.full_name}'s team average: {avg}[/{style}]")
