"""Narrative policies for named individuals, looked up by stable email."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from config.named_individuals import NAMED_INDIVIDUALS

if TYPE_CHECKING:
    from synthetic_org.generators.distributions import SeededSampler
    from synthetic_org.generators.registry import Employee, Registry

DEFAULT = "*"

# Profile keys copied verbatim onto the registered employee
PROFILE_FIELDS = (
    "email", "full_name", "department", "job_title", "hire_date", "status",
    "gender", "work_state", "date_of_birth", "ethnicity",
    "termination_date", "termination_reason",
)


def _per_cycle(mapping: dict[str, Any], cycle_id: str) -> Any:
    return mapping.get(cycle_id, mapping.get(DEFAULT))


@dataclass(frozen=True)
class PerformancePolicy:
    bands: dict[str, dict[str, float]] = field(default_factory=dict)
    floor: dict[str, float] = field(default_factory=dict)
    ceiling: dict[str, float] = field(default_factory=dict)
    score_range: dict[str, tuple[float, float]] = field(default_factory=dict)
    eligible_cycles: Optional[frozenset[str]] = None
    excluded_cycles: frozenset[str] = frozenset()

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> PerformancePolicy:
        eligible = cfg.get("eligible_cycles")
        return cls(
            bands=cfg.get("bands", {}),
            floor=cfg.get("floor", {}),
            ceiling=cfg.get("ceiling", {}),
            score_range=cfg.get("range", {}),
            eligible_cycles=frozenset(eligible) if eligible is not None else None,
            excluded_cycles=frozenset(cfg.get("excluded_cycles", [])),
        )

    def allows(self, cycle_id: str) -> bool:
        """Extra eligibility window on top of the hire/termination predicate."""
        if self.eligible_cycles is not None and cycle_id not in self.eligible_cycles:
            return False
        return cycle_id not in self.excluded_cycles

    def band_weights(self, cycle_id: str) -> Optional[dict[str, float]]:
        return _per_cycle(self.bands, cycle_id)

    def adjust(self, score: float, cycle_id: str, sampler: "SeededSampler") -> float:
        """Pin a sampled score to the narrative: fixed range, then floor/ceiling."""
        pinned = _per_cycle(self.score_range, cycle_id)
        if pinned is not None:
            low, high = pinned
            score = low + sampler.random() * (high - low)
        floor = _per_cycle(self.floor, cycle_id)
        if floor is not None:
            score = max(score, floor)
        ceiling = _per_cycle(self.ceiling, cycle_id)
        if ceiling is not None:
            score = min(score, ceiling)
        return score


@dataclass(frozen=True)
class EngagementPolicy:
    pattern: Optional[str] = None
    scores: Optional[tuple[int, ...]] = None
    team_pattern: Optional[str] = None


@dataclass(frozen=True)
class NarrativePolicy:
    key: str
    narrative: str
    role: str
    profile: dict[str, Any]
    performance: PerformancePolicy
    engagement: EngagementPolicy

    @property
    def email(self) -> str:
        return self.profile["email"]

    @property
    def department(self) -> str:
        return self.profile["department"]

    @property
    def is_manager(self) -> bool:
        return self.role == "manager"

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> NarrativePolicy:
        enps = cfg.get("enps", {})
        scores = enps.get("scores")
        return cls(
            key=cfg["key"],
            narrative=cfg.get("narrative", ""),
            role=cfg.get("role", "individual_contributor"),
            profile={k: cfg[k] for k in PROFILE_FIELDS if k in cfg},
            performance=PerformancePolicy.from_config(cfg.get("performance", {})),
            engagement=EngagementPolicy(
                pattern=enps.get("pattern"),
                scores=tuple(scores) if scores is not None else None,
                team_pattern=cfg.get("team_enps", {}).get("pattern"),
            ),
        )


class OverrideTable:
    """Stable identity -> narrative policy, consulted uniformly by every generator."""

    def __init__(self, policies: list[NarrativePolicy]):
        self._by_email = {p.email: p for p in policies}
        self._by_key = {p.key: p for p in policies}

    @classmethod
    def from_config(cls, config: Optional[list[dict[str, Any]]] = None) -> OverrideTable:
        entries = NAMED_INDIVIDUALS if config is None else config
        return cls([NarrativePolicy.from_config(cfg) for cfg in entries])

    def __iter__(self):
        return iter(self._by_email.values())

    def __len__(self) -> int:
        return len(self._by_email)

    def __contains__(self, email: object) -> bool:
        return email in self._by_email

    def get(self, email: str) -> Optional[NarrativePolicy]:
        return self._by_email.get(email)

    def by_key(self, key: str) -> NarrativePolicy:
        return self._by_key[key]

    def emails(self) -> list[str]:
        return list(self._by_email)

    def managers_in(self, department: str) -> list[NarrativePolicy]:
        return [p for p in self if p.is_manager and p.department == department]

    def contributors(self) -> list[NarrativePolicy]:
        return [p for p in self if not p.is_manager]

    def team_pattern_for(self, employee: "Employee", registry: "Registry") -> Optional[str]:
        """Pattern imposed on an employee by their manager's narrative, if any."""
        if employee.manager_id is None:
            return None
        manager = registry.get_by_id(employee.manager_id)
        if manager is None:
            return None
        policy = self.get(manager.email)
        return policy.engagement.team_pattern if policy else None
