"""Snapshot transport: carries a finished registry from phase 1 to phase 2."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from config.settings import SNAPSHOT_FILENAME
from synthetic_org.generators.errors import CorruptSnapshotError, MissingPrerequisiteError
from synthetic_org.generators.registry import Employee, Registry, ReviewCycle


@dataclass
class RegistrySnapshot:
    """Three ordered collections, enough to rebuild a registry exactly."""

    employees: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    email_index: list[tuple[str, str]] = field(default_factory=list)
    review_cycles: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(
            {
                "employees": [[k, v] for k, v in self.employees],
                "email_index": [[k, v] for k, v in self.email_index],
                "review_cycles": [[k, v] for k, v in self.review_cycles],
            },
            indent=2,
        )

    @classmethod
    def from_json(cls, text: str) -> RegistrySnapshot:
        data = json.loads(text)
        return cls(
            employees=[(k, v) for k, v in data["employees"]],
            email_index=[(k, v) for k, v in data["email_index"]],
            review_cycles=[(k, v) for k, v in data["review_cycles"]],
        )


def export_snapshot(registry: Registry) -> RegistrySnapshot:
    return RegistrySnapshot(
        employees=[(emp_id, emp.to_record()) for emp_id, emp in registry.employees.items()],
        email_index=list(registry.email_index.items()),
        review_cycles=[(c_id, c.to_record()) for c_id, c in registry.review_cycles.items()],
    )


def import_snapshot(snapshot: RegistrySnapshot) -> Registry:
    """Rebuild a registry, including its derived indices, from a snapshot."""
    registry = Registry()
    for cycle_id, record in snapshot.review_cycles:
        registry.register_cycle(ReviewCycle.from_record({**record, "id": cycle_id}))
    for emp_id, record in snapshot.employees:
        registry._index(Employee.from_record({**record, "id": emp_id}))
    # The stored index is authoritative over what _index derived
    registry.email_index = dict(snapshot.email_index)
    return registry


def snapshot_path(directory: Path) -> Path:
    return Path(directory) / SNAPSHOT_FILENAME


def save_snapshot(registry: Registry, directory: Path) -> Path:
    """Write the snapshot; a crash mid-write never leaves a partial file behind."""
    path = snapshot_path(directory)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(export_snapshot(registry).to_json(), encoding="utf-8")
    tmp_path.replace(path)
    return path


def load_snapshot(directory: Path) -> Registry:
    path = snapshot_path(directory)
    if not path.exists():
        raise MissingPrerequisiteError(
            f"Registry snapshot not found at {path}. "
            "Run phase 1 first (`synthetic-org phase1`) to generate employees "
            "and review cycles."
        )
    try:
        snapshot = RegistrySnapshot.from_json(path.read_text(encoding="utf-8"))
        return import_snapshot(snapshot)
    except (ValueError, KeyError, TypeError) as exc:
        raise CorruptSnapshotError(
            f"Registry snapshot at {path} is unreadable ({type(exc).__name__}: {exc}). "
            "Re-run phase 1 (`synthetic-org phase1`) to regenerate it."
        ) from exc
