"""Orchestrator: runs the generators in dependency order across two phases.

Phase 1 builds the registry (review cycles, then the employee hierarchy) and
persists it as a snapshot. Phase 2 loads that snapshot and generates ratings,
reviews and eNPS responses against it, then runs the integrity scan.

Each phase is all-or-nothing: every generator builds and validates in memory,
and files are written only once the whole phase has passed.
"""

import sys
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pandas as pd
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from config.company_profile import COMPANY
from config.settings import GENERATED_DIR, SNAPSHOT_FILENAME
from synthetic_org.generators.base_generator import BaseGenerator
from synthetic_org.generators.enps_generator import EnpsGenerator
from synthetic_org.generators.errors import GenerationError, SyntheticOrgError
from synthetic_org.generators.hierarchy_generator import HierarchyGenerator
from synthetic_org.generators.performance_generator import PerformanceGenerator
from synthetic_org.generators.registry import Registry
from synthetic_org.generators.review_cycle_generator import ReviewCycleGenerator
from synthetic_org.generators.snapshot import load_snapshot, save_snapshot, snapshot_path
from synthetic_org.quality_checks import (
    GENERATED_TABLES, check_tables, print_results, surveys_table,
)

console = Console()

app = typer.Typer(help=f"Synthetic organization data for {COMPANY['name']}.")

PHASE2_TABLES = ["ratings", "reviews", "enps_responses"]


def _build_all(generators: list[BaseGenerator]) -> None:
    """Build every generator in order; raise before anything is written."""
    for gen in generators:
        if gen.build():
            console.print(f"[bold red]FAILED: {gen.name}[/bold red]")
            raise GenerationError(f"{gen.name} generator failed validation")


def _write_all(generators: list[BaseGenerator]) -> None:
    for gen in generators:
        gen.save()
        gen.summary()


def _remove(output_dir: Path, tables: list[str]) -> None:
    for name in tables:
        (output_dir / f"{name}.json").unlink(missing_ok=True)


def registry_tables(registry: Registry) -> dict[str, pd.DataFrame]:
    """The phase 1 tables, rebuilt from a registry instead of read from disk."""
    return {
        "employees": pd.DataFrame([e.to_record() for e in registry.all_employees()]),
        "review_cycles": pd.DataFrame([c.to_record() for c in registry.all_cycles()]),
    }


def run_phase1(output_dir: Optional[Path] = None, seed: Optional[int] = None) -> Registry:
    """Build the registry and persist it. The snapshot is written last.

    Any earlier snapshot and the phase 2 files derived from it are removed up
    front, so a failed run never leaves phase 2 a stale registry to load.
    """
    output_dir = Path(output_dir) if output_dir is not None else GENERATED_DIR

    console.print(Panel.fit(
        "[bold green]Phase 1: Organization[/bold green]\n"
        f"Generating the hierarchy for {COMPANY['name']} "
        f"({COMPANY['total_employees']} employees)",
        title="Synthetic Org",
    ))

    snapshot_path(output_dir).unlink(missing_ok=True)
    _remove(output_dir, PHASE2_TABLES)

    registry = Registry()

    # Cycles first, so every later step can refer to them
    generators = [
        ReviewCycleGenerator(registry, output_dir=output_dir),
        HierarchyGenerator(registry, seed=seed, output_dir=output_dir),
    ]
    _build_all(generators)
    _write_all(generators)

    path = save_snapshot(registry, output_dir)

    console.print()
    console.print(Panel.fit(
        f"[bold green]Phase 1 Complete![/bold green]\n\n"
        f"Active employees:     {len(registry.get_by_status('active'))}\n"
        f"Terminated employees: {len(registry.get_by_status('terminated'))}\n"
        f"On leave:             {len(registry.get_by_status('leave'))}\n"
        f"Review cycles:        {len(registry.all_cycles())}\n"
        f"Snapshot:             {path}",
        title="Summary",
    ))
    return registry


def run_phase2(output_dir: Optional[Path] = None, performance_seed: Optional[int] = None,
               enps_seed: Optional[int] = None) -> tuple[int, int]:
    """Generate performance and eNPS data from the persisted registry.

    Raises MissingPrerequisiteError when phase 1 has not been run against
    ``output_dir``, and GenerationError (with nothing written) when a
    generator or the integrity scan fails.
    """
    output_dir = Path(output_dir) if output_dir is not None else GENERATED_DIR
    registry = load_snapshot(output_dir)

    console.print(Panel.fit(
        "[bold green]Phase 2: Performance & Engagement[/bold green]\n"
        f"Loaded {len(registry)} employees and {len(registry.all_cycles())} review cycles",
        title="Synthetic Org",
    ))

    enps = EnpsGenerator(registry, seed=enps_seed, output_dir=output_dir)
    generators = [
        PerformanceGenerator(registry, seed=performance_seed, output_dir=output_dir),
        enps,
    ]
    _build_all(generators)

    console.print("\n[bold blue]Data Quality Checks[/bold blue]\n")
    tables = registry_tables(registry)
    tables["surveys"] = surveys_table(enps.surveys)
    for gen in generators:
        tables.update(gen.dataframes)
    passed, failed, results = check_tables(tables)
    print_results(results, passed, failed)
    if failed:
        raise GenerationError(f"{failed} integrity checks failed")

    _write_all(generators)
    return passed, failed


def clear_generated(output_dir: Optional[Path] = None) -> list[Path]:
    """Delete generated datasets and the snapshot. Returns the removed paths."""
    output_dir = Path(output_dir) if output_dir is not None else GENERATED_DIR
    removed = []
    for filename in [f"{name}.json" for name in GENERATED_TABLES] + [SNAPSHOT_FILENAME]:
        path = output_dir / filename
        if path.exists():
            path.unlink()
            removed.append(path)
    return removed


def _fail(exc: SyntheticOrgError) -> None:
    console.print(f"[bold red]ERROR: {escape(str(exc))}[/bold red]")
    raise typer.Exit(code=1)


@app.command()
def phase1(
    output_dir: Path = typer.Option(None, "--output-dir", help="Override output directory from settings"),
    seed: int = typer.Option(None, "--seed", help="Override hierarchy seed from settings"),
):
    """Generate employees and review cycles, then write the registry snapshot."""
    try:
        run_phase1(output_dir, seed)
    except SyntheticOrgError as exc:
        _fail(exc)


@app.command()
def phase2(
    output_dir: Path = typer.Option(None, "--output-dir", help="Override output directory from settings"),
    performance_seed: int = typer.Option(None, "--performance-seed", help="Override performance seed"),
    enps_seed: int = typer.Option(None, "--enps-seed", help="Override eNPS seed"),
):
    """Generate ratings, reviews and eNPS responses from the snapshot."""
    try:
        run_phase2(output_dir, performance_seed, enps_seed)
    except SyntheticOrgError as exc:
        _fail(exc)


@app.command(name="all")
def run_all(
    output_dir: Path = typer.Option(None, "--output-dir", help="Override output directory from settings"),
    seed: int = typer.Option(None, "--seed", help="Override hierarchy seed from settings"),
    performance_seed: int = typer.Option(None, "--performance-seed", help="Override performance seed"),
    enps_seed: int = typer.Option(None, "--enps-seed", help="Override eNPS seed"),
):
    """Run phase 1 and phase 2 back to back."""
    try:
        run_phase1(output_dir, seed)
        run_phase2(output_dir, performance_seed, enps_seed)
    except SyntheticOrgError as exc:
        _fail(exc)


@app.command()
def clear(
    output_dir: Path = typer.Option(None, "--output-dir", help="Override output directory from settings"),
):
    """Remove generated files and the registry snapshot."""
    removed = clear_generated(output_dir)
    console.print(f"[green]Removed {len(removed)} generated files[/green]")


if __name__ == "__main__":
    app()
