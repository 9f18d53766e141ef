"""Referential integrity and data quality checks across the generated JSON files."""

import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

import duckdb
import pandas as pd
from rich.console import Console
from rich.table import Table

from config.company_profile import SURVEYS
from config.settings import GENERATED_DIR

console = Console()

GENERATED_TABLES = ["employees", "review_cycles", "ratings", "reviews", "enps_responses"]

# Primary keys and foreign keys for each table, as the importer enforces them
TABLE_KEYS = {
    "employees": {
        "pk": "id",
        "fks": {"manager_id": "employees.id"},
    },
    "review_cycles": {"pk": "id", "fks": {}},
    "ratings": {
        "pk": "id",
        "fks": {
            "employee_id": "employees.id",
            "reviewer_id": "employees.id",
            "review_cycle_id": "review_cycles.id",
        },
    },
    "reviews": {
        "pk": "id",
        "fks": {
            "employee_id": "employees.id",
            "reviewer_id": "employees.id",
            "review_cycle_id": "review_cycles.id",
        },
    },
    "enps_responses": {
        "pk": "id",
        "fks": {
            "employee_id": "employees.id",
            "survey_name": "surveys.name",
        },
    },
    "surveys": {"pk": "name", "fks": {}},
}

# Business rules: (table, label, query counting violations)
BUSINESS_RULES = [
    (
        "employees", "employees: termination_date > hire_date",
        "SELECT COUNT(*) FROM employees "
        "WHERE termination_date IS NOT NULL AND termination_date <= hire_date",
    ),
    (
        "ratings", "ratings: overall_rating in [1.0, 5.0]",
        "SELECT COUNT(*) FROM ratings WHERE overall_rating < 1.0 OR overall_rating > 5.0",
    ),
    (
        "enps_responses", "enps_responses: score in [0, 10]",
        "SELECT COUNT(*) FROM enps_responses WHERE score < 0 OR score > 10",
    ),
]


def surveys_table(surveys: list[dict] = SURVEYS) -> pd.DataFrame:
    return pd.DataFrame(
        [{"name": s["name"], "date": s["date"].isoformat()} for s in surveys]
    )


def load_generated_tables(output_dir: Optional[Path] = None) -> dict[str, pd.DataFrame]:
    """Read every generated JSON file that exists, keeping strings as strings."""
    output_dir = Path(output_dir) if output_dir is not None else GENERATED_DIR
    tables = {}
    for name in GENERATED_TABLES:
        path = output_dir / f"{name}.json"
        if path.exists():
            tables[name] = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    return tables


ORPHAN_QUERY = """
    SELECT COUNT(*) FROM {table} s
    WHERE s."{fk_col}" IS NOT NULL
      AND CAST(s."{fk_col}" AS VARCHAR) != 'nan'
      AND CAST(s."{fk_col}" AS VARCHAR) NOT IN (
        SELECT CAST(r."{ref_col}" AS VARCHAR) FROM {ref_table} r
      )
"""


def _outcome(count: int, check: str, noun: str, clean: str) -> tuple[str, str, str]:
    if count == 0:
        return ("PASS", check, clean)
    return ("FAIL", check, f"{count} {noun}")


def check_tables(tables: dict[str, pd.DataFrame]) -> tuple[int, int, list[tuple[str, str, str]]]:
    """Run all checks over in-memory tables. Returns (passed, failed, results)."""
    tables = dict(tables)
    tables.setdefault("surveys", surveys_table())
    # Tables without columns cannot be queried
    present = {name for name, df in tables.items() if len(df.columns) > 0}

    con = duckdb.connect()
    for name in present:
        con.register(name, tables[name])

    def count(query: str) -> int:
        return con.execute(query).fetchone()[0]

    results = []

    # 1. Orphaned foreign keys
    for table, keys in TABLE_KEYS.items():
        if table not in present:
            continue
        for fk_col, ref in keys["fks"].items():
            ref_table, ref_col = ref.rsplit(".", 1)
            if ref_table not in present:
                results.append(("SKIP", f"{table}.{fk_col}", f"Ref table {ref_table} not found"))
                continue
            query = ORPHAN_QUERY.format(table=table, fk_col=fk_col,
                                        ref_table=ref_table, ref_col=ref_col)
            try:
                orphans = count(query)
            except duckdb.Error as e:
                results.append(("ERROR", f"{table}.{fk_col}", str(e)))
                continue
            results.append(_outcome(orphans, f"{table}.{fk_col} -> {ref}", "orphans", "0 orphans"))

    # 2. Primary keys present on every row
    for table, keys in TABLE_KEYS.items():
        if table in present:
            nulls = count(f'SELECT COUNT(*) FROM {table} WHERE "{keys["pk"]}" IS NULL')
            results.append(_outcome(nulls, f"{table}.{keys['pk']} NOT NULL", "nulls", "0 nulls"))

    # 3. Business rules
    for table, label, query in BUSINESS_RULES:
        if table in present:
            results.append(_outcome(count(query), label, "violations", "All valid"))

    con.close()

    passed = sum(1 for status, _, _ in results if status == "PASS")
    failed = sum(1 for status, _, _ in results if status in ("FAIL", "ERROR"))
    return passed, failed, results


def print_results(results: list[tuple[str, str, str]], passed: int, failed: int) -> None:
    table = Table(title="Quality Check Results")
    table.add_column("Status", style="bold")
    table.add_column("Check")
    table.add_column("Detail")

    for status, check, detail in results:
        style = {"PASS": "green", "FAIL": "red", "ERROR": "red", "SKIP": "yellow"}[status]
        table.add_row(f"[{style}]{status}[/{style}]", check, detail)

    console.print(table)
    console.print(f"\n[{'green' if failed == 0 else 'red'}]Passed: {passed} | Failed: {failed}[/]")


def run_quality_checks(output_dir: Optional[Path] = None) -> tuple[int, int]:
    """Run all quality checks on the generated files. Returns (passed_count, failed_count)."""
    console.print("\n[bold blue]Data Quality Checks[/bold blue]\n")

    passed, failed, results = check_tables(load_generated_tables(output_dir))
    print_results(results, passed, failed)
    return passed, failed


if __name__ == "__main__":
    p, f = run_quality_checks()
    sys.exit(0 if f == 0 else 1)
