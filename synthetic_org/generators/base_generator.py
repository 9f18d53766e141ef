"""Shared pipeline for the dataset generators: generate, check, write, report."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import pandas as pd
from rich.console import Console
from rich.table import Table

from config.settings import GENERATED_DIR
from synthetic_org.generators.distributions import SeededSampler
from synthetic_org.generators.registry import Registry

console = Console()


class BaseGenerator(ABC):
    """Every generator reads from (or writes into) one registry and emits named tables.

    Each generator owns its sampler, so its random stream is independent of
    every other generator in the run. Generators without random draws simply
    never touch it.
    """

    name: str = "base"
    default_seed: int = 0

    def __init__(self, registry: Registry, seed: Optional[int] = None,
                 output_dir: Optional[Path] = None):
        self.registry = registry
        self.sampler = SeededSampler(self.default_seed if seed is None else seed)
        self.output_dir = Path(output_dir) if output_dir is not None else GENERATED_DIR
        self._dataframes: dict[str, pd.DataFrame] = {}

    @abstractmethod
    def generate(self) -> None:
        """Draw all records and hand each finished table to register_table()."""
        ...

    @property
    def dataframes(self) -> dict[str, pd.DataFrame]:
        return self._dataframes

    def register_table(self, table: str, df: pd.DataFrame) -> None:
        self._dataframes[table] = df

    def output_path(self, table: str) -> Path:
        return self.output_dir / f"{table}.json"

    def validate(self) -> list[str]:
        """Problems found in the generated tables; an empty list means they can be written."""
        return [
            f"{self.name}/{table}: no rows generated"
            for table, df in self._dataframes.items() if df.empty
        ]

    def save(self) -> list[Path]:
        """Write each table as a flat array of JSON records, one file per table.

        Each file goes to a temporary name first and is moved into place, so a
        crash mid-write never leaves a truncated table behind.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for table, df in self._dataframes.items():
            path = self.output_path(table)
            tmp_path = path.with_suffix(path.suffix + ".tmp")
            df.to_json(tmp_path, orient="records", indent=2)
            tmp_path.replace(path)
            written.append(path)
        return written

    def summary(self) -> None:
        table = Table(title=f"{self.name} Generator Summary")
        table.add_column("Table", style="cyan")
        table.add_column("Rows", justify="right", style="green")
        table.add_column("Columns", justify="right")
        table.add_column("File", style="dim")

        for name, df in self._dataframes.items():
            table.add_row(name, str(len(df)), str(len(df.columns)), self.output_path(name).name)

        console.print(table)

    def build(self) -> list[str]:
        """generate -> validate, in memory only. Returns the validation errors.

        Nothing is written here; the orchestrator saves a phase's tables only
        once every generator in it has built cleanly.
        """
        console.print(f"\n[bold blue]Generating {self.name} (seed {self.sampler.seed})...[/bold blue]")
        self.generate()

        errors = self.validate()
        for err in errors:
            console.print(f"  [red]ERROR: {err}[/red]")
        return errors
