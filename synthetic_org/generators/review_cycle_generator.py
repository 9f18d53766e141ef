"""Review cycle generator: the fixed cycles every rating and review refers to."""

import pandas as pd

from config.company_profile import REVIEW_CYCLES
from synthetic_org.generators.base_generator import BaseGenerator
from synthetic_org.generators.registry import ReviewCycle


class ReviewCycleGenerator(BaseGenerator):
    """Registers cycles before any employee exists; no random draws involved."""

    name = "review_cycles"

    def __init__(self, registry, output_dir=None, cycles=None):
        super().__init__(registry, output_dir=output_dir)
        self.cycles_config = REVIEW_CYCLES if cycles is None else cycles

    def generate(self) -> None:
        cycles = []
        for cfg in self.cycles_config:
            cycle = ReviewCycle(
                cycle_id=cfg["id"],
                name=cfg["name"],
                cycle_type=cfg["cycle_type"],
                start_date=cfg["start_date"],
                end_date=cfg["end_date"],
                status=cfg["status"],
            )
            self.registry.register_cycle(cycle)
            cycles.append(cycle)

        self.register_table("review_cycles", pd.DataFrame([c.to_record() for c in cycles]))

    def validate(self) -> list[str]:
        errors = super().validate()
        for cycle in self.registry.all_cycles():
            if cycle.start_date > cycle.end_date:
                errors.append(f"Cycle {cycle.cycle_id} ends before it starts")
        return errors
