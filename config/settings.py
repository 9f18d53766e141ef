"""Central configuration for the synthetic organization generator."""

from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv()

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Data paths
DATA_DIR = PROJECT_ROOT / "data"
GENERATED_DIR = Path(os.getenv("SYNTH_ORG_OUTPUT_DIR", str(DATA_DIR / "generated")))

# Phase 1 -> phase 2 hand-off
SNAPSHOT_FILENAME = "registry.json"

# Independent random seeds per generator so regenerating one dataset
# never perturbs another
HIERARCHY_SEED = int(os.getenv("SYNTH_ORG_HIERARCHY_SEED", "42"))
PERFORMANCE_SEED = int(os.getenv("SYNTH_ORG_PERFORMANCE_SEED", "12345"))
ENPS_SEED = int(os.getenv("SYNTH_ORG_ENPS_SEED", "54321"))
