"""Runtime settings, read once from the environment."""
import os
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

CSV_PATH = Path(os.environ.get("CAPGRAPH_CSV_PATH", ROOT / "data" / "capabilities.csv"))
REPORT_PATH = Path(os.environ.get("CAPGRAPH_REPORT_PATH", ROOT / "reports" / "capability_graph.html"))
LAYOUT_SEED = int(os.environ.get("CAPGRAPH_LAYOUT_SEED", "42"))
LOG_LEVEL = os.environ.get("CAPGRAPH_LOG_LEVEL", "INFO").upper()
