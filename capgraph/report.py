from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import config
from .pipeline import build_report
from .plotly_graph.plotly_render import write_report_html
from .records import LoadError


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render the capability graph report.")
    parser.add_argument("csv_path", nargs="?", default=str(config.CSV_PATH),
                        help="Relationship CSV (c_name, sub_name, relation[, category, definition])")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        report = build_report(Path(args.csv_path))
    except LoadError as e:
        print(f"Report generation failed: {e}", file=sys.stderr)
        return 1

    out = write_report_html(report, config.REPORT_PATH, seed=config.LAYOUT_SEED)
    print(f"Report complete: {len(report.nodes)} capabilities, {len(report.edges)} relationships -> {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
