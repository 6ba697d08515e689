#!/usr/bin/env python3
"""Check all .csv files in data/ for exact duplicate rows."""

import sys
from pathlib import Path
from typing import Optional

from capgraph.records import LoadError, find_duplicate_rows


def main(data_dir: Optional[Path] = None) -> int:
    data_dir = data_dir or Path(__file__).parent / "data"
    csv_files = sorted(data_dir.glob("*.csv"))

    if not csv_files:
        print(f"No .csv files found in {data_dir}")
        return 0

    print(f"Checking {len(csv_files)} files for duplicates...\n")
    print("=" * 80)

    failures = 0
    for csv_file in csv_files:
        print(f"\nFile: {csv_file.name}")
        print("-" * 80)

        try:
            rows = find_duplicate_rows(csv_file)
        except LoadError as e:
            print(f"❌ Error processing file: {e}")
            failures += 1
            continue

        if rows:
            print(f"Found {len(rows)} duplicate row(s), collapsed on load:\n")
            for row in rows:
                print(f"  ⚠️  row {row}")
        else:
            print("✅ No duplicate rows")

    print("\n" + "=" * 80)
    print("Duplicate check complete.")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
