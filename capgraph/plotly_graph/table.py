"""Search, sort and page the capability table."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pandas as pd

PAGE_SIZE = 10


@dataclass(frozen=True)
class TablePage:
    rows: List[Dict[str, Any]]
    page: int
    page_size: int
    total: int

    @property
    def pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))


def frame_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    # NaN is not JSON; hand back None instead
    clean = df.astype(object).where(df.notna(), None)
    return clean.to_dict(orient="records")


def table_page(
    frame: pd.DataFrame,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    descending: bool = False,
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> TablePage:
    if page < 1:
        raise ValueError(f"page must be >= 1 (got {page})")
    if sort_by is not None and sort_by not in frame.columns:
        raise ValueError(f"Unknown sort column {sort_by!r}; expected one of {list(frame.columns)}")

    df = frame
    term = (search or "").strip().lower()
    if term:
        mask = pd.Series(False, index=df.index)
        for col in df.select_dtypes(exclude="number").columns:
            mask |= df[col].astype(str).str.lower().str.contains(term, regex=False) & df[col].notna()
        df = df[mask]

    if sort_by is not None:
        df = df.sort_values(sort_by, ascending=not descending, kind="mergesort", na_position="last")

    start = (page - 1) * page_size
    return TablePage(
        rows=frame_records(df.iloc[start:start + page_size]),
        page=page,
        page_size=page_size,
        total=len(df),
    )
