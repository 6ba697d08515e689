from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("c_name", "sub_name", "relation")
OPTIONAL_COLUMNS = ("category", "definition")


class LoadError(ValueError):
    """The relationship file is missing, unreadable or lacks required columns."""


@dataclass(frozen=True)
class RelationshipRecord:
    c_name: str
    sub_name: str
    relation: str
    category: Optional[str] = None
    definition: Optional[str] = None


def _clean(value) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _read_frame(source: Union[str, Path, io.StringIO], label: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, na_values=[""])
    except FileNotFoundError as e:
        raise LoadError(f"Relationship file not found: {label}") from e
    except pd.errors.EmptyDataError as e:
        raise LoadError(f"Relationship file is empty: {label}") from e
    except pd.errors.ParserError as e:
        raise LoadError(f"Relationship file is not valid CSV: {label} ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not read relationship file {label}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    # trimmed, blank cells missing, before any dedup
    for col in df.columns:
        df[col] = df[col].str.strip()
        df[col] = df[col].mask(df[col] == "")
    missing = set(REQUIRED_COLUMNS) - set(df.columns)
    if missing:
        raise LoadError(f"Missing required columns: {sorted(missing)} in file {label}")
    return df


def _frame_to_records(df: pd.DataFrame, label: str) -> List[RelationshipRecord]:
    before = len(df)
    df = df.drop_duplicates(keep="first")
    dropped = before - len(df)
    if dropped:
        logger.info("Dropped %d duplicate row(s) from %s", dropped, label)

    records: List[RelationshipRecord] = []
    for idx, r in df.iterrows():
        c_name = _clean(r.get("c_name"))
        sub_name = _clean(r.get("sub_name"))
        if not c_name or not sub_name:
            logger.warning("Skipping row %d of %s (header is row 1): missing c_name or sub_name", idx + 2, label)
            continue
        records.append(
            RelationshipRecord(
                c_name=c_name,
                sub_name=sub_name,
                relation=_clean(r.get("relation")) or "",
                category=_clean(r.get("category")),
                definition=_clean(r.get("definition")),
            )
        )
    logger.info("Loaded %d relationship record(s) from %s", len(records), label)
    return records


def read_relationship_file(path: Union[str, Path]) -> List[RelationshipRecord]:
    """
    Reads the capability CSV into relationship records.
    Exact duplicate rows are collapsed to their first occurrence.
    Raises LoadError when the file cannot be used.
    """
    path = Path(path)
    if not path.is_file():
        raise LoadError(f"Relationship file not found: {path}")
    return _frame_to_records(_read_frame(path, str(path)), str(path))


def read_relationship_text(text: str, label: str = "<text>") -> List[RelationshipRecord]:
    """Same as read_relationship_file, for CSV content already in memory."""
    return _frame_to_records(_read_frame(io.StringIO(text), label), label)


def find_duplicate_rows(path: Union[str, Path]) -> List[int]:
    """
    Row numbers (header is row 1) of rows that repeat an earlier row once
    cells are trimmed, i.e. the rows the loader collapses.
    """
    path = Path(path)
    if not path.is_file():
        raise LoadError(f"Relationship file not found: {path}")
    df = _read_frame(path, str(path))
    dupes = df.duplicated(keep="first")
    return [int(i) + 2 for i in df.index[dupes]]
