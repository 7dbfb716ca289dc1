"""
Tabular export of decoded ACH documents.

One row per field so every value stays verbatim (no trimming, no numeric
conversion). Raw lines contribute a single row whose title is empty.
"""

# ach_viewer/controllers/record_export.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from ach_viewer.data_model import AchDocument, AchRecord, RAW_TAG

EXPORT_COLUMNS = [
    "line_no",
    "record_type",
    "variant",
    "field_index",
    "title",
    "value",
]


def _rows(doc: AchDocument) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for item in doc:
        if isinstance(item, AchRecord):
            variant = item.variant.value if item.variant else ""
            for idx, f in enumerate(item.fields, start=1):
                rows.append(
                    {
                        "line_no": item.line_no,
                        "record_type": item.tag,
                        "variant": variant,
                        "field_index": idx,
                        "title": f.title,
                        "value": f.value,
                    }
                )
        else:
            rows.append(
                {
                    "line_no": item.line_no,
                    "record_type": RAW_TAG,
                    "variant": "",
                    "field_index": 0,
                    "title": "",
                    "value": item.line,
                }
            )
    return rows


def records_to_frame(doc: AchDocument) -> pd.DataFrame:
    """Flatten ``doc`` into a DataFrame with ``EXPORT_COLUMNS``."""
    return pd.DataFrame(_rows(doc), columns=EXPORT_COLUMNS)


def write_csv(doc: AchDocument, out_path: Path) -> int:
    """Write ``records_to_frame(doc)`` as CSV; returns the number of rows."""
    df = records_to_frame(doc)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False, encoding="utf-8")
    return len(df)
