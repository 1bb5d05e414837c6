"""Parquet schema definitions for patrol artifacts.

Every writer and reader works against these column contracts.
"""

from __future__ import annotations

import pyarrow as pa

VISITED_PATH_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
    ]
)
"""One row per distinct visited cell, in first-visit order."""

CANDIDATE_SCHEMA = pa.schema(
    [
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("is_start", pa.bool_()),
        ("creates_loop", pa.bool_()),
    ]
)
"""One row per extra-wall candidate with its loop verdict."""
