"""Identifiers used throughout the table store.

These value objects provide type-safe identifiers so row identifiers cannot be
confused with ordinary integers (row counts, column positions, payloads).
"""

from __future__ import annotations

from typing import NewType


RowId = NewType("RowId", int)
"""Table-scoped row identifier. Assigned once at insertion, strictly increasing."""

# First identifier handed out by a fresh table
FIRST_ROW_ID = RowId(0)
