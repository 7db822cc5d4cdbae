"""
Core Models Package

The Record base class and the pieces a variant is built from.

**DESIGN RATIONALE:**

Records are immutable after construction. This ensures:
1. No accidental mutation once a record is handed around
2. Safe to share between threads
3. Every change is an explicit copy() with a new instance
4. Missing fields and fields stored as None stay distinguishable

| Name | Role |
|------|------|
| `Record` | Base class: field access, existence checks, copy |
| `derived` | Registers a method as a computed field |
| `RecordOptions` | Per-variant configuration |
"""

from .derived import derived
from .options import RecordOptions
from .record import Record

__all__ = [
    "Record",
    "derived",
    "RecordOptions",
]
