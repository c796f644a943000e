"""
Loading and exporting the small record files used by the scripts.
"""

from .loader import (
    export_records,
    frame_to_records,
    load_candidates,
    load_records,
    load_voters,
    load_votes,
    read_frame,
)

__all__ = [
    "export_records",
    "frame_to_records",
    "load_candidates",
    "load_records",
    "load_voters",
    "load_votes",
    "read_frame",
]
