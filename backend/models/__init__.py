"""Models module - Pydantic data models"""

from .diff import (
    DiffLine,
    DiffRecord,
    DiffView,
    LineDiff,
    Segment,
    SegmentKind,
    SubmitRequest,
    SubmitResponse,
)

__all__ = [
    # Diff computation models
    "Segment",
    "SegmentKind",
    "LineDiff",
    "DiffLine",
    # Record and API models
    "DiffRecord",
    "SubmitRequest",
    "SubmitResponse",
    "DiffView",
]
