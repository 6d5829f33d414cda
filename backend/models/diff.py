"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SegmentKind(str, Enum):
    """Tag carried by a character-diff segment"""

    UNCHANGED = "unchanged"
    REMOVED = "removed"
    ADDED = "added"


class Segment(BaseModel):
    """A maximal run of characters sharing one tag"""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: SegmentKind


class LineDiff(BaseModel):
    """Character-level diff of one line pair (derived, never stored)"""

    lineIndex: int  # 1-indexed
    segments: list[Segment]

    @property
    def changed(self) -> bool:
        return not (
            len(self.segments) == 1 and self.segments[0].kind == SegmentKind.UNCHANGED
        )


class DiffLine(BaseModel):
    """One rendered output line before serialization"""

    prefix: str  # " ", "-", "+"
    lineIndex: int
    text: str


class DiffRecord(BaseModel):
    """Persisted (oldText, newText) pair, immutable once stored"""

    model_config = ConfigDict(frozen=True)

    oldText: str
    newText: str


class SubmitRequest(BaseModel):
    """Request body for a new diff submission"""

    oldData: str
    newData: str


class SubmitResponse(BaseModel):
    """Response for an accepted submission"""

    id: str
    message: str


class DiffView(BaseModel):
    """JSON view of a stored diff"""

    id: str
    oldText: str
    newText: str
    diff: str  # Full unified-style text
    lines: list[LineDiff]
