"""
Diff Renderer Service - Turn line diffs into unified-style diff text
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from models.diff import DiffLine, LineDiff, Segment, SegmentKind
from services.diff_generator import DiffGenerator


class SegmentPolicy(str, Enum):
    """Which segments make up the "-" and "+" side of a changed line"""

    LEGACY = "legacy"  # old side: unchanged only; new side: every segment
    CORRECTED = "corrected"  # old side: unchanged + removed; new side: unchanged + added


def _legacy_old_side(segments: list[Segment]) -> str:
    return "".join(s.text for s in segments if s.kind == SegmentKind.UNCHANGED)


def _legacy_new_side(segments: list[Segment]) -> str:
    return "".join(s.text for s in segments)


def _corrected_old_side(segments: list[Segment]) -> str:
    return "".join(s.text for s in segments if s.kind != SegmentKind.ADDED)


def _corrected_new_side(segments: list[Segment]) -> str:
    return "".join(s.text for s in segments if s.kind != SegmentKind.REMOVED)


SideBuilder = Callable[[list[Segment]], str]

_SIDE_BUILDERS: dict[SegmentPolicy, tuple[SideBuilder, SideBuilder]] = {
    SegmentPolicy.LEGACY: (_legacy_old_side, _legacy_new_side),
    SegmentPolicy.CORRECTED: (_corrected_old_side, _corrected_new_side),
}


def side_texts(segments: list[Segment], policy: SegmentPolicy) -> tuple[str, str]:
    """Build the (old side, new side) text of a changed line under a policy"""
    old_side, new_side = _SIDE_BUILDERS[policy]
    return old_side(segments), new_side(segments)


class DiffRenderer:
    """Render per-line character diffs as flat unified-style text"""

    def __init__(
        self,
        generator: DiffGenerator | None = None,
        policy: SegmentPolicy = SegmentPolicy.LEGACY,
    ):
        self.generator = generator or DiffGenerator()
        self.policy = SegmentPolicy(policy)

    def diff_lines(self, line_diffs: list[LineDiff]) -> list[DiffLine]:
        """Expand line diffs into output records: one per unchanged line, two per changed one"""
        result: list[DiffLine] = []
        for line in line_diffs:
            if not line.changed:
                result.append(DiffLine(prefix=" ", lineIndex=line.lineIndex, text=line.segments[0].text))
                continue
            old_text, new_text = side_texts(line.segments, self.policy)
            result.append(DiffLine(prefix="-", lineIndex=line.lineIndex, text=old_text))
            result.append(DiffLine(prefix="+", lineIndex=line.lineIndex, text=new_text))
        return result

    def render(self, old_lines: list[str], new_lines: list[str]) -> str:
        """Full view; always rendered, even when nothing changed"""
        records = self.diff_lines(self.generator.line_diffs(old_lines, new_lines))
        return serialize(records, full_view_line)

    def render_changes(self, old_lines: list[str], new_lines: list[str]) -> str | None:
        """Submission summary, or None when no line changed"""
        line_diffs = self.generator.line_diffs(old_lines, new_lines)
        if not any(line.changed for line in line_diffs):
            return None
        return serialize(self.diff_lines(line_diffs), summary_line)


def full_view_line(record: DiffLine) -> str:
    return f"{record.prefix}{record.text}"


def summary_line(record: DiffLine) -> str:
    if record.prefix == " ":
        return f"{record.lineIndex}   {record.text}"
    return f"{record.lineIndex} {record.prefix} {record.text}"


def serialize(records: list[DiffLine], formatter: Callable[[DiffLine], str]) -> str:
    """Single serialization pass; every entry starts on a new line"""
    return "".join(f"\n{formatter(record)}" for record in records)


def unified_document(body: str, old_count: int, new_count: int) -> str:
    """Prepend the file and hunk headers a unified-diff viewer expects"""
    return f"--- Old\n+++ New\n@@ -1,{old_count} +1,{new_count} @@{body}\n"


def side_counts(body: str) -> tuple[int, int]:
    """Number of old-side and new-side lines in a full-view body"""
    lines = body.split("\n")[1:]
    old_count = sum(1 for line in lines if line[:1] in (" ", "-"))
    new_count = sum(1 for line in lines if line[:1] in (" ", "+"))
    return old_count, new_count
