"""
Diff Generator Service - Line splitting and character-level diffs
"""

from __future__ import annotations

from difflib import SequenceMatcher

from models.diff import LineDiff, Segment, SegmentKind


def split_lines(text: str) -> list[str]:
    """Trim the whole blob, then split on newlines (interior blanks kept)"""
    return text.strip().split("\n")


def pad_lines(old_lines: list[str], new_lines: list[str]) -> tuple[list[str], list[str]]:
    """Pad the shorter sequence with empty lines so both have equal length"""
    length = max(len(old_lines), len(new_lines))
    return (
        old_lines + [""] * (length - len(old_lines)),
        new_lines + [""] * (length - len(new_lines)),
    )


class DiffGenerator:
    """Generate character-level diffs for pairs of lines"""

    def diff_chars(self, old_line: str, new_line: str) -> list[Segment]:
        """Tagged segments turning old_line into new_line"""
        if old_line == new_line:
            return [Segment(text=old_line, kind=SegmentKind.UNCHANGED)]

        matcher = SequenceMatcher(None, old_line, new_line, autojunk=False)
        segments: list[Segment] = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                self._append(segments, old_line[i1:i2], SegmentKind.UNCHANGED)
            elif tag == "delete":
                self._append(segments, old_line[i1:i2], SegmentKind.REMOVED)
            elif tag == "insert":
                self._append(segments, new_line[j1:j2], SegmentKind.ADDED)
            elif tag == "replace":
                # Removed text always precedes its replacement
                self._append(segments, old_line[i1:i2], SegmentKind.REMOVED)
                self._append(segments, new_line[j1:j2], SegmentKind.ADDED)

        return segments

    @staticmethod
    def _append(segments: list[Segment], text: str, kind: SegmentKind) -> None:
        """Append a segment, merging it into the previous run of the same kind"""
        if not text:
            return
        if segments and segments[-1].kind == kind:
            segments[-1] = Segment(text=segments[-1].text + text, kind=kind)
        else:
            segments.append(Segment(text=text, kind=kind))

    def line_diffs(self, old_lines: list[str], new_lines: list[str]) -> list[LineDiff]:
        """One LineDiff per line index, in order"""
        old_lines, new_lines = pad_lines(old_lines, new_lines)
        return [
            LineDiff(lineIndex=index, segments=self.diff_chars(old, new))
            for index, (old, new) in enumerate(zip(old_lines, new_lines), start=1)
        ]
