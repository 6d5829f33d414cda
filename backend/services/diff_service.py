"""
Diff Service - Submission and retrieval flows over an injected store
"""

from __future__ import annotations

from typing import Optional

from models.diff import DiffRecord, DiffView, SubmitResponse
from services.config_manager import ConfigManager
from services.diff_generator import split_lines
from services.diff_renderer import DiffRenderer, SegmentPolicy, side_counts, unified_document
from services.diff_store import DiffStore, get_diff_store
from services.errors import NoChangeDetected, RecordNotFound
from services.identifiers import is_valid_id, new_id


class DiffService:
    """Create diff records and re-render them on demand"""

    def __init__(self, store: DiffStore, renderer: Optional[DiffRenderer] = None):
        self.store = store
        self.renderer = renderer or DiffRenderer()

    def submit(self, old_data: str, new_data: str) -> SubmitResponse:
        """Store the pair under a new id, unless no line changed"""
        record = DiffRecord(oldText=old_data.strip(), newText=new_data.strip())

        message = self.renderer.render_changes(split_lines(record.oldText), split_lines(record.newText))
        if message is None:
            raise NoChangeDetected()

        record_id = new_id()
        self.store.put(record_id, record)
        print(f"[DiffService] Stored diff {record_id}")

        return SubmitResponse(id=record_id, message=message)

    def get_record(self, record_id: str) -> DiffRecord:
        """Look up a record; malformed ids never reach the store"""
        if not is_valid_id(record_id):
            raise RecordNotFound("Route not found")

        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFound()
        return record

    def render(self, record: DiffRecord) -> str:
        """Full-view diff text, rebuilt from the raw pair"""
        return self.renderer.render(split_lines(record.oldText), split_lines(record.newText))

    def render_document(self, record_id: str) -> str:
        """Full-view diff wrapped in unified file/hunk headers"""
        body = self.render(self.get_record(record_id))
        print(f"[DiffService] Rendered diff {record_id}")
        return unified_document(body, *side_counts(body))

    def view(self, record_id: str) -> DiffView:
        """Structured view of a stored diff"""
        record = self.get_record(record_id)
        old_lines = split_lines(record.oldText)
        new_lines = split_lines(record.newText)
        return DiffView(
            id=record_id,
            oldText=record.oldText,
            newText=record.newText,
            diff=self.renderer.render(old_lines, new_lines),
            lines=self.renderer.generator.line_diffs(old_lines, new_lines),
        )


_diff_service: Optional[DiffService] = None


def build_diff_service(config: dict) -> DiffService:
    """Build a service from a configuration dict"""
    value = config.get("render", {}).get("segmentPolicy", SegmentPolicy.LEGACY.value)
    try:
        policy = SegmentPolicy(value)
    except ValueError:
        raise ValueError(f"Unknown render.segmentPolicy: {value}") from None
    return DiffService(store=get_diff_store(config), renderer=DiffRenderer(policy=policy))


def get_diff_service() -> DiffService:
    global _diff_service
    if _diff_service is None:
        _diff_service = build_diff_service(ConfigManager.get_instance().get_config())
    return _diff_service


def set_diff_service(service: Optional[DiffService]) -> None:
    """Replace the process-wide service (None resets it)"""
    global _diff_service
    _diff_service = service
