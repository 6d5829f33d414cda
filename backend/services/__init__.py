"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, split_lines
from .diff_renderer import DiffRenderer, SegmentPolicy
from .diff_service import DiffService, get_diff_service, set_diff_service
from .diff_store import FileDiffStore, InMemoryDiffStore

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "split_lines",
    "DiffRenderer",
    "SegmentPolicy",
    "DiffService",
    "get_diff_service",
    "set_diff_service",
    "FileDiffStore",
    "InMemoryDiffStore",
]
