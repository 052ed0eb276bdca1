from typing import TypedDict, List, Any

from gui_recorder.config import Settings
from gui_recorder.history import HistoryEntry


class RecordState(TypedDict, total=False):
    settings: Settings
    invoker: Any
    url: str
    device: str
    preset: str
    session_id: str
    session_dir: str
    script_path: str
    trace_path: str
    trace_generated: bool
    feedback: str
    entry: HistoryEntry


class ReplayState(TypedDict, total=False):
    settings: Settings
    invoker: Any
    entries: List[HistoryEntry]
    chosen: HistoryEntry
    trace_ready: bool
    viewer_count: int
