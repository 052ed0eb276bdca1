# file: gui_recorder/graph/replay.py
import pathlib
import sys

from gui_recorder import resolver, runner
from gui_recorder.graph.state import ReplayState
from gui_recorder.history import HistoryEntry, load_history
from gui_recorder.prompts import ask_int, clamp

MAX_VIEWERS = 10


def resolve_node(state: ReplayState) -> ReplayState:
    state["invoker"] = resolver.resolve_playwright(state["settings"])
    return state


def load_node(state: ReplayState) -> ReplayState:
    state["entries"] = load_history(state["settings"].history_path)
    if not state["entries"]:
        print("\nNo sessions found. Record one first.\n")
    return state


def pick_index(answer: int, count: int) -> int:
    """Turn a 1-based answer into a valid 0-based index."""
    return clamp(answer, 1, count) - 1


def pick_node(state: ReplayState) -> ReplayState:
    entries = state["entries"]

    print("\nAvailable sessions:\n")
    for i, e in enumerate(entries, 1):
        print(f"{i}. [{e.get('id')}] {e.get('url')} | device={e.get('device')} | createdAt={e.get('createdAt')}")
    print()

    answer = ask_int(f"Pick a session (1-{len(entries)})", default=len(entries), low=1, high=len(entries))
    state["chosen"] = entries[pick_index(answer, len(entries))]
    state["trace_ready"] = has_trace(state["chosen"])
    return state


def has_trace(chosen: HistoryEntry) -> bool:
    trace_path = chosen.get("tracePath") or ""
    if trace_path and pathlib.Path(trace_path).is_file():
        return True

    print(f"\n⚠️  No trace found for session {chosen.get('id')} at {trace_path}", file=sys.stderr)
    print("Tip: Re-generate a trace when recording, or place a trace.zip into that folder.\n", file=sys.stderr)
    return False


def viewers_node(state: ReplayState) -> ReplayState:
    """Open N trace viewers at once and wait for every one of them to close."""
    count = ask_int("How many trace viewers to open?", default=1, low=1, high=MAX_VIEWERS)
    state["viewer_count"] = count

    if count > 1:
        print("⚠️  Multiple viewers share this terminal's input and output.")

    invoker = state["invoker"]
    trace_path = state["chosen"]["tracePath"]
    commands = [invoker.argv(["show-trace", trace_path]) for _ in range(count)]

    print(f"\n🎞️  Opening {count} Trace Viewer instance(s)...")
    runner.run_parallel(commands, state["settings"])
    print("\n✅ Replay complete.\n")
    return state
