# file: gui_recorder/graph/recorder.py
import pathlib
import time
from datetime import datetime, timezone

from gui_recorder import resolver, runner
from gui_recorder.errors import InvalidInputError
from gui_recorder.graph.state import RecordState
from gui_recorder.graph.tracegen import write_tracegen_script
from gui_recorder.history import HistoryEntry, append_entry
from gui_recorder.prompts import ask_choice, ask_confirm, ask_text

DEFAULT_URL = "https://example.com"

DEVICE_PRESETS = {
    "pc": "Desktop Chrome",
    "mobile": "iPhone 13",
}

DEVICE_OPTIONS = [("pc", "pc"), ("mobile", "mobile")]


def is_device_type(value: str) -> bool:
    return value in DEVICE_PRESETS


def device_preset(device: str) -> str:
    """Map a logical device kind to a Playwright device descriptor name."""
    if not is_device_type(device):
        raise InvalidInputError(f"Invalid device selection: {device}")
    return DEVICE_PRESETS[device]


def new_session_id() -> str:
    # Millisecond timestamp; two sessions started in the same millisecond collide
    return str(time.time_ns() // 1_000_000)


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_node(state: RecordState) -> RecordState:
    state["invoker"] = resolver.resolve_playwright(state["settings"])
    return state


def target_node(state: RecordState) -> RecordState:
    """Ask for the URL and device, rejecting unknown devices before codegen runs."""
    url = ask_text("Enter target URL", default=DEFAULT_URL)
    device = ask_choice("Select device type", DEVICE_OPTIONS)

    state["preset"] = device_preset(device)
    state["url"] = url
    state["device"] = device
    return state


def session_node(state: RecordState) -> RecordState:
    settings = state["settings"]
    session_id = new_session_id()

    session_dir = settings.sessions_dir / session_id
    session_dir.mkdir(parents=True, exist_ok=True)

    state["session_id"] = session_id
    state["session_dir"] = str(session_dir)
    state["script_path"] = str(session_dir / "script.py")
    state["trace_path"] = str(session_dir / "trace.zip")
    print(f"(recorder_node) -> Created session folder: {session_dir}")
    return state


def codegen_node(state: RecordState) -> RecordState:
    invoker = state["invoker"]
    args = [
        "codegen", state["url"],
        "--output", state["script_path"],
        "--device", state["preset"],
    ]

    print("\n🎬 Starting Playwright codegen (headed). Close the window when finished...")
    runner.run(invoker.argv(args), state["settings"])
    return state


def trace_node(state: RecordState) -> RecordState:
    """Optionally capture a short headed trace so show-trace has something to open."""
    state["trace_generated"] = False
    if not ask_confirm("Generate a short GUI trace for replay now?"):
        print("⏭️  Skipping trace generation. You can add one later.")
        return state

    settings = state["settings"]
    helper = write_tracegen_script(
        pathlib.Path(state["session_dir"]) / "tracegen.py",
        url=state["url"],
        preset=state["preset"],
        trace_path=state["trace_path"],
    )
    print("(recorder_node) -> Generating trace (headed)...")
    runner.run([settings.python_bin, str(helper)], settings)
    state["trace_generated"] = True
    return state


def feedback_node(state: RecordState) -> RecordState:
    state["feedback"] = ask_text("Feedback/notes (optional)", default="")
    return state


def save_node(state: RecordState) -> RecordState:
    entry: HistoryEntry = {
        "id": state["session_id"],
        "url": state["url"],
        "device": state["device"],
        "createdAt": utc_timestamp(),
        "feedback": state.get("feedback", ""),
        "scriptPath": state["script_path"],
        "tracePath": state["trace_path"],
    }
    history = append_entry(state["settings"].history_path, entry)
    print(f"(recorder_node) -> History now holds {len(history)} session(s)")
    state["entry"] = entry
    return state


def report_node(state: RecordState) -> RecordState:
    entry = state["entry"]
    trace_path = entry["tracePath"]
    trace_label = trace_path if pathlib.Path(trace_path).exists() else "(not generated)"

    print("\n✅ Saved session")
    print(f"- ID:     {entry['id']}")
    print(f"- Script: {entry['scriptPath']}")
    print(f"- Trace:  {trace_label}")
    print(f"- Log:    {state['settings'].history_path}\n")
    return state
