# file: gui_recorder/graph/compile.py

from langgraph.graph import StateGraph, END

from gui_recorder.config import Settings
from gui_recorder.graph import recorder, replay
from gui_recorder.graph.state import RecordState, ReplayState


def build_record_graph():
    graph = StateGraph(RecordState)
    graph.add_node("resolve", recorder.resolve_node)
    graph.add_node("target", recorder.target_node)
    graph.add_node("session", recorder.session_node)
    graph.add_node("codegen", recorder.codegen_node)
    graph.add_node("trace", recorder.trace_node)
    graph.add_node("feedback", recorder.feedback_node)
    graph.add_node("save", recorder.save_node)
    graph.add_node("report", recorder.report_node)

    graph.set_entry_point("resolve")
    graph.add_edge("resolve", "target")
    graph.add_edge("target", "session")
    graph.add_edge("session", "codegen")
    graph.add_edge("codegen", "trace")
    graph.add_edge("trace", "feedback")
    graph.add_edge("feedback", "save")
    graph.add_edge("save", "report")
    graph.add_edge("report", END)
    return graph.compile()


def route_after_load(state: ReplayState) -> str:
    return "pick" if state.get("entries") else END


def route_after_pick(state: ReplayState) -> str:
    return "viewers" if state.get("trace_ready") else END


def build_replay_graph():
    graph = StateGraph(ReplayState)
    graph.add_node("resolve", replay.resolve_node)
    graph.add_node("load", replay.load_node)
    graph.add_node("pick", replay.pick_node)
    graph.add_node("viewers", replay.viewers_node)

    graph.set_entry_point("resolve")
    graph.add_edge("resolve", "load")
    graph.add_conditional_edges("load", route_after_load, ["pick", END])
    graph.add_conditional_edges("pick", route_after_pick, ["viewers", END])
    graph.add_edge("viewers", END)
    return graph.compile()


record_app = build_record_graph()
replay_app = build_replay_graph()


def record_new_test(settings: Settings) -> RecordState:
    """Run the recorder flow once. Errors from any step propagate to the caller."""
    return record_app.invoke({"settings": settings})


def replay_test(settings: Settings) -> ReplayState:
    return replay_app.invoke({"settings": settings})
