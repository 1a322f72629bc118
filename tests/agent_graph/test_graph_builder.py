# tests/agent_graph/test_graph_builder.py
import pytest

from agent_graph import (
    END,
    START,
    ChatTemplate,
    DuplicateNameError,
    Graph,
    GraphCompiledError,
    GraphValidationError,
    UnknownNodeError,
    ValueKind,
    user_message,
)


def identity(value):
    return value


def add_passthrough(graph, name):
    graph.add_lambda_node(name, identity, input_kind=ValueKind.ANY, output_kind=ValueKind.ANY)


def template():
    return ChatTemplate.from_messages(user_message("{question}"))


# ─── adding nodes ─────────────────────────────────────────────────────────


def test_duplicate_node_name_rejected():
    g = Graph()
    add_passthrough(g, "a")
    with pytest.raises(DuplicateNameError) as exc_info:
        add_passthrough(g, "a")
    assert exc_info.value.name == "a"


@pytest.mark.parametrize("reserved", [START, END])
def test_reserved_names_rejected(reserved):
    g = Graph()
    with pytest.raises(DuplicateNameError):
        add_passthrough(g, reserved)


def test_add_node_requires_node_instance():
    with pytest.raises(TypeError):
        Graph().add_node("a", identity)


# ─── wiring ───────────────────────────────────────────────────────────────


def test_edge_to_unknown_node():
    g = Graph()
    add_passthrough(g, "a")
    with pytest.raises(UnknownNodeError) as exc_info:
        g.add_edge("a", "ghost")
    assert exc_info.value.name == "ghost"
    # dangling references are validation errors too
    assert isinstance(exc_info.value, GraphValidationError)


def test_edge_from_end_or_into_start_rejected():
    g = Graph()
    add_passthrough(g, "a")
    with pytest.raises(GraphValidationError):
        g.add_edge(END, "a")
    with pytest.raises(GraphValidationError):
        g.add_edge("a", START)


def test_branch_validation_at_add_time():
    g = Graph()
    add_passthrough(g, "a")
    with pytest.raises(GraphValidationError, match="no targets"):
        g.add_branch("a", lambda v: END, [])
    with pytest.raises(GraphValidationError):
        g.add_branch("a", lambda v: START, {START, END})
    with pytest.raises(UnknownNodeError):
        g.add_branch("a", lambda v: "ghost", {"ghost", END})
    with pytest.raises(UnknownNodeError):
        g.add_branch("ghost", lambda v: END, {END})
    with pytest.raises(TypeError):
        g.add_branch("a", "not callable", {END})


# ─── compile ──────────────────────────────────────────────────────────────


def test_minimal_graph_compiles():
    g = Graph("minimal")
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    g.add_edge("a", END)

    app = g.compile()

    assert list(app.nodes) == ["a"]
    assert app.successors(START) == frozenset({"a"})
    assert app.successors("a") == frozenset({END})
    assert app.max_steps == 1 + 10
    assert app.name == "minimal"


def test_compiled_node_map_is_read_only():
    g = Graph()
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    g.add_edge("a", END)
    app = g.compile()
    with pytest.raises(TypeError):
        app.nodes["b"] = app.nodes["a"]


def test_compiled_settings_are_read_only():
    g = Graph("fixed")
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    g.add_edge("a", END)
    app = g.compile(max_steps=3)

    with pytest.raises(AttributeError):
        app.max_steps = 100
    with pytest.raises(AttributeError):
        app.name = "other"
    assert (app.name, app.max_steps) == ("fixed", 3)


def test_builder_frozen_after_compile():
    g = Graph()
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    g.add_edge("a", END)
    g.compile()

    with pytest.raises(GraphCompiledError):
        add_passthrough(g, "b")
    with pytest.raises(GraphCompiledError):
        g.add_edge("a", END)
    with pytest.raises(GraphCompiledError):
        g.add_branch("a", lambda v: END, {END})


def test_compile_requires_edge_from_start():
    g = Graph()
    add_passthrough(g, "a")
    g.add_edge("a", END)
    with pytest.raises(GraphValidationError, match="START"):
        g.compile()


def test_compile_requires_edge_into_end():
    g = Graph()
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    with pytest.raises(GraphValidationError, match="END"):
        g.compile()


def test_node_without_successor_rejected():
    g = Graph()
    add_passthrough(g, "a")
    add_passthrough(g, "b")
    g.add_edge(START, "a")
    g.add_branch("a", lambda v: END, {"b", END})
    with pytest.raises(GraphValidationError, match="'b' has no outgoing"):
        g.compile()


def test_unreachable_node_rejected():
    g = Graph()
    add_passthrough(g, "a")
    add_passthrough(g, "orphan")
    g.add_edge(START, "a")
    g.add_edge("a", END)
    g.add_edge("orphan", END)
    with pytest.raises(GraphValidationError, match="not reachable"):
        g.compile()


def test_two_edges_from_one_source_rejected():
    g = Graph()
    add_passthrough(g, "a")
    add_passthrough(g, "b")
    g.add_edge(START, "a")
    g.add_edge("a", "b")
    g.add_edge("a", END)
    g.add_edge("b", END)
    with pytest.raises(GraphValidationError, match="more than one"):
        g.compile()


def test_edge_and_branch_from_one_source_rejected():
    g = Graph()
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    g.add_edge("a", END)
    g.add_branch("a", lambda v: END, {END})
    with pytest.raises(GraphValidationError, match="both an edge and a branch"):
        g.compile()


def test_kind_mismatch_between_nodes_rejected():
    g = Graph()
    g.add_template_node("node_template", template())
    # template emits a list of messages; a tools node expects one message
    g.add_tools_node("node_tools", [])
    g.add_edge(START, "node_template")
    g.add_edge("node_template", "node_tools")
    g.add_edge("node_tools", END)
    with pytest.raises(GraphValidationError, match="expects message"):
        g.compile()


def test_graph_input_kind_checked_against_first_node():
    def wire(g):
        g.add_tools_node("node_tools", [])
        g.add_edge(START, "node_tools")
        g.add_edge("node_tools", END)
        return g

    # a graph takes a variables mapping unless told otherwise
    with pytest.raises(GraphValidationError, match="expects message"):
        wire(Graph()).compile()
    assert wire(Graph(input_kind=ValueKind.MESSAGE)).compile().nodes["node_tools"]


def test_branch_targets_are_kind_checked():
    g = Graph()
    g.add_template_node("node_template", template())
    g.add_tools_node("node_tools", [])
    g.add_edge(START, "node_template")
    g.add_branch("node_template", lambda v: END, {"node_tools", END})
    g.add_edge("node_tools", END)
    with pytest.raises(GraphValidationError):
        g.compile()


def test_cycles_through_branches_are_allowed():
    g = Graph()
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    g.add_branch("a", lambda v: END, {"a", END})
    app = g.compile(max_steps=5)
    assert app.successors("a") == frozenset({"a", END})
    assert app.max_steps == 5


def test_max_steps_must_be_positive():
    g = Graph()
    add_passthrough(g, "a")
    g.add_edge(START, "a")
    g.add_edge("a", END)
    with pytest.raises(GraphValidationError):
        g.compile(max_steps=0)
