import io

import pytest
from faalgebra.errors import AutomatonError, InvalidStateId
from faalgebra.graph import StateGraph
from faalgebra.nfa import NFA
from faalgebra.transition import Transition


def _graph():
    nfa = NFA()
    nfa.add_transition(0, "a", 1)
    nfa.add_transition(1, "b", 2)
    nfa.add_transition(1, "a", 3)
    nfa.add_transition(0, "a", 2)
    nfa.add_accepting_state(2)
    return nfa


def test_state_graph_is_abstract():
    with pytest.raises(TypeError):
        StateGraph()


def test_derived_sets():
    g = _graph()
    assert g.alphabet == ["a", "b"]
    assert g.states == [0, 1, 2, 3]
    assert g.next_available_state == 4
    assert len(g) == 4


def test_empty_graph():
    g = NFA()
    assert g.states == [0]
    assert g.next_available_state == 1
    assert g.alphabet == []
    assert g.accepting_states == []
    assert str(g) == ""


def test_next_state_returns_first_match():
    g = _graph()
    assert g.next_state(0, "a") == 1
    assert g.targets(0, "a") == [1, 2]
    assert g.next_state(1, "b") == 2
    assert g.next_state(2, "a") is None
    assert g.targets(2, "a") == []


def test_lookup_index_follows_mutation():
    g = _graph()
    assert g.next_state(3, "c") is None
    g.add_transition(3, "c", 0)
    assert g.next_state(3, "c") == 0
    g.renumber_state(0, 9)
    assert g.next_state(3, "c") == 9
    assert g.next_state(9, "a") == 1


def test_offset_states():
    g = _graph()
    g.offset_states(5)
    assert g.initial_state == 5
    assert g.accepting_states == [7]
    assert g.transitions[0] == Transition(5, "a", 6)
    assert g.states == [5, 6, 7, 8]


def test_offset_round_trip():
    g = _graph()
    original = g.copy()
    g.offset_states(12)
    g.offset_states(0)
    assert g == original
    assert len(g.transitions) == len(original.transitions)


def test_offset_rejects_negative_ids():
    g = NFA()
    g.add_transition(0, "a", 1)
    g.renumber_state(0, 2)
    assert g.initial_state == 2
    with pytest.raises(InvalidStateId):
        g.offset_states(0)
    with pytest.raises(AutomatonError):
        g.offset_states(-1)


def test_renumber_state():
    g = _graph()
    g.renumber_state(2, 1)
    assert g.accepting_states == [1]
    assert Transition(1, "b", 1) in g.transitions
    assert Transition(0, "a", 1) in g.transitions
    assert g.states == [0, 1, 3]


def test_renumber_initial():
    g = _graph()
    g.renumber_state(0, 10)
    assert g.initial_state == 10
    assert g.next_available_state == 11


def test_copy_drops_duplicates_and_is_independent():
    g = NFA()
    g.add_transition(0, "a", 1)
    g.add_transition(0, "a", 1)
    g.add_accepting_state(1)
    c = g.copy()
    assert len(c.transitions) == 1
    c.add_transition(1, "b", 2)
    c.add_accepting_state(2)
    assert len(g.transitions) == 2
    assert g.accepting_states == [1]


def test_add_accepting_state_is_a_set():
    g = NFA()
    g.add_accepting_state(1)
    g.add_accepting_state(1)
    assert g.accepting_states == [1]
    assert g.is_accepting(1)
    assert not g.is_accepting(0)


def test_invalid_state_ids():
    g = NFA()
    with pytest.raises(InvalidStateId):
        g.add_transition(-1, "a", 0)
    with pytest.raises(InvalidStateId):
        g.add_accepting_state("one")
    with pytest.raises(ValueError):
        g.add_transition(0, "a", 1.5)


def test_rendering():
    g = _graph()
    assert str(g) == (
        ">(0)->a->(1)\n"
        ">(0)->a->((2))\n"
        "(1)->a->(3)\n"
        "(1)->b->((2))\n"
    )
    # Rendering does not reorder the stored transitions
    assert g.transitions[1] == Transition(1, "b", 2)


def test_rendering_accepting_initial():
    g = NFA()
    g.add_transition(0, "a", 0)
    g.add_accepting_state(0)
    assert str(g) == "(>(0))->a->(>(0))\n"


def test_dump():
    g = NFA("a")
    stream = io.StringIO()
    g.dump(stream)
    assert stream.getvalue() == ">(0)->a->((1))\n"


def test_equality():
    assert NFA("a") == NFA("a")
    assert NFA("a") != NFA("b")
    assert repr(NFA("a")) == "<NFA with 2 states and 1 transitions>"
