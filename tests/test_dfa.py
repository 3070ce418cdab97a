from itertools import product

from faalgebra.dfa import DFA
from faalgebra.nfa import EPSILON, NFA, charset_nfa, string_nfa


def accepts(dfa, word):
    state = dfa.initial_state
    for symbol in word:
        state = dfa.next_state(state, symbol)
        if state is None:
            return False
    return dfa.is_accepting(state)


def language(dfa, symbols="abc", maxlen=5):
    words = set()
    for n in range(maxlen + 1):
        for word in product(symbols, repeat=n):
            if accepts(dfa, word):
                words.add("".join(word))
    return words


def is_deterministic(dfa):
    pairs = [(t.source, t.symbol) for t in dfa.transitions]
    return len(pairs) == len(set(pairs))


def test_empty_dfa():
    dfa = DFA()
    assert dfa.initial_state == 0
    assert dfa.transitions == ()
    assert dfa.accepting_states == []


def test_basic():
    dfa = DFA(NFA("a"))
    assert dfa.initial_state == 0
    assert dfa.states == [0, 1]
    assert dfa.accepting_states == [1]
    assert dfa.next_state(0, "a") == 1
    assert dfa.alphabet == ["a"]


def test_end_to_end():
    nfa = NFA("a").star().concat(NFA("b"))
    dfa = DFA(nfa)
    assert is_deterministic(dfa)
    assert dfa.alphabet == ["a", "b"]
    for word in ("b", "ab", "aab"):
        assert accepts(dfa, word)
    for word in ("", "a", "ba"):
        assert not accepts(dfa, word)


def test_to_dfa():
    nfa = string_nfa("ab")
    assert nfa.to_dfa() == DFA(nfa)


def test_star_accepts_empty():
    dfa = DFA(NFA("a").star())
    assert dfa.accepting_states == [0, 1]
    assert language(dfa, maxlen=3) == {"", "a", "aa", "aaa"}


def test_epsilon_never_in_dfa():
    dfa = DFA(NFA("a").star().choice(NFA("b").optional()))
    assert EPSILON not in dfa.alphabet
    assert all(t.symbol is not EPSILON for t in dfa.transitions)
    assert is_deterministic(dfa)


def test_nondeterministic_choice_is_merged():
    # ab|ac: both alternatives start with "a" from the same state
    nfa = string_nfa("ab").choice(string_nfa("ac"))
    assert len(nfa.targets(0, "a")) == 2
    dfa = DFA(nfa)
    assert is_deterministic(dfa)
    assert language(dfa) == {"ab", "ac"}


def test_concat_associative():
    a, b, c = NFA("a").star(), charset_nfa("bc"), NFA("a")
    left = DFA(a.concat(b).concat(c))
    right = DFA(a.concat(b.concat(c)))
    assert language(left) == language(right)
    assert "aaba" in language(left)


def test_choice_commutative():
    a = string_nfa("ab").star()
    b = NFA("c").concat(NFA("a").optional())
    assert language(DFA(a.choice(b))) == language(DFA(b.choice(a)))
    words = language(DFA(a.choice(b)))
    assert "abab" in words
    assert "ca" in words
    assert "cab" not in words
    assert "abc" not in words


def test_star_idempotent():
    a = string_nfa("ab").choice(NFA("c"))
    once = DFA(a.star())
    twice = DFA(a.star().star())
    assert language(once) == language(twice)
    assert "cabc" in language(once)


def test_plus():
    dfa = DFA(NFA("a").plus())
    assert language(dfa, maxlen=3) == {"a", "aa", "aaa"}


def test_replace_transitions_language():
    # aXa with X := b*
    nfa = string_nfa("aXa").replace_transitions("X", NFA("b").star())
    words = language(DFA(nfa))
    assert {"aa", "aba", "abba"} <= words
    assert "ab" not in words
    assert "abab" not in words


def test_replace_inside_choice():
    # (X|c) with X := b*; "cb" must not be accepted
    nfa = NFA("X").choice(NFA("c")).replace_transitions("X", NFA("b").star())
    assert language(DFA(nfa), maxlen=3) == {"", "b", "bb", "bbb", "c"}


def test_construction_is_deterministic():
    nfa = NFA("a").star().concat(charset_nfa("bc")).star()
    d1 = DFA(nfa)
    d2 = DFA(nfa)
    assert d1.transitions == d2.transitions
    assert d1.accepting_states == d2.accepting_states


def test_multiple_accepting_states():
    nfa = NFA()
    nfa.add_transition(0, "a", 1)
    nfa.add_transition(0, "b", 2)
    nfa.add_accepting_state(1)
    nfa.add_accepting_state(2)
    dfa = DFA(nfa)
    assert language(dfa, maxlen=2) == {"a", "b"}


def test_no_accepting_states():
    nfa = NFA()
    nfa.add_transition(0, "a", 1)
    dfa = DFA(nfa)
    assert dfa.accepting_states == []
    assert dfa.next_state(0, "a") == 1


def test_source_nfa_unchanged():
    nfa = NFA("a").star().concat(NFA("b"))
    before = nfa.copy()
    DFA(nfa)
    assert nfa == before


def test_rendering():
    dfa = DFA(NFA("a").star())
    assert str(dfa) == "(>(0))->a->((1))\n((1))->a->((1))\n"
