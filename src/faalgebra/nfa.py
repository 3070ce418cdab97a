# Copyright 2014 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
Non-deterministic finite automata and the algebra used to build them.

Every automaton produced by the operators in this module is a *fragment*: it
has exactly one initial state and exactly one accepting state. Fragments are
glued together by fusing states, i.e. renaming a state of one operand to the
number of a state of the other, rather than by linking them with epsilon
transitions. Only :meth:`NFA.star` adds epsilon transitions.

Operators never modify their operands; they work on copies and return a new
automaton.

    >>> print(NFA("a").concat(NFA("b")).star())
    >(0)->EPSILON->(1)
    >(0)->EPSILON->((4))
    (1)->a->(2)
    (2)->b->(3)
    (3)->EPSILON->((4))
    ((4))->EPSILON->(1)
    <BLANKLINE>
"""

from loguru import logger

from faalgebra.dfa import DFA
from faalgebra.errors import EpsilonMismatch, MalformedFragment
from faalgebra.graph import StateGraph
from faalgebra.util import make_binary_tree


class Marker:
    """
    A named singleton used as a special symbol.

    A marker is equal only to itself and sorts before every other symbol, so it
    can share a transition list with any totally ordered alphabet.

    Attributes:
        name (str): The name of the marker.
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"

    def __str__(self):
        return self.name

    def _key(self, other):
        if isinstance(other, Marker):
            return self.name, other.name
        return None

    def __lt__(self, other):
        names = self._key(other)
        return names[0] < names[1] if names else True

    def __le__(self, other):
        names = self._key(other)
        return names[0] <= names[1] if names else True

    def __gt__(self, other):
        names = self._key(other)
        return names[0] > names[1] if names else False

    def __ge__(self, other):
        names = self._key(other)
        return names[0] >= names[1] if names else False

    # Copies and pickles of module-level markers such as EPSILON resolve to the
    # module attribute of the same name; other markers cannot be pickled
    def __reduce__(self):
        return self.name


EPSILON = Marker("EPSILON")


class NFA(StateGraph):
    """
    A non-deterministic finite automaton with a designated epsilon symbol.

    Called with a symbol, the constructor builds the basic two-state fragment
    ``0 --symbol--> 1`` with state 1 accepting. Called without one, it builds
    an empty automaton with initial state 0 and no accepting state, which can
    be filled in with :meth:`add_transition` and :meth:`add_accepting_state`.

    Args:
        symbol (object, optional): The label of the single transition.
        epsilon (object, optional): The symbol meaning "no input consumed".
            Defaults to :data:`EPSILON`. It is never part of the alphabet.

    Example:
        >>> nfa = NFA("a")
        >>> nfa.transitions
        (Transition(0, 'a', 1),)
        >>> nfa.accepting_states
        [1]
    """

    def __init__(self, symbol=None, epsilon=EPSILON):
        super().__init__(0)
        self._epsilon = epsilon
        if symbol is not None:
            accept = self.next_available_state
            self.add_transition(self._initial, symbol, accept)
            self.add_accepting_state(accept)

    @property
    def epsilon(self):
        """
        The symbol that consumes no input. It is never part of
        :attr:`alphabet`.

        Returns:
            object: The epsilon symbol.
        """
        return self._epsilon

    def _counts_as_symbol(self, symbol):
        return symbol != self._epsilon

    @property
    def accepting_state(self):
        """
        The single accepting state of this fragment.

        Raises:
            MalformedFragment: If the automaton does not have exactly one
                accepting state.
        """
        if len(self._accepting) != 1:
            raise MalformedFragment(
                "Operand must have exactly one accepting state", len(self._accepting)
            )
        return self._accepting[0]

    # Epsilon closure

    def closure(self, state):
        """
        Returns the states reachable from ``state`` by following zero or more
        epsilon transitions, including ``state`` itself.

        Args:
            state (int): The state to start from.

        Returns:
            list: The reachable states in ascending order.

        Example:
            >>> star = NFA("a").star()
            >>> star.closure(0)
            [0, 1, 3]
        """
        eps = self._epsilon
        outgoing = self._outgoing
        seen = {state}
        stack = [state]
        while stack:
            current = stack.pop()
            for dest in outgoing.get((current, eps), ()):
                if dest not in seen:
                    seen.add(dest)
                    stack.append(dest)
        return sorted(seen)

    # Helpers for the algebra

    def _check_compatible(self, other):
        if not isinstance(other, NFA):
            raise TypeError(f"Expected an NFA, got {other!r}")
        if other._epsilon != self._epsilon:
            raise EpsilonMismatch(
                f"Cannot combine NFAs with epsilon {self._epsilon!r} and {other._epsilon!r}"
            )

    def _sealed(self, entry=True, exit=True):
        # Returns a copy whose initial state has no incoming transitions and
        # whose accepting state has no outgoing transitions, so both can be
        # fused with states of another automaton without adding paths.
        result = self.copy()
        accept = result.accepting_state
        if entry and (result.has_incoming(result._initial) or result._initial == accept):
            start = result.next_available_state
            result.add_transition(start, result._epsilon, result._initial)
            result._set_initial(start)
        if exit and (result.has_outgoing(accept) or result._initial == accept):
            end = result.next_available_state
            result.add_transition(accept, result._epsilon, end)
            result._set_accepting([end])
        return result

    def _embed(self, other, fused):
        """
        Copies the transitions of ``other`` into this automaton.

        States of ``other`` listed in ``fused`` become the given states of this
        automaton; the remaining states get fresh numbers above this
        automaton's states, in their original order.

        Args:
            other (NFA): The automaton to copy from. It is not modified.
            fused (dict): Maps states of ``other`` to states of ``self``.

        Returns:
            dict: The complete mapping applied to the states of ``other``.
        """
        mapping = dict(fused)
        fresh = self.next_available_state
        for state in other.states:
            if state not in mapping:
                mapping[state] = fresh
                fresh += 1
        self._set_transitions(
            list(self._transitions) + [t.relabeled(mapping) for t in other._transitions]
        )
        return mapping

    # Algebra

    def concat(self, other):
        """
        Returns the concatenation of this fragment followed by ``other``.

        The accepting state of this fragment and the initial state of
        ``other`` become one state; the result accepts in ``other``'s
        (renumbered) accepting state.

        Args:
            other (NFA): The fragment to append.

        Returns:
            NFA: A new fragment.

        Raises:
            MalformedFragment: If either operand does not have exactly one
                accepting state.

        Example:
            >>> print(NFA("a").concat(NFA("b")))
            >(0)->a->(1)
            (1)->b->((2))
        """
        self._check_compatible(other)
        result = self.copy()
        accept = result.accepting_state
        part = other.copy()
        part_accept = part.accepting_state
        if result.has_outgoing(accept) and part.has_incoming(part._initial):
            part = part._sealed(exit=False)

        mapping = result._embed(part, {part._initial: accept})
        result._set_accepting([mapping[part_accept]])
        logger.debug("concat: {!r} + {!r} -> {!r}", self, other, result)
        return result

    __add__ = concat

    def choice(self, other):
        """
        Returns the alternation of this fragment and ``other``.

        The initial states of both operands become one state, and so do their
        accepting states, so the two operands form parallel paths between one
        shared entry and one shared exit. When neither operand needs sealing
        the result keeps this fragment's initial and accepting state numbers.

        Args:
            other (NFA): The alternative fragment.

        Returns:
            NFA: A new fragment.

        Raises:
            MalformedFragment: If either operand does not have exactly one
                accepting state.

        Example:
            >>> print(NFA("a").choice(NFA("b")))
            >(0)->a->((1))
            >(0)->b->((1))
        """
        self._check_compatible(other)
        result = self._sealed()
        part = other._sealed()
        result._embed(
            part,
            {part._initial: result._initial, part.accepting_state: result.accepting_state},
        )
        logger.debug("choice: {!r} | {!r} -> {!r}", self, other, result)
        return result

    __or__ = choice

    def star(self):
        """
        Returns the Kleene closure of this fragment.

        The fragment is shifted up so that state 0 is free for a new entry
        state, and a new exit state is allocated. Four epsilon transitions
        connect them::

            0 -> body start          (enter the body)
            body accept -> exit      (finish one repetition)
            exit -> body start       (repeat)
            0 -> exit                (zero repetitions)

        Returns:
            NFA: A new fragment with initial state 0 accepting in the exit
            state.

        Raises:
            MalformedFragment: If the fragment does not have exactly one
                accepting state.
        """
        accept = self.accepting_state
        result = self.copy()
        # Move the lowest state to 1, freeing 0
        delta = 1 - min(result.states)
        result.offset_states(result._initial + delta)
        accept += delta
        body = result._initial
        entry = 0
        final = result.next_available_state
        eps = result._epsilon

        result.add_transition(entry, eps, body)
        result.add_transition(accept, eps, final)
        result.add_transition(final, eps, body)
        result.add_transition(entry, eps, final)
        result._set_initial(entry)
        result._set_accepting([final])
        logger.debug("star: {!r} -> {!r}", self, result)
        return result

    def plus(self):
        """Returns a fragment matching one or more repetitions of this one."""
        return self.concat(self.star())

    def optional(self):
        """Returns a fragment matching this one or nothing."""
        return self.choice(epsilon_nfa(self._epsilon))

    def replace_transitions(self, symbol, fragment):
        """
        Replaces every transition labeled ``symbol`` with a copy of
        ``fragment``.

        For each such transition ``src --symbol--> dest`` a fresh copy of
        ``fragment`` is inserted with its initial state fused to ``src`` and
        its accepting state fused to ``dest``, and the transition itself is
        removed. Only the transitions present before the call are replaced;
        transitions labeled ``symbol`` inside the inserted copies are kept.

        This is how a placeholder symbol is expanded into a full
        sub-automaton.

        Args:
            symbol (object): The label of the transitions to replace.
            fragment (NFA): The automaton to insert.

        Returns:
            NFA: A new automaton.

        Raises:
            MalformedFragment: If this automaton or ``fragment`` does not have
                exactly one accepting state.
        """
        self._check_compatible(fragment)
        # Raises MalformedFragment unless the host is a fragment as well
        self.accepting_state
        part = fragment._sealed()
        part_accept = part.accepting_state
        result = self.copy()
        # Work from a snapshot so copies inserted below are never expanded
        replaced = [t for t in result._transitions if t.symbol == symbol]
        for t in replaced:
            result._embed(part, {part._initial: t.source, part_accept: t.target})

        dropped = {id(t) for t in replaced}
        result._set_transitions(t for t in result._transitions if id(t) not in dropped)
        logger.debug(
            "replace_transitions: {} x {!r} in {!r} -> {!r}",
            len(replaced),
            symbol,
            self,
            result,
        )
        return result

    def to_dfa(self):
        """Converts this NFA to a DFA by subset construction."""
        return DFA(self)


# Builders


def basic_nfa(symbol, epsilon=EPSILON):
    """Returns the two-state fragment matching ``symbol``."""
    return NFA(symbol, epsilon=epsilon)


def epsilon_nfa(epsilon=EPSILON):
    """Returns a two-state fragment matching the empty sequence."""
    return NFA(epsilon, epsilon=epsilon)


def string_nfa(symbols, epsilon=EPSILON):
    """
    Returns a fragment matching the given sequence of symbols.

    Example:
        >>> print(string_nfa("ab"))
        >(0)->a->(1)
        (1)->b->((2))
    """
    parts = [NFA(symbol, epsilon=epsilon) for symbol in symbols]
    if not parts:
        return epsilon_nfa(epsilon)
    return make_binary_tree(NFA.concat, parts)


def charset_nfa(symbols, epsilon=EPSILON):
    """Returns a fragment matching any one of the given symbols."""
    parts = [NFA(symbol, epsilon=epsilon) for symbol in symbols]
    if not parts:
        raise ValueError("charset_nfa needs at least one symbol")
    return make_binary_tree(NFA.choice, parts)
