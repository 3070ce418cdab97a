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

import sys

from cached_property import cached_property
from loguru import logger

from faalgebra.errors import InvalidStateId
from faalgebra.transition import Transition

# Library code stays quiet unless the application calls
# logger.enable("faalgebra")
logger.disable("faalgebra")


def _check_state(state):
    if isinstance(state, bool) or not isinstance(state, int) or state < 0:
        raise InvalidStateId(f"State ids must be non-negative integers, not {state!r}")
    return state


class StateGraph:
    """
    Base class for finite automata whose states are numbered with
    non-negative integers.

    The graph is a flat, insertion-ordered list of :class:`Transition` objects,
    one initial state and a list of accepting states. The alphabet and the set
    of states are derived from those on demand. This class holds the
    behaviour shared by :class:`faalgebra.nfa.NFA` and
    :class:`faalgebra.dfa.DFA` and cannot be instantiated on its own.

    Attributes:
        initial_state (int): The initial state.
        transitions (tuple): The transitions, in insertion order.
        accepting_states (list): The accepting states, in insertion order.
    """

    def __init__(self, initial=0):
        if type(self) is StateGraph:
            raise TypeError("StateGraph is abstract, use NFA or DFA")
        self._initial = _check_state(initial)
        self._transitions = []
        self._accepting = []

    # Derived views

    @property
    def initial_state(self):
        """
        The state the automaton starts in.

        Returns:
            int: The initial state.
        """
        return self._initial

    @property
    def transitions(self):
        """
        The transitions of the graph in the order they were added.

        Returns:
            tuple: A read-only snapshot of the :class:`Transition` objects.
        """
        return tuple(self._transitions)

    @property
    def accepting_states(self):
        """
        The accepting states in the order they were added. Each state appears
        once.

        Returns:
            list: A copy of the accepting states.
        """
        return list(self._accepting)

    def _counts_as_symbol(self, symbol):
        return True

    @property
    def alphabet(self):
        """
        The distinct symbols used by the transitions, in ascending order.

        Returns:
            list: The sorted symbols.
        """
        return sorted({t.symbol for t in self._transitions if self._counts_as_symbol(t.symbol)})

    @property
    def states(self):
        """
        Every state referenced by the graph: transition endpoints, accepting
        states and the initial state, in ascending order.

        Returns:
            list: The sorted state numbers.
        """
        stateset = {self._initial}
        stateset.update(self._accepting)
        for t in self._transitions:
            stateset.add(t.source)
            stateset.add(t.target)
        return sorted(stateset)

    @property
    def next_available_state(self):
        """
        One more than the largest state number referenced anywhere in the
        graph. Composition uses this to allocate fresh states.
        """
        return max(self.states) + 1

    def __len__(self):
        return len(self.states)

    def __eq__(self, other):
        if not isinstance(other, StateGraph) or type(self) is not type(other):
            return NotImplemented
        if self._initial != other._initial:
            return False
        if set(self._accepting) != set(other._accepting):
            return False
        return sorted(self._transitions) == sorted(other._transitions)

    __hash__ = None

    def __repr__(self):
        return "<%s with %d states and %d transitions>" % (
            self.__class__.__name__,
            len(self),
            len(self._transitions),
        )

    # Lookup

    @cached_property
    def _outgoing(self):
        index = {}
        for t in self._transitions:
            index.setdefault((t.source, t.symbol), []).append(t.target)
        return index

    def _touch(self):
        # Invalidate the cached (source, symbol) index after a mutation
        self.__dict__.pop("_outgoing", None)

    def targets(self, state, symbol):
        """
        Returns every state reachable from ``state`` by one transition
        labeled ``symbol``, in the order the transitions were added.

        Args:
            state (int): The source state.
            symbol (object): The transition label.

        Returns:
            list: The destination states (possibly empty).
        """
        return list(self._outgoing.get((state, symbol), ()))

    def next_state(self, state, symbol):
        """
        Returns the destination of the first transition leaving ``state`` with
        label ``symbol``, or None if there is no such transition.

        For a DFA there is at most one such transition. For an NFA this is a
        single-edge lookup, not a step of the automaton; use
        :meth:`targets` to get every destination.

        Example:
            >>> nfa = NFA("a")
            >>> nfa.next_state(0, "a")
            1
            >>> nfa.next_state(1, "a") is None
            True
        """
        dests = self._outgoing.get((state, symbol))
        if dests:
            return dests[0]
        return None

    def has_incoming(self, state):
        """
        Checks if any transition, including a self-loop, enters ``state``.

        Args:
            state (int): The state to check.

        Returns:
            bool: True if some transition has ``state`` as its target.
        """
        return any(t.target == state for t in self._transitions)

    def has_outgoing(self, state):
        """
        Checks if any transition, including a self-loop, leaves ``state``.

        Args:
            state (int): The state to check.

        Returns:
            bool: True if some transition has ``state`` as its source.
        """
        return any(t.source == state for t in self._transitions)

    def is_accepting(self, state):
        """
        Checks if ``state`` is an accepting state.

        Args:
            state (int): The state to check.

        Returns:
            bool: True if the state is accepting, False otherwise.
        """
        return state in self._accepting

    # Mutation

    def add_transition(self, src, symbol, dest):
        """
        Appends the transition ``src --symbol--> dest``.

        Args:
            src (int): The source state.
            symbol (object): The transition label.
            dest (int): The destination state.
        """
        self._transitions.append(Transition(_check_state(src), symbol, _check_state(dest)))
        self._touch()

    def add_accepting_state(self, state):
        """Marks ``state`` as accepting. Adding a state twice has no effect."""
        if state not in self._accepting:
            self._accepting.append(_check_state(state))

    def _set_initial(self, state):
        self._initial = _check_state(state)

    def _set_accepting(self, states):
        self._accepting = []
        for state in states:
            self.add_accepting_state(state)

    def _set_transitions(self, transitions):
        self._transitions = list(transitions)
        self._touch()

    def relabel(self, mapping):
        """
        Renames states in place according to ``mapping``.

        Every reference to a state (the initial state, both ends of every
        transition and the accepting states) is passed through the mapping.
        States missing from the mapping keep their number. Mapping two states
        to the same number merges them into one state.

        Args:
            mapping (dict): Maps old state numbers to new ones.

        Raises:
            InvalidStateId: If a new number is not a non-negative integer.
        """
        for newnum in mapping.values():
            _check_state(newnum)
        self._initial = mapping.get(self._initial, self._initial)
        self._transitions = [t.relabeled(mapping) for t in self._transitions]
        self._set_accepting([mapping.get(s, s) for s in self._accepting])
        self._touch()

    def offset_states(self, new_initial):
        """
        Shifts every state number by ``new_initial - initial_state``, so that
        afterwards the initial state is ``new_initial`` and all other states
        keep their distance from it.

        Args:
            new_initial (int): The new number of the initial state.

        Raises:
            InvalidStateId: If the shift would produce a negative state number.
        """
        delta = _check_state(new_initial) - self._initial
        if not delta:
            return
        if min(self.states) + delta < 0:
            raise InvalidStateId(f"Offsetting to {new_initial} would produce negative state ids")
        self._initial += delta
        self._transitions = [t.shifted(delta) for t in self._transitions]
        self._accepting = [s + delta for s in self._accepting]
        self._touch()

    def renumber_state(self, old, new):
        """
        Replaces every occurrence of state ``old`` with ``new``. If ``new`` is
        already in the graph the two states become one.
        """
        self.relabel({old: new})

    def copy(self):
        """
        Returns an independent copy of this graph. Duplicate transitions are
        dropped from the copy.
        """
        c = self.__class__.__new__(self.__class__)
        c.__dict__.update(self.__dict__)
        c._transitions = list(dict.fromkeys(self._transitions))
        c._accepting = list(self._accepting)
        c._touch()
        return c

    __copy__ = copy

    # Rendering

    def _annotate(self, state):
        text = f"({state})"
        if state == self._initial:
            text = ">" + text
        if state in self._accepting:
            text = "(" + text + ")"
        return text

    def __str__(self):
        """
        Returns one line per transition, sorted, in the form
        ``source->symbol->target``. The initial state is prefixed with ``>``
        and accepting states are wrapped in an extra pair of parentheses::

            >(0)->a->((1))
        """
        lines = []
        for t in sorted(self._transitions):
            lines.append(f"{self._annotate(t.source)}->{t.symbol}->{self._annotate(t.target)}\n")
        return "".join(lines)

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the automaton to the specified
        stream.

        Args:
            stream (file): The stream to print the representation to. Defaults
                to sys.stdout.
        """
        stream.write(str(self))
