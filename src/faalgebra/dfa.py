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

from loguru import logger

from faalgebra.graph import StateGraph


class DFA(StateGraph):
    """
    A deterministic finite automaton built from an NFA by subset
    construction.

    Each DFA state stands for a set of NFA states: the first one is the
    epsilon closure of the NFA's initial state and gets number 0, and the
    others are numbered in the order they are discovered. A DFA state is
    accepting if its set contains any accepting state of the NFA. The DFA has
    the same alphabet as the NFA, and it is not minimized.

    Args:
        nfa (NFA, optional): The automaton to convert. Without it, an empty
            DFA with initial state 0 is created.

    Example:
        >>> dfa = DFA(NFA("a").star())
        >>> dfa.accepting_states
        [0, 1]
    """

    def __init__(self, nfa=None):
        super().__init__(0)
        if nfa is not None:
            self._build_subsets(nfa)

    def _build_subsets(self, nfa):
        alphabet = nfa.alphabet
        final_states = frozenset(nfa.accepting_states)

        # Maps each set of NFA states to its DFA state. frozenset equality
        # ignores order and duplicates.
        subsets = {}

        def dfa_state(subset):
            if subset not in subsets:
                subsets[subset] = len(subsets)
                frontier.append(subset)
                if subset & final_states:
                    self.add_accepting_state(subsets[subset])
            return subsets[subset]

        frontier = []
        start = frozenset(nfa.closure(nfa.initial_state))
        self._set_initial(dfa_state(start))

        while frontier:
            current = frontier.pop()
            src = subsets[current]
            for label in alphabet:
                moved = set()
                for state in sorted(current):
                    for dest in nfa.targets(state, label):
                        moved.update(nfa.closure(dest))
                if not moved:
                    continue
                self.add_transition(src, label, dfa_state(frozenset(moved)))

        logger.debug(
            "subset construction: {!r} -> {!r} ({} subsets)", nfa, self, len(subsets)
        )
