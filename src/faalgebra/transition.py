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

from functools import total_ordering


@total_ordering
class Transition:
    """
    An edge of a state graph: ``source --symbol--> target``.

    Transitions are immutable values. Two transitions are equal when their
    source, symbol and target are equal, and they sort lexicographically by
    source, then symbol, then target, so a sorted list of transitions reads
    state by state.

    Args:
        source (int): The state the edge leaves.
        symbol (object): The label of the edge. Symbols of one automaton must
            be hashable and totally ordered.
        target (int): The state the edge enters.

    Example:
        >>> Transition(0, "a", 1) < Transition(0, "b", 0)
        True
    """

    __slots__ = ("_source", "_symbol", "_target")

    def __init__(self, source, symbol, target):
        self._source = source
        self._symbol = symbol
        self._target = target

    @property
    def source(self):
        return self._source

    @property
    def symbol(self):
        return self._symbol

    @property
    def target(self):
        return self._target

    def key(self):
        return (self._source, self._symbol, self._target)

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return self.key() == other.key()

    def __lt__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return self.key() < other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return f"{self.__class__.__name__}({self._source!r}, {self._symbol!r}, {self._target!r})"

    def copy(self):
        """Returns an equal, independent transition."""
        return Transition(self._source, self._symbol, self._target)

    def relabeled(self, mapping):
        """
        Returns a copy of this transition with its endpoints passed through
        ``mapping``. Endpoints missing from the mapping are kept.

        Args:
            mapping (dict): Maps old state numbers to new ones.

        Returns:
            Transition: The relabeled transition.
        """
        return Transition(
            mapping.get(self._source, self._source),
            self._symbol,
            mapping.get(self._target, self._target),
        )

    def shifted(self, delta):
        """Returns a copy of this transition with both endpoints moved by ``delta``."""
        return Transition(self._source + delta, self._symbol, self._target + delta)
