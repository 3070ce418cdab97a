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
Exceptions raised by the automata classes.

Looking up a transition that doesn't exist is not an error: ``next_state``
returns None in that case.
"""


class AutomatonError(Exception):
    """Base class for all errors raised by this package."""


class MalformedFragment(AutomatonError):
    """
    Raised when an operand of the NFA algebra does not have exactly one
    accepting state.

    Args:
        message (str): Description of the problem.
        count (int, optional): How many accepting states the operand had.
    """

    def __init__(self, message, count=None):
        self.count = count
        super().__init__(message)

    def __str__(self):
        if self.count is not None:
            return f"{super().__str__()} (found {self.count} accepting states)"
        return super().__str__()


class EpsilonMismatch(AutomatonError):
    """Raised when two NFAs with different epsilon symbols are combined."""


class InvalidStateId(AutomatonError, ValueError):
    """Raised when a state number is not a non-negative integer."""
