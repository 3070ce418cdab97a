# Copyright 2007 Matt Chaput. All rights reserved.
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


def make_binary_tree(fn, args, **kwargs):
    """Takes a function that combines two automata and a list of automata, and
    returns the result of combining them as a balanced binary tree.

    Args:
        fn (callable): A function or unbound method taking two positional
            arguments, such as ``NFA.concat``.
        args (list): The operands, in order.

    Keyword Args:
        **kwargs: Additional keyword arguments passed to every call of ``fn``.

    Returns:
        object: The combined result.

    Raises:
        ValueError: If called with an empty list.

    Examples:
        >>> make_binary_tree(NFA.concat, [NFA("a"), NFA("b"), NFA("c")])
        # NFA.concat(NFA("a"), NFA.concat(NFA("b"), NFA("c")))

    Balancing keeps the operands of each call small, which matters because
    every algebra operation copies both of its operands.
    """
    count = len(args)
    if not count:
        raise ValueError("Called make_binary_tree with empty list")
    elif count == 1:
        return args[0]

    half = count // 2
    return fn(
        make_binary_tree(fn, args[:half], **kwargs),
        make_binary_tree(fn, args[half:], **kwargs),
        **kwargs,
    )
