"""
    regexvm.matcher
    ~~~~~~~~~~~~~~~

    A breadth-first, non-backtracking simulation of a compiled program, as
    described by Rob Pike and Russ Cox. All threads advance over the input in
    lockstep and threads resting at the same instruction are merged, so a
    match takes ``O(len(program) * len(string))`` time regardless of how
    repetitions are nested.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD, see LICENSE.rst
"""
from loguru import logger

from regexvm.instructions import MatchChar, Accept, Jump, Split


class ThreadList(object):
    """
    The instruction pointers reachable at one position of the input, in
    priority order.

    Only :class:`MatchChar` and :class:`Accept` instructions are kept as
    threads, control flow instructions are followed when a thread is added.
    A pointer is only ever visited once, which bounds the size of the list by
    the length of the program.
    """
    def __init__(self, program):
        self.program = program
        self.visited = set()
        self.threads = []

    def add(self, pc):
        pending = [pc]
        while pending:
            pc = pending.pop()
            if pc in self.visited:
                continue
            self.visited.add(pc)
            instruction = self.program[pc]
            if isinstance(instruction, Jump):
                pending.append(instruction.target)
            elif isinstance(instruction, Split):
                # first is popped, and therefore followed, before second
                pending.append(instruction.second)
                pending.append(instruction.first)
            else:
                self.threads.append(pc)

    @property
    def is_accepting(self):
        return any(
            isinstance(self.program[pc], Accept) for pc in self.threads
        )

    def __contains__(self, pc):
        return pc in self.threads

    def __iter__(self):
        return iter(self.threads)

    def __len__(self):
        return len(self.threads)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.threads)


def simulate(program, string):
    """
    Yields the :class:`ThreadList` for the start of `string` and for every
    position after a consumed character. Stops early, once no thread is
    left.
    """
    threads = ThreadList(program)
    threads.add(0)
    yield threads
    for position, character in enumerate(string):
        next_threads = ThreadList(program)
        for pc in threads:
            instruction = program[pc]
            if (isinstance(instruction, MatchChar) and
                    instruction.character == character):
                next_threads.add(pc + 1)
        threads = next_threads
        yield threads
        if not threads:
            logger.debug(f"no thread survived {character!r} at {position}")
            return


def matches(program, string):
    """
    Returns `True` if `program` matches the whole of `string`.
    """
    threads = None
    for threads in simulate(program, string):
        pass
    return threads.is_accepting
