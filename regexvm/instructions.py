"""
    regexvm.instructions
    ~~~~~~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""


class Instruction(object):
    operands = ()

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.operands == other.operands
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.__class__) ^ hash(self.operands)

    def __str__(self):
        return " ".join(
            [self.__class__.__name__] + [str(operand) for operand in self.operands]
        )

    def __repr__(self):
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join(repr(operand) for operand in self.operands)
        )


class MatchChar(Instruction):
    """
    Consumes one character of input if it is equal to `character`, otherwise
    the thread dies.
    """
    def __init__(self, character):
        self.character = character

    @property
    def operands(self):
        return (self.character, )

    def __str__(self):
        return "%s %r" % (self.__class__.__name__, self.character)


class Accept(Instruction):
    """
    The thread has matched the whole pattern.
    """


class Jump(Instruction):
    def __init__(self, target):
        self.target = target

    @property
    def operands(self):
        return (self.target, )

    @property
    def targets(self):
        return [self.target]


class Split(Instruction):
    """
    Forks into a thread continuing at `first` and one continuing at `second`,
    the thread at `first` has the higher priority.
    """
    def __init__(self, first, second):
        self.first = first
        self.second = second

    @property
    def operands(self):
        return (self.first, self.second)

    @property
    def targets(self):
        return [self.first, self.second]
