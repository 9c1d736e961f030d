"""
    regexvm.ast
    ~~~~~~~~~~~

    The pattern tree. Every node knows how many instructions it compiles to
    and how to emit them at a given absolute offset, which is what allows
    jump targets to be computed before the code they refer to exists.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from regexvm.instructions import MatchChar, Jump, Split
from regexvm.program import compile as compile_program


class Regex(object):
    @property
    def instruction_count(self):
        raise NotImplementedError()

    def to_instructions(self, offset):
        """
        Returns the instructions for this node, assuming that the first one
        ends up at the absolute index `offset` of the program.
        """
        raise NotImplementedError()

    def compile(self):
        return compile_program(self)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return True
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return "%s()" % self.__class__.__name__


class Literal(Regex):
    def __init__(self, character):
        if len(character) != 1:
            raise ValueError(
                "expected a single character, got %r" % character
            )
        self.character = character

    @property
    def instruction_count(self):
        return 1

    def to_instructions(self, offset):
        return [MatchChar(self.character)]

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.character == other.character
        return NotImplemented

    def __hash__(self):
        return hash(self.character)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.character)


class Operator(Regex):
    """
    Base class for nodes combining two or more children. Constructing one
    from a single child returns that child instead.
    """
    def __new__(cls, children):
        children = tuple(children)
        if not children:
            raise ValueError("%s requires children" % cls.__name__)
        elif len(children) == 1:
            return children[0]
        self = Regex.__new__(cls)
        self.children = children
        return self

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.children == other.children
        return NotImplemented

    def __hash__(self):
        return hash(self.__class__) ^ hash(self.children)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.children)


class Sequence(Operator):
    """
    Children that are sequences themselves are spliced in, so ``(ab)(cd)``
    and ``abcd`` build the same tree.
    """
    def __new__(cls, children):
        flattened = []
        for child in children:
            if isinstance(child, Sequence):
                flattened.extend(child.children)
            else:
                flattened.append(child)
        return Operator.__new__(cls, flattened)

    @property
    def instruction_count(self):
        return sum(child.instruction_count for child in self.children)

    def to_instructions(self, offset):
        instructions = []
        for child in self.children:
            instructions.extend(
                child.to_instructions(offset + len(instructions))
            )
        return instructions


class Alternation(Operator):
    @property
    def instruction_count(self):
        return (
            sum(child.instruction_count for child in self.children) +
            2 * (len(self.children) - 1)
        )

    def to_instructions(self, offset):
        # Split(branch, next) branch Jump(join) for all but the last branch,
        # which falls through to the join point.
        join = offset + self.instruction_count
        instructions = []
        for child in self.children[:-1]:
            start = offset + len(instructions) + 1
            instructions.append(
                Split(start, start + child.instruction_count + 1)
            )
            instructions.extend(child.to_instructions(start))
            instructions.append(Jump(join))
        instructions.extend(
            self.children[-1].to_instructions(offset + len(instructions))
        )
        return instructions


class Quantifier(Regex):
    def __init__(self, repeated):
        self.repeated = repeated

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.repeated == other.repeated
        return NotImplemented

    def __hash__(self):
        return hash(self.__class__) ^ hash(self.repeated)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.repeated)


class Optional(Quantifier):
    @property
    def instruction_count(self):
        return self.repeated.instruction_count + 1

    def to_instructions(self, offset):
        return [
            Split(offset + 1, offset + 1 + self.repeated.instruction_count)
        ] + self.repeated.to_instructions(offset + 1)


class OneOrMore(Quantifier):
    @property
    def instruction_count(self):
        return self.repeated.instruction_count + 1

    def to_instructions(self, offset):
        instructions = self.repeated.to_instructions(offset)
        instructions.append(Split(offset, offset + len(instructions) + 1))
        return instructions


class ZeroOrMore(Quantifier):
    @property
    def instruction_count(self):
        return self.repeated.instruction_count + 2

    def to_instructions(self, offset):
        end = offset + self.repeated.instruction_count + 2
        instructions = [Split(offset + 1, end)]
        instructions.extend(self.repeated.to_instructions(offset + 1))
        instructions.append(Jump(offset))
        return instructions
