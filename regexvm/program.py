"""
    regexvm.program
    ~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from loguru import logger

from regexvm.instructions import Accept
from regexvm.matcher import matches


class Program(object):
    """
    An immutable sequence of instructions ending in a single
    :class:`~regexvm.instructions.Accept`. All jump targets are absolute
    indices into the program itself.
    """
    def __init__(self, instructions):
        self.instructions = tuple(instructions)
        self.validate()

    def validate(self):
        if not self.instructions:
            raise ValueError("a program needs at least one instruction")
        if not isinstance(self.instructions[-1], Accept):
            raise ValueError("a program has to end with Accept")
        for index, instruction in enumerate(self.instructions[:-1]):
            if isinstance(instruction, Accept):
                raise ValueError(
                    "unexpected Accept at %d, only the last instruction "
                    "may accept" % index
                )
            for target in getattr(instruction, "targets", []):
                if not 0 <= target < len(self.instructions):
                    raise ValueError(
                        "%s at %d jumps outside of the program" % (
                            instruction, index
                        )
                    )

    def matches(self, string):
        return matches(self, string)

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, index):
        return self.instructions[index]

    def __iter__(self):
        return iter(self.instructions)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.instructions == other.instructions
        try:
            return self.instructions == tuple(other)
        except TypeError:
            return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.instructions)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, list(self.instructions))


def compile(regex):
    """
    Compiles the pattern tree `regex` into a :class:`Program`.
    """
    instructions = regex.to_instructions(0)
    assert len(instructions) == regex.instruction_count, (
        "%r emitted %d instructions, expected %d" % (
            regex, len(instructions), regex.instruction_count
        )
    )
    instructions.append(Accept())
    logger.debug(f"compiled {regex!r} to {len(instructions)} instructions")
    return Program(instructions)
