"""
    regexvm.parser
    ~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from loguru import logger

from regexvm.ast import (
    Literal, Sequence, Alternation, Quantifier, Optional, OneOrMore,
    ZeroOrMore
)


class RegexException(Exception):
    pass


def annotated(string, position):
    annotation = [" "] * (position + 1)
    annotation[position] = "^"
    return "%s\n%s" % (string, "".join(annotation))


class ParserError(RegexException):
    def __init__(self, reason, position=None, string=None):
        RegexException.__init__(self, reason, position)
        self.reason = reason
        self.position = position
        self.string = string

    @property
    def annotation(self):
        if self.position is None or self.string is None:
            return None
        return annotated(self.string, self.position)

    def moved(self, offset, string):
        """
        Returns this error translated into the coordinates of `string`, in
        which the pattern this error was raised for starts at `offset`.
        """
        return self.__class__(self.position + offset, string)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.position == other.position
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.__class__) ^ hash(self.position)

    def __str__(self):
        if self.annotation is None:
            return self.reason
        return "%s\n%s" % (self.reason, self.annotation)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.position)


class EmptyPattern(ParserError):
    def __init__(self, string=""):
        ParserError.__init__(self, "pattern is empty", None, string)

    def moved(self, offset, string):
        return self.__class__(string)

    def __repr__(self):
        return "%s()" % self.__class__.__name__


class EmptyGroup(ParserError):
    def __init__(self, position, string=None):
        ParserError.__init__(self, "group is empty", position, string)


class EmptyAlternative(ParserError):
    def __init__(self, position, string=None):
        ParserError.__init__(
            self, "alternative is empty", position, string
        )


class MisplacedOperator(ParserError):
    def __init__(self, position, string=None):
        reason = "operator is not preceded by an expression"
        if string is not None:
            reason = "%s is not preceded by an expression" % string[position]
        ParserError.__init__(self, reason, position, string)


class DanglingEscape(MisplacedOperator):
    """
    Raised for an escape character at the end of the pattern, which has
    nothing to escape.
    """
    def __init__(self, position, string=None):
        ParserError.__init__(
            self, "escape is not followed by a character", position, string
        )


class UnmatchedParenthesis(ParserError):
    def __init__(self, position, string=None):
        reason = "found unmatched parenthesis"
        if string is not None:
            reason = "found unmatched %s" % string[position]
        ParserError.__init__(self, reason, position, string)


class Language(object):
    def __init__(self,
                 escape="\\",
                 union="|",
                 group_begin="(", group_end=")",
                 optional="?", one_or_more="+", zero_or_more="*"
                 ):
        self.escape = escape
        self.union = union
        self.group_begin = group_begin
        self.group_end = group_end
        self.optional = optional
        self.one_or_more = one_or_more
        self.zero_or_more = zero_or_more
        characters = [
            escape, union, group_begin, group_end,
            optional, one_or_more, zero_or_more
        ]
        for character in characters:
            if len(character) != 1:
                raise ValueError(
                    "special characters have to be single characters, "
                    "got %r" % character
                )
        if len(set(characters)) != len(characters):
            raise ValueError(
                "special characters have to be distinct, got %r" % characters
            )

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, self.__class__):
            return (
                self.escape == other.escape and
                self.union == other.union and
                self.group_begin == other.group_begin and
                self.group_end == other.group_end and
                self.optional == other.optional and
                self.one_or_more == other.one_or_more and
                self.zero_or_more == other.zero_or_more
            )
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    @property
    def special_characters(self):
        return frozenset([
            self.escape,
            self.union,
            self.group_begin, self.group_end,
            self.optional, self.one_or_more, self.zero_or_more
        ])

    @property
    def quantifiers(self):
        return {
            self.optional: Optional,
            self.one_or_more: OneOrMore,
            self.zero_or_more: ZeroOrMore
        }

    def escape_character(self, character):
        if character in self.special_characters:
            return self.escape + character
        return character

    def to_string(self, regex):
        if isinstance(regex, Literal):
            return self.escape_character(regex.character)
        elif isinstance(regex, Sequence):
            return "".join(map(self.to_string, regex.children))
        elif isinstance(regex, Alternation):
            return "%s%s%s" % (
                self.group_begin,
                self.union.join(map(self.to_string, regex.children)),
                self.group_end
            )
        elif isinstance(regex, Quantifier):
            operator = {
                Optional: self.optional,
                OneOrMore: self.one_or_more,
                ZeroOrMore: self.zero_or_more
            }[regex.__class__]
            if isinstance(regex.repeated, (Literal, Quantifier)):
                return self.to_string(regex.repeated) + operator
            return "%s%s%s%s" % (
                self.group_begin,
                self.to_string(regex.repeated),
                self.group_end,
                operator
            )
        raise NotImplementedError(regex)


DEFAULT_LANGUAGE = Language()


class Parser(object):
    """
    Parses patterns written in `language`.

    The top level of a pattern is parsed with an explicit operand stack,
    the contents of a group are collected verbatim and parsed recursively
    once the group is closed.
    """
    def __init__(self, language=DEFAULT_LANGUAGE):
        self.language = language

    def parse(self, string):
        language = self.language
        stack = []
        alternatives = 0
        depth = 0
        group = []
        open_positions = []
        escaped = False

        for position, character in enumerate(string):
            if escaped:
                escaped = False
                if depth > 0:
                    group.append(character)
                else:
                    stack.append(Literal(character))
            elif character == language.escape:
                escaped = True
                if depth > 0:
                    group.append(character)
            elif character == language.group_begin:
                if depth > 0:
                    group.append(character)
                else:
                    group = []
                depth += 1
                open_positions.append(position)
            elif character == language.group_end:
                depth -= 1
                if depth < 0:
                    raise UnmatchedParenthesis(position, string)
                open_positions.pop()
                if depth == 0:
                    stack.append(
                        self.parse_group(string, "".join(group), position)
                    )
                else:
                    group.append(character)
            elif depth > 0:
                group.append(character)
            elif character == language.union:
                stack.append(
                    self.close_alternative(stack, alternatives, position, string)
                )
                alternatives += 1
            elif character in language.quantifiers:
                if len(stack) == alternatives:
                    raise MisplacedOperator(position, string)
                stack.append(language.quantifiers[character](stack.pop()))
            else:
                stack.append(Literal(character))

        if depth > 0:
            raise UnmatchedParenthesis(open_positions[-1], string)
        if escaped:
            raise DanglingEscape(len(string) - 1, string)
        if not stack:
            raise EmptyPattern(string)
        if alternatives > 0:
            stack.append(
                self.close_alternative(
                    stack, alternatives, len(string) - 1, string
                )
            )
            alternatives += 1

        if alternatives == 0:
            return Sequence(stack)
        elif alternatives == 1:
            raise EmptyAlternative(len(string) - 1, string)
        return Alternation(stack)

    def parse_group(self, string, group, end):
        offset = end - len(group)
        logger.debug(f"parsing group {group!r} at {offset} of {string!r}")
        try:
            return self.parse(group)
        except EmptyPattern:
            raise EmptyGroup(end - 1, string)
        except ParserError as error:
            raise error.moved(offset, string)

    def close_alternative(self, stack, alternatives, position, string):
        """
        Removes everything pushed onto `stack` since the last alternative
        was closed and returns it as one expression.
        """
        operands = []
        while len(stack) > alternatives:
            operands.append(stack.pop())
        if not operands:
            raise EmptyAlternative(position, string)
        operands.reverse()
        return Sequence(operands)


def parse(string):
    regex = Parser(DEFAULT_LANGUAGE).parse(string)
    logger.debug(f"parsed {string!r} to {regex!r}")
    return regex


def to_string(regex):
    return DEFAULT_LANGUAGE.to_string(regex)
