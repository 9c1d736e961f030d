"""
    regexvm
    ~~~~~~~

    Regular expressions compiled to a small instruction set and matched
    with a breadth-first virtual machine.

    The supported syntax consists of literal characters, concatenation,
    alternation (``a|b``), grouping (``(ab)``), escaping (``\\+``) and the
    postfix quantifiers ``?``, ``+`` and ``*``. A pattern always has to
    match the whole string; there is no search for substrings, no
    character classes, anchors or captures. In exchange matching never
    backtracks and takes time linear in the length of the string.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD, see LICENSE.rst
"""
from loguru import logger

from regexvm.parser import parse


logger.disable("regexvm")


def compile(pattern):
    return parse(pattern).compile()


def match(pattern, string):
    return compile(pattern).matches(string)
