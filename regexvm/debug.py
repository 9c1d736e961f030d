"""
    regexvm.debug
    ~~~~~~~~~~~~~

    Human readable dumps of pattern trees and compiled programs.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from regexvm.ast import Operator, Quantifier
from regexvm.parser import DEFAULT_LANGUAGE


def iter_tree_lines(regex, language=DEFAULT_LANGUAGE, depth=0):
    yield "%s%s: %s" % (
        "\t" * depth, regex.__class__.__name__, language.to_string(regex)
    )
    if isinstance(regex, Operator):
        children = regex.children
    elif isinstance(regex, Quantifier):
        children = [regex.repeated]
    else:
        children = []
    for child in children:
        for line in iter_tree_lines(child, language, depth + 1):
            yield line


def format_tree(regex, language=DEFAULT_LANGUAGE):
    return "\n".join(iter_tree_lines(regex, language))


def format_program(program):
    width = len(str(len(program) - 1))
    return "\n".join(
        "%*d: %s" % (width, index, instruction)
        for index, instruction in enumerate(program)
    )
