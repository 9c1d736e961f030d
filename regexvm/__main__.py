import sys
import unittest

from docopt import docopt
from loguru import logger

import regexvm.tests
from regexvm.parser import parse, to_string, ParserError
from regexvm.debug import format_tree, format_program


def main(argv=sys.argv):
    """
    Usage:
      regexvm match [-v] <pattern> <string>...
      regexvm dump [-v] <pattern>
      regexvm test [<args>...]
      regexvm -h | --help

    Options:
      -h --help     Show this.
      -v --verbose  Log what the parser, compiler and matcher do.
    """
    arguments = docopt(main.__doc__, argv[1:], help=True)
    if arguments["--verbose"]:
        logger.enable("regexvm")
    if arguments["test"]:
        unittest.main(
            module=regexvm.tests,
            argv=argv[0:1] + arguments["<args>"],
            buffer=True
        )
        return 0

    try:
        regex = parse(arguments["<pattern>"])
    except ParserError as error:
        print(error, file=sys.stderr)
        return 2
    program = regex.compile()

    if arguments["dump"]:
        print(format_tree(regex))
        print("Reconstructed: %s" % to_string(regex))
        print(format_program(program))
        return 0

    matched = False
    for string in arguments["<string>"]:
        if program.matches(string):
            print(string)
            matched = True
    return 0 if matched else 1


if __name__ == "__main__":
    sys.exit(main())
