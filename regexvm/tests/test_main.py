"""
    regexvm.tests.test_main
    ~~~~~~~~~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD, see LICENSE.rst
"""
import io
from unittest import TestCase
from contextlib import redirect_stdout, redirect_stderr

from docopt import DocoptExit

from regexvm.__main__ import main
from regexvm.debug import format_tree, format_program
from regexvm.parser import parse


class TestDebug(TestCase):
    def test_format_tree(self):
        self.assertEqual(format_tree(parse("(ab)+|c?")), (
            "Alternation: ((ab)+|c?)\n"
            "\tOneOrMore: (ab)+\n"
            "\t\tSequence: ab\n"
            "\t\t\tLiteral: a\n"
            "\t\t\tLiteral: b\n"
            "\tOptional: c?\n"
            "\t\tLiteral: c"
        ))

    def test_format_program(self):
        program = parse("a*b|c").compile()
        self.assertEqual(format_program(program), (
            "0: Split 1 6\n"
            "1: Split 2 4\n"
            "2: MatchChar 'a'\n"
            "3: Jump 1\n"
            "4: MatchChar 'b'\n"
            "5: Jump 7\n"
            "6: MatchChar 'c'\n"
            "7: Accept"
        ))

    def test_format_program_aligns_indices(self):
        program = parse("abcdefghij").compile()
        lines = format_program(program).splitlines()
        self.assertEqual(lines[0], " 0: MatchChar 'a'")
        self.assertEqual(lines[-1], "10: Accept")


class TestMain(TestCase):
    def run_main(self, *arguments):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(["regexvm"] + list(arguments))
        return status, stdout.getvalue(), stderr.getvalue()

    def test_match(self):
        status, stdout, stderr = self.run_main(
            "match", "colou?r", "color", "colouur", "colour"
        )
        self.assertEqual(status, 0)
        self.assertEqual(stdout, "color\ncolour\n")
        self.assertEqual(stderr, "")

    def test_no_match(self):
        status, stdout, _ = self.run_main("match", "a+", "b", "aab")
        self.assertEqual(status, 1)
        self.assertEqual(stdout, "")

    def test_parse_error(self):
        status, stdout, stderr = self.run_main("match", "(a))", "a")
        self.assertEqual(status, 2)
        self.assertEqual(stdout, "")
        self.assertEqual(stderr, (
            "found unmatched )\n"
            "(a))\n"
            "   ^\n"
        ))

    def test_dump(self):
        status, stdout, _ = self.run_main("dump", "((a))b?")
        self.assertEqual(status, 0)
        self.assertEqual(stdout, (
            "Sequence: ab?\n"
            "\tLiteral: a\n"
            "\tOptional: b?\n"
            "\t\tLiteral: b\n"
            "Reconstructed: ab?\n"
            "0: MatchChar 'a'\n"
            "1: Split 2 3\n"
            "2: MatchChar 'b'\n"
            "3: Accept\n"
        ))

    def test_dump_parse_error(self):
        status, _, stderr = self.run_main("dump", "")
        self.assertEqual(status, 2)
        self.assertEqual(stderr, "pattern is empty\n")

    def test_usage(self):
        with self.assertRaises(DocoptExit):
            main(["regexvm", "frobnicate"])
