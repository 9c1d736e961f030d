"""
    regexvm.tests
    ~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD, see LICENSE.rst
"""
import os


def load_tests(loader, standard_tests, pattern):
    package_tests = loader.discover(
        start_dir=os.path.dirname(__file__),
        pattern=pattern or "test*.py"
    )
    standard_tests.addTests(package_tests)
    return standard_tests
