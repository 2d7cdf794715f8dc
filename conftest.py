"""
This conftest.py provides default imports for doctests. For the main conftest.py,
see tests/conftest.py.
"""

import pytest

import optionals


@pytest.fixture(autouse=True)
def add_doctest_imports(doctest_namespace):
    doctest_namespace["optionals"] = optionals
    doctest_namespace["Optional"] = optionals.Optional
