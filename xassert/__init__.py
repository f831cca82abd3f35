"""Fluent assertions.

Wrap a value with ``assert_that`` and chain predicates on it:

>>> from xassert import assert_that
>>> assert_that(3).is_a_number().and_it.is_above(0)

A failed predicate raises ``AssertionFault`` (a subclass of the builtin
``AssertionError``) with a message that names where, in a nested value,
the failure happens.  Invoking a predicate incorrectly raises
``ContractViolation`` instead.
"""

__all__ = [
    'D',

    'UNDEFINED',

    'Assertion',
    'AssertionFault',
    'ContractViolation',
    'Error',

    'add_plugin',
    'add_predicate',
    'assert_that',
    'deep_equals',
    'fail',
    'fn',
    'predicate',
    'remove_predicate',
    'that',
]


D = {
    'MAX_DEPTH': 256,
    'REPR_LIMIT': 80,
}


# Submodules read ``D`` from this (partially initialized) module, and so
# these imports must come after it.
from xassert.assertions import PREDICATES  # noqa: E402
from xassert.assertions import Assertion  # noqa: E402
from xassert.assertions import AssertionFault  # noqa: E402
from xassert.assertions import fail  # noqa: E402
from xassert.equality import deep_equals  # noqa: E402
from xassert.kinds import UNDEFINED  # noqa: E402
from xassert.preconds import ContractViolation  # noqa: E402


Error = AssertionFault


def assert_that(value, name=None):
    return Assertion(value, name)


that = assert_that


def fn(callback):
    """Return ``callback`` unchanged.

    Use it to name a reusable ``Assertion -> Assertion`` callback:

    >>> are_numbers = fn(lambda it: it.every(lambda it: it.is_a_number()))
    >>> assert_that(things).has_property('numbers', are_numbers)
    """
    return callback


add_plugin = PREDICATES.add_plugin
add_predicate = PREDICATES.add
predicate = PREDICATES.predicate
remove_predicate = PREDICATES.remove
