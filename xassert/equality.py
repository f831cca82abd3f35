"""Strict and structural (deep) equality.

``deep_equals`` follows these rules, in order:

* Strictly equal values (see ``strictly_equals``) are deeply equal.
* ``None`` is only equal to itself.
* Values of different kinds, or of the same primitive kind, are not
  equal (two primitives that are not strictly equal are different).
* Values of different types are not equal; a list is never equal to a
  tuple or a dict, whatever their contents.
* Lists and tuples are equal when they have the same length and their
  elements are deeply equal index by index.
* Other objects are equal when they own the same set of property names
  (see ``kinds.own_property_names``) and the values of each name are
  deeply equal.  Exceptions own their ``args``, so errors of the same
  class with different arguments are different.

Builtins that expose no own properties, such as ``set`` or
``datetime``, degenerate into "same type is equal" under these rules.

There is no cycle detection; recursion deeper than ``max_depth``
raises ``RecursionError``.
"""

__all__ = [
    'deep_equals',
    'strictly_equals',
]

import xassert
from xassert import kinds


def strictly_equals(a, b):
    if a is b:
        return True
    kind = kinds.kind_of(a)
    if kind != kinds.kind_of(b) or kind not in kinds.PRIMITIVE_KINDS:
        return False
    # Unlike ``==``, NaN is only strictly equal to itself (caught by
    # the identity check above).
    if kinds.is_nan(a) or kinds.is_nan(b):
        return False
    return a == b


def deep_equals(a, b, *, max_depth=None):
    if max_depth is None:
        max_depth = xassert.D['MAX_DEPTH']
    return _deep_equals(a, b, max_depth)


def _deep_equals(a, b, depth):

    if strictly_equals(a, b):
        return True

    if a is None or b is None:
        return False

    kind = kinds.kind_of(a)
    if (kind != kinds.kind_of(b) or
            kind != 'object' or
            type(a) is not type(b)):
        return False

    if depth <= 0:
        raise RecursionError('deep equality exceeds maximum depth')

    if kinds.is_array(a):
        if len(a) != len(b):
            return False
        for x, y in zip(a, b):
            if not _deep_equals(x, y, depth - 1):
                return False
        return True

    names = kinds.own_property_names(a)
    if len(names) != len(kinds.own_property_names(b)):
        return False
    for name in names:
        if not kinds.has_own_property(b, name):
            return False
        if not _deep_equals(
                kinds.get_own_property(a, name),
                kinds.get_own_property(b, name),
                depth - 1):
            return False
    return True
