import unittest

import dataclasses
import decimal
import pickle
import types

from xassert import kinds
from xassert.kinds import UNDEFINED


@dataclasses.dataclass
class Point:
    x: int
    y: int


@dataclasses.dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


class Slotted:

    __slots__ = ('a', 'b')

    def __init__(self, a):
        self.a = a


class WithClassAttribute:

    shared = 'shared'

    def __init__(self):
        self.own = 'own'


class CodedError(Exception):

    def __init__(self, message, code):
        super().__init__(message)
        self.code = code


class KindsTest(unittest.TestCase):

    def test_undefined(self):
        self.assertIs(UNDEFINED, type(UNDEFINED)())
        self.assertFalse(UNDEFINED)
        self.assertEqual('UNDEFINED', repr(UNDEFINED))
        self.assertIs(UNDEFINED, pickle.loads(pickle.dumps(UNDEFINED)))
        self.assertIsNot(UNDEFINED, None)

    def test_kind_of(self):
        for value, kind in (
                (UNDEFINED, 'undefined'),
                (None, 'null'),
                (True, 'boolean'),
                (False, 'boolean'),
                (0, 'number'),
                (1.5, 'number'),
                (1j, 'number'),
                (decimal.Decimal('1.5'), 'number'),
                ('', 'string'),
                (b'', 'bytes'),
                (len, 'function'),
                (lambda: None, 'function'),
                (Point, 'function'),
                ([], 'object'),
                ({}, 'object'),
                (Point(1, 2), 'object')):
            with self.subTest(value=value):
                self.assertEqual(kind, kinds.kind_of(value))

    def test_is_array(self):
        self.assertTrue(kinds.is_array([]))
        self.assertTrue(kinds.is_array((1, 2)))
        self.assertFalse(kinds.is_array('banana'))
        self.assertFalse(kinds.is_array({}))
        self.assertFalse(kinds.is_array(None))

    def test_is_number(self):
        self.assertTrue(kinds.is_number(4.3))
        self.assertTrue(kinds.is_number(-1))
        self.assertFalse(kinds.is_number(True))
        self.assertFalse(kinds.is_number('3'))

    def test_is_nan(self):
        self.assertTrue(kinds.is_nan(float('nan')))
        self.assertTrue(kinds.is_nan(decimal.Decimal('NaN')))
        self.assertTrue(kinds.is_nan(complex(float('nan'), 0)))
        self.assertFalse(kinds.is_nan(1))
        self.assertFalse(kinds.is_nan(float('inf')))
        self.assertFalse(kinds.is_nan('nan'))
        self.assertFalse(kinds.is_nan(None))

    def test_is_frozen(self):
        for value in (
                None, UNDEFINED, 1, 'x', b'x',
                (), (1, [2]), frozenset(), range(3),
                types.MappingProxyType({}),
                FrozenPoint(1, 2)):
            with self.subTest(value=value):
                self.assertTrue(kinds.is_frozen(value))
        for value in ([], {}, set(), Point(1, 2), Slotted(1)):
            with self.subTest(value=value):
                self.assertFalse(kinds.is_frozen(value))

    def test_own_property_names(self):
        self.assertEqual(['a', 'b'], kinds.own_property_names({'a': 1, 'b': 2}))
        self.assertEqual(['x', 'y'], kinds.own_property_names(Point(1, 2)))
        # Unassigned slots are not owned.
        self.assertEqual(['a'], kinds.own_property_names(Slotted(1)))
        self.assertEqual(['own'], kinds.own_property_names(WithClassAttribute()))
        self.assertEqual([], kinds.own_property_names(set()))
        self.assertEqual(['args'], kinds.own_property_names(ValueError('x')))
        self.assertEqual(
            ['code', 'args'], kinds.own_property_names(CodedError('x', 1))
        )
        self.assertTrue(kinds.has_own_property(ValueError(), 'args'))

    def test_has_own_property(self):
        self.assertTrue(kinds.has_own_property({'a': 1}, 'a'))
        self.assertFalse(kinds.has_own_property({'a': 1}, 'keys'))
        obj = WithClassAttribute()
        self.assertTrue(kinds.has_own_property(obj, 'own'))
        self.assertFalse(kinds.has_own_property(obj, 'shared'))
        self.assertFalse(kinds.has_own_property('banana', 'upper'))
        self.assertFalse(kinds.has_own_property(None, 'a'))
        self.assertEqual('own', kinds.get_own_property(obj, 'own'))
        self.assertEqual(1, kinds.get_own_property({'a': 1}, 'a'))

    def test_has_property(self):
        self.assertTrue(kinds.has_property({'a': 1}, 'a'))
        self.assertTrue(kinds.has_property({'a': 1}, 'keys'))
        self.assertTrue(kinds.has_property({1: 'x'}, 1))
        self.assertFalse(kinds.has_property({'a': 1}, 'x'))
        obj = WithClassAttribute()
        self.assertTrue(kinds.has_property(obj, 'own'))
        self.assertTrue(kinds.has_property(obj, 'shared'))
        self.assertTrue(kinds.has_property('banana', 'upper'))
        self.assertFalse(kinds.has_property(None, 'a'))
        self.assertFalse(kinds.has_property(UNDEFINED, 'a'))
        self.assertEqual('shared', kinds.get_property(obj, 'shared'))
        self.assertEqual('x', kinds.get_property({1: 'x'}, 1))


if __name__ == '__main__':
    unittest.main()
