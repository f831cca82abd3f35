import unittest

import xassert
from xassert import (
    Assertion,
    AssertionFault,
    ContractViolation,
    assert_that,
)
from xassert import plugins
from xassert.assertions import PREDICATES


def is_a_banana(node):
    if node.value != 'banana':
        node.fire('{name} is not a banana: {actual}')
    return node


def is_one_of_fruits(node, *, message='{name} is not a fruit: {actual}'):
    if node.value not in ('apple', 'banana', 'lemon'):
        node.fire(message)
    return node


class PluginsTest(unittest.TestCase):

    NAMES = ('is_a_banana', 'is_a_fruit', 'is_a_lemon')

    def tearDown(self):
        for name in self.NAMES:
            if name in PREDICATES:
                xassert.remove_predicate(name)

    def test_unknown_predicate(self):
        with self.assertRaisesRegex(AttributeError, r'is_a_banana'):
            assert_that('banana').is_a_banana()
        self.assertFalse(hasattr(assert_that('banana'), 'is_a_banana'))

    def test_add_predicate(self):
        node = assert_that('banana')
        self.assertIs(is_a_banana, xassert.add_predicate(is_a_banana))
        self.assertIn('is_a_banana', PREDICATES)
        # Nodes created before registration see the predicate, too.
        self.assertIs(node, node.is_a_banana())
        self.assertIs(node, node.is_a_string().and_it.is_a_banana())
        with self.assertRaises(AssertionFault) as cm:
            assert_that('apple').is_a_banana()
        self.assertEqual(
            "actual value is not a banana: 'apple'", str(cm.exception)
        )

    def test_predicate_in_nested_callbacks(self):
        xassert.add_predicate(is_a_banana)
        with self.assertRaises(AssertionFault) as cm:
            assert_that(['banana', 'apple']).every(
                lambda it: it.is_a_banana()
            )
        self.assertEqual(
            "actual value at index 1 is not a banana: 'apple'",
            str(cm.exception),
        )
        assert_that(['apple', 'banana']).some(lambda it: it.is_a_banana())

    def test_decorator(self):

        @xassert.predicate
        def is_a_banana(node):
            node.satisfies(lambda value: value == 'banana')
            return node

        @xassert.predicate(name='is_a_lemon')
        def lemon(node):
            node.is_equal_to('lemon')
            return node

        self.assertIn('is_a_banana', PREDICATES)
        self.assertIn('is_a_lemon', PREDICATES)
        self.assertNotIn('lemon', PREDICATES)
        assert_that('banana').is_a_banana()
        assert_that('lemon').is_a_lemon()
        with self.assertRaises(AssertionFault):
            assert_that('banana').is_a_lemon()

    def test_message_override(self):
        xassert.add_predicate(is_one_of_fruits, 'is_a_fruit')
        assert_that('lemon').is_a_fruit()
        with self.assertRaises(AssertionFault) as cm:
            assert_that('rock').is_a_fruit(message='{name}: {actual}?')
        self.assertEqual("actual value: 'rock'?", str(cm.exception))

    def test_replace(self):
        xassert.add_predicate(is_a_banana)
        xassert.add_predicate(lambda node: node, 'is_a_banana')
        assert_that('apple').is_a_banana()

    def test_remove(self):
        xassert.add_predicate(is_a_banana)
        self.assertIs(is_a_banana, xassert.remove_predicate('is_a_banana'))
        self.assertNotIn('is_a_banana', PREDICATES)
        with self.assertRaises(AttributeError):
            assert_that('banana').is_a_banana()
        with self.assertRaises(KeyError):
            xassert.remove_predicate('is_a_banana')

    def test_reject(self):
        for func, name in (
                (is_a_banana, 'is_equal_to'),
                (is_a_banana, 'every'),
                (is_a_banana, 'get_value'),
                (is_a_banana, 'and_it'),
                (is_a_banana, 'fire'),
                (is_a_banana, '_is_a_banana'),
                (is_a_banana, 'is a banana'),
                (is_a_banana, 1),
                ('is_a_banana', 'is_a_banana')):
            with self.subTest(name=name):
                with self.assertRaises(ContractViolation):
                    xassert.add_predicate(func, name)
        self.assertNotIn('is_a_banana', PREDICATES)

    def test_add_plugin(self):

        def plugin(add):
            add(is_a_banana)
            add(is_one_of_fruits, 'is_a_fruit')

        xassert.add_plugin(plugin)
        assert_that('banana').is_a_banana().is_a_fruit()

        with self.assertRaises(ContractViolation):
            xassert.add_plugin('not callable')

    def test_registry(self):
        registry = plugins.Registry(Assertion)
        self.assertNotIn('is_a_banana', registry)
        self.assertIsNone(registry.get('is_a_banana'))
        registry.add(is_a_banana)
        self.assertIs(is_a_banana, registry.get('is_a_banana'))
        # A separate registry does not affect nodes.
        self.assertNotIn('is_a_banana', PREDICATES)


if __name__ == '__main__':
    unittest.main()
