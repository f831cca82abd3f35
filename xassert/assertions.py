"""Assertion nodes.

An ``Assertion`` wraps a subject value.  Each predicate method either
returns the node, so that you may chain another predicate, or raises
``AssertionFault``.

Predicates that look into a nested value (a property, an element, a
length, a thrown error, or the result of an awaitable) pass a child
node to a callback.  A child knows its parent, and so a failure deep
down reports the full path from the root:

  assert_that({'colors': ['red', 7]}).has_own_property(
      'colors', lambda it: it.every(lambda it: it.is_a_string())
  )

raises ``AssertionFault`` with message "actual value colors own property
at index 1 is not a string: 7".

Messages are ``{}``-formatted templates, and every predicate accepts a
keyword-only ``message`` argument that overrides its default template.
These fields are always available:

* ``{name}``: The full name of the failing node.
* ``{actual}``: Repr of the subject.
* ``{expected}``: Repr of the expected value (if any).

Some predicates provide more fields, like ``{property}``, ``{class}``,
or ``{regexp}``.
"""

__all__ = [
    'Assertion',
    'AssertionFault',
    'PREDICATES',
    'fail',
]

import logging
import operator
import re
import types
from collections import abc
from functools import partialmethod

import xassert
from xassert import equality
from xassert import kinds
from xassert import plugins
from xassert import preconds
from xassert import promises
from xassert.kinds import UNDEFINED

LOG = logging.getLogger(__name__)


class AssertionFault(AssertionError):
    """Raised when the subject does not satisfy a predicate.

    ``expected`` is ``UNDEFINED`` when the predicate has no expected
    value.
    """

    def __init__(self, message, actual=UNDEFINED, expected=UNDEFINED):
        if expected is UNDEFINED:
            super().__init__(message, actual)
        else:
            super().__init__(message, actual, expected)
        self.message = message
        self.actual = actual
        self.expected = expected

    def __str__(self):
        return self.message


def fail(message='assertion failed'):
    raise AssertionFault(message)


def _repr(value):
    limit = xassert.D['REPR_LIMIT']
    text = repr(value)
    if len(text) > limit:
        text = text[:max(limit - 3, 0)] + '...'
    return text


class _Fields(dict):

    def __missing__(self, key):
        raise preconds.ContractViolation(
            'unknown field in message template: {%s}' % key
        )


def _format(message, fields):
    try:
        return message.format_map(fields)
    except preconds.ContractViolation:
        raise
    except (AttributeError, IndexError, TypeError, ValueError) as exc:
        raise preconds.ContractViolation(
            'malformed message template: %r' % message
        ) from exc


def _not(predicate):
    return lambda *args: not predicate(*args)


def _any_of(predicate):
    return lambda x, candidates: any(predicate(x, c) for c in candidates)


def _is_none(x):
    return x is None


def _is_undefined(x):
    return x is UNDEFINED


def _is_true(x):
    return x is True


def _is_false(x):
    return x is False


def _is_boolean(x):
    return isinstance(x, bool)


def _is_string(x):
    return isinstance(x, str)


def _check_callback(method_name, callback):
    preconds.check_argument(
        callable(callback),
        '%s expects a callable, not %r', method_name, callback,
    )


def _check_optional_callback(method_name, callback):
    if callback is not None:
        _check_callback(method_name, callback)


def _check_class(method_name, cls):
    preconds.check_argument(
        isinstance(cls, type) or (
            isinstance(cls, tuple) and
            cls and
            all(isinstance(c, type) for c in cls)
        ),
        '%s expects a class or a tuple of classes, not %r', method_name, cls,
    )


def _class_name(cls):
    if isinstance(cls, tuple):
        return ' or '.join(c.__name__ for c in cls)
    return cls.__name__


def _callable_name(func):
    return getattr(func, '__qualname__', None) or repr(func)


async def _resolve(result):
    # Callbacks of awaitable predicates may return an awaitable (such
    # as a nested ``is_fulfilled``); settle it before returning.
    if promises.is_promise(result):
        await promises.wait(result)


class Assertion:

    def __init__(self, value, name=None, parent=None):
        self._value = value
        self._name = name
        self._parent = parent

    def __repr__(self):
        return '<%s at %#x: %s=%s>' % (
            self.__class__.__name__,
            id(self),
            self.get_full_name(),
            _repr(self._value),
        )

    def __getattr__(self, name):
        func = PREDICATES.get(name)
        if func is None:
            raise AttributeError(
                '%r object has no predicate %r' %
                (self.__class__.__name__, name)
            )
        return types.MethodType(func, self)

    #
    # Accessors.
    #

    @property
    def value(self):
        return self._value

    @property
    def actual(self):
        return self._value

    @property
    def parent(self):
        return self._parent

    @property
    def and_it(self):
        return self

    def get_value(self):
        return self._value

    def get_actual(self):
        return self._value

    def get_name(self):
        if self._name is not None:
            return self._name
        elif promises.is_promise(self._value):
            return 'promise'
        elif callable(self._value):
            return 'function'
        else:
            return 'actual value'

    def get_full_name(self):
        if self._parent is None:
            return self.get_name()
        return '%s %s' % (self._parent.get_full_name(), self.get_name())

    def named(self, name):
        return self.__class__(self._value, name)

    def _child(self, value, name):
        return self.__class__(value, name, self)

    #
    # Failure.
    #

    def _make_fault(self, message, expected=UNDEFINED, **fields):
        fields = _Fields(fields)
        fields['name'] = self.get_full_name()
        fields['actual'] = _repr(self._value)
        if expected is not UNDEFINED:
            fields['expected'] = _repr(expected)
        return AssertionFault(_format(message, fields), self._value, expected)

    def fire(self, message, expected=UNDEFINED, **fields):
        """Raise ``AssertionFault`` with the formatted ``message``."""
        raise self._make_fault(message, expected, **fields)

    def _assert_1(self, predicate, *, message):
        if not predicate(self._value):
            self.fire(message)
        return self

    def _assert_2(self, predicate, expected, *, message):
        if not predicate(self._value, expected):
            self.fire(message, expected)
        return self

    def _assert_any(self, predicate, candidates, *, message):
        preconds.check_argument(
            isinstance(candidates, abc.Iterable) and
            not isinstance(candidates, (str, bytes)),
            'expect an iterable of candidates, not %r', candidates,
        )
        return self._assert_2(predicate, list(candidates), message=message)

    #
    # Equality.
    #

    is_equal_to = partialmethod(
        _assert_2,
        equality.strictly_equals,
        message='{name} is not equal to {expected}',
    )
    is_not_equal_to = partialmethod(
        _assert_2,
        _not(equality.strictly_equals),
        message='{name} is equal to {expected}',
    )

    is_equal_to_any_of = partialmethod(
        _assert_any,
        _any_of(equality.strictly_equals),
        message='{name} is not equal to any of {expected}',
    )
    is_not_equal_to_any_of = partialmethod(
        _assert_any,
        _not(_any_of(equality.strictly_equals)),
        message='{name} is equal to one of {expected}',
    )

    is_deeply_equal_to = partialmethod(
        _assert_2,
        equality.deep_equals,
        message='{name} is not deeply equal to {expected}',
    )
    is_not_deeply_equal_to = partialmethod(
        _assert_2,
        _not(equality.deep_equals),
        message='{name} is deeply equal to {expected}',
    )

    is_deeply_equal_to_any_of = partialmethod(
        _assert_any,
        _any_of(equality.deep_equals),
        message='{name} is not deeply equal to any of {expected}',
    )
    is_not_deeply_equal_to_any_of = partialmethod(
        _assert_any,
        _not(_any_of(equality.deep_equals)),
        message='{name} is deeply equal to one of {expected}',
    )

    #
    # Type and kind.
    #

    is_none = partialmethod(
        _assert_1, _is_none, message='{name} is not None: {actual}'
    )
    is_not_none = partialmethod(
        _assert_1, _not(_is_none), message='{name} is None'
    )

    is_undefined = partialmethod(
        _assert_1, _is_undefined, message='{name} is not undefined: {actual}'
    )
    is_not_undefined = partialmethod(
        _assert_1, _not(_is_undefined), message='{name} is undefined'
    )

    is_nan = partialmethod(
        _assert_1, kinds.is_nan, message='{name} is not NaN: {actual}'
    )
    is_not_nan = partialmethod(
        _assert_1, _not(kinds.is_nan), message='{name} is NaN'
    )

    is_truthy = partialmethod(
        _assert_1, bool, message='{name} is not truthy: {actual}'
    )
    is_falsy = partialmethod(
        _assert_1, operator.not_, message='{name} is not falsy: {actual}'
    )

    is_true = partialmethod(
        _assert_1, _is_true, message='{name} is not True: {actual}'
    )
    is_false = partialmethod(
        _assert_1, _is_false, message='{name} is not False: {actual}'
    )

    is_a_boolean = partialmethod(
        _assert_1, _is_boolean, message='{name} is not a boolean: {actual}'
    )
    is_not_a_boolean = partialmethod(
        _assert_1, _not(_is_boolean), message='{name} is a boolean: {actual}'
    )

    is_a_promise = partialmethod(
        _assert_1,
        promises.is_promise,
        message='{name} is not a promise: {actual}',
    )
    is_not_a_promise = partialmethod(
        _assert_1,
        _not(promises.is_promise),
        message='{name} is a promise: {actual}',
    )

    is_a_number = partialmethod(
        _assert_1, kinds.is_number, message='{name} is not a number: {actual}'
    )
    is_not_a_number = partialmethod(
        _assert_1, _not(kinds.is_number), message='{name} is a number: {actual}'
    )

    is_a_string = partialmethod(
        _assert_1, _is_string, message='{name} is not a string: {actual}'
    )
    is_not_a_string = partialmethod(
        _assert_1, _not(_is_string), message='{name} is a string: {actual}'
    )

    is_an_array = partialmethod(
        _assert_1, kinds.is_array, message='{name} is not an array: {actual}'
    )
    is_not_an_array = partialmethod(
        _assert_1, _not(kinds.is_array), message='{name} is an array: {actual}'
    )

    is_callable = partialmethod(
        _assert_1, callable, message='{name} is not callable: {actual}'
    )
    is_not_callable = partialmethod(
        _assert_1, _not(callable), message='{name} is callable: {actual}'
    )

    #
    # Properties.
    #

    def has_property(
        self,
        name,
        callback=None,
        *,
        message='{name} does not have property {property}',
    ):
        """Check that property ``name`` is visible, inherited or not.

        The property value is passed to ``callback`` as a child node.
        """
        _check_optional_callback('has_property', callback)
        if not kinds.has_property(self._value, name):
            self.fire(message, property=name)
        if callback is not None:
            callback(
                self._child(
                    kinds.get_property(self._value, name),
                    '%s property' % (name, ),
                )
            )
        return self

    def does_not_have_property(
        self, name, *, message='{name} has property {property}'
    ):
        if kinds.has_property(self._value, name):
            self.fire(message, property=name)
        return self

    def has_own_property(
        self,
        name,
        callback=None,
        *,
        message='{name} does not have own property {property}',
    ):
        """Check that the subject owns property ``name``.

        Own properties are mapping keys or instance attributes; class
        attributes are not owned.
        """
        _check_optional_callback('has_own_property', callback)
        if not kinds.has_own_property(self._value, name):
            self.fire(message, property=name)
        if callback is not None:
            callback(
                self._child(
                    kinds.get_own_property(self._value, name),
                    '%s own property' % (name, ),
                )
            )
        return self

    def does_not_have_own_property(
        self, name, *, message='{name} has own property {property}'
    ):
        if kinds.has_own_property(self._value, name):
            self.fire(message, property=name)
        return self

    #
    # Length.
    #

    def has_length(self, callback=None, *, message='{name} has no length'):
        _check_optional_callback('has_length', callback)
        if not isinstance(self._value, abc.Sized):
            self.fire(message)
        if callback is not None:
            callback(self._child(len(self._value), 'length'))
        return self

    def has_length_of(
        self,
        length_or_callback,
        *,
        message='{name} is not equal to {expected}',
    ):
        """Check length against an int, or pass it to a callback."""
        if callable(length_or_callback):
            return self.has_length(length_or_callback)
        preconds.check_argument(
            isinstance(length_or_callback, int) and
            not isinstance(length_or_callback, bool),
            'has_length_of expects an int or a callable, not %r',
            length_or_callback,
        )
        return self.has_length(
            lambda it: it.is_equal_to(length_or_callback, message=message)
        )

    #
    # Ordering.
    #

    is_above = partialmethod(
        _assert_2, operator.gt, message='{name} is not above {expected}'
    )
    is_at_least = partialmethod(
        _assert_2, operator.ge, message='{name} is not at least {expected}'
    )
    is_below = partialmethod(
        _assert_2, operator.lt, message='{name} is not below {expected}'
    )
    is_at_most = partialmethod(
        _assert_2, operator.le, message='{name} is not at most {expected}'
    )

    #
    # Collection traversal.
    #

    def _iterate(self):
        if not isinstance(self._value, abc.Iterable):
            self.fire('{name} is not iterable: {actual}')
        return enumerate(self._value)

    def every(self, callback):
        """Pass each element to ``callback``; stop at the first fault."""
        _check_callback('every', callback)
        for index, element in self._iterate():
            callback(self._child(element, 'at index %d' % index))
        return self

    def some(
        self,
        callback,
        *,
        message='{name} has no element that passes the assertion',
    ):
        """Pass elements to ``callback`` until one of them passes.

        Only ``AssertionFault`` means that an element did not pass;
        other errors are propagated.
        """
        _check_callback('some', callback)
        for index, element in self._iterate():
            try:
                callback(self._child(element, 'at index %d' % index))
            except AssertionFault as exc:
                LOG.debug('element at index %d does not pass: %s', index, exc)
                continue
            return self
        self.fire(message)

    def any_of(
        self,
        callbacks,
        *,
        message='{name} does not pass any of the assertions',
    ):
        """Apply ``callbacks`` to this node until one of them passes."""
        preconds.check_argument(
            isinstance(callbacks, abc.Iterable),
            'any_of expects an iterable of callables, not %r', callbacks,
        )
        callbacks = list(callbacks)
        for callback in callbacks:
            _check_callback('any_of', callback)
        for index, callback in enumerate(callbacks):
            try:
                callback(self)
            except AssertionFault as exc:
                LOG.debug('assertion %d does not pass: %s', index, exc)
                continue
            return self
        self.fire(message)

    #
    # Text.
    #

    def matches(self, pattern, *, message='{name} does not match {regexp}'):
        pattern = self._compile('matches', pattern)
        if not (
            isinstance(self._value, str) and pattern.search(self._value)
        ):
            self.fire(message, pattern, regexp=pattern.pattern)
        return self

    def does_not_match(self, pattern, *, message='{name} matches {regexp}'):
        pattern = self._compile('does_not_match', pattern)
        if isinstance(self._value, str) and pattern.search(self._value):
            self.fire(message, pattern, regexp=pattern.pattern)
        return self

    @staticmethod
    def _compile(method_name, pattern):
        preconds.check_argument(
            isinstance(pattern, str) or (
                isinstance(pattern, re.Pattern) and
                isinstance(pattern.pattern, str)
            ),
            '%s expects a str pattern, not %r', method_name, pattern,
        )
        return re.compile(pattern)

    #
    # Reflection.
    #

    def is_instance_of(
        self, cls, *, message='{name} is not an instance of {class}'
    ):
        _check_class('is_instance_of', cls)
        if not isinstance(self._value, cls):
            self.fire(message, cls, **{'class': _class_name(cls)})
        return self

    def is_not_instance_of(
        self, cls, *, message='{name} is an instance of {class}'
    ):
        _check_class('is_not_instance_of', cls)
        if isinstance(self._value, cls):
            self.fire(message, cls, **{'class': _class_name(cls)})
        return self

    is_frozen = partialmethod(
        _assert_1, kinds.is_frozen, message='{name} is not frozen: {actual}'
    )
    is_not_frozen = partialmethod(
        _assert_1, _not(kinds.is_frozen), message='{name} is frozen: {actual}'
    )

    #
    # Behavior.
    #

    def satisfies(
        self, predicate, *, message='{name} does not satisfy {predicate}'
    ):
        _check_callback('satisfies', predicate)
        if not predicate(self._value):
            self.fire(message, predicate=_callable_name(predicate))
        return self

    def throws(self, callback=None, *, message='{name} did not raise'):
        """Call the subject and check that it raises.

        The raised error is passed to ``callback`` as a child node.
        """
        preconds.check_argument(
            callable(self._value),
            'throws expects a callable subject, not %r', self._value,
        )
        _check_optional_callback('throws', callback)
        try:
            self._value()
        except Exception as exc:
            error = exc
        else:
            self.fire(message)
        if callback is not None:
            callback(self._child(error, 'error'))
        return self

    def throws_a(
        self, cls, *, message='{name} is not an instance of {class}'
    ):
        _check_class('throws_a', cls)
        return self.throws(lambda it: it.is_instance_of(cls, message=message))

    throws_an = throws_a

    #
    # Awaitables.
    #
    # These are coroutine methods: calling them never raises, and all
    # errors are raised when the returned coroutine is awaited.
    #

    def _check_promise(self, method_name):
        preconds.check_argument(
            promises.is_promise(self._value),
            '%s expects an awaitable subject, not %r',
            method_name, self._value,
        )

    async def is_fulfilled(
        self, callback=None, *, message='{name} is rejected with {error}'
    ):
        """Wait for the subject and check that it does not raise.

        The result is passed to ``callback`` as a child node, and is
        returned.
        """
        _check_optional_callback('is_fulfilled', callback)
        self._check_promise('is_fulfilled')
        try:
            value = await promises.wait(self._value)
        except Exception as exc:
            raise self._make_fault(message, error=_repr(exc)) from exc
        if callback is not None:
            await _resolve(callback(self._child(value, 'value')))
        return value

    async def is_rejected(
        self, callback=None, *, message='{name} is fulfilled with {value}'
    ):
        """Wait for the subject and check that it raises.

        The raised error is passed to ``callback`` as a child node, and
        is returned.
        """
        _check_optional_callback('is_rejected', callback)
        self._check_promise('is_rejected')
        try:
            value = await promises.wait(self._value)
        except Exception as exc:
            error = exc
        else:
            self.fire(message, value=_repr(value))
        if callback is not None:
            await _resolve(callback(self._child(error, 'error')))
        return error

    async def becomes(
        self, expected, *, message='{name} is not deeply equal to {expected}'
    ):
        return await self.is_fulfilled(
            lambda it: it.is_deeply_equal_to(expected, message=message)
        )

    async def is_rejected_with(
        self, cls, *, message='{name} is not an instance of {class}'
    ):
        _check_class('is_rejected_with', cls)
        return await self.is_rejected(
            lambda it: it.is_instance_of(cls, message=message)
        )


PREDICATES = plugins.Registry(Assertion)
