"""Runtime-kind probes shared by the equality engine and predicates."""

__all__ = [
    'UNDEFINED',
    'PRIMITIVE_KINDS',
    'get_own_property',
    'get_property',
    'has_own_property',
    'has_property',
    'is_array',
    'is_frozen',
    'is_nan',
    'is_number',
    'kind_of',
    'own_property_names',
]

import cmath
import decimal
import numbers
import types
from collections import abc


class _Undefined:
    """Marker of an absent value, distinct from ``None``."""

    __slots__ = ()

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'UNDEFINED'

    def __bool__(self):
        return False

    def __reduce__(self):
        return 'UNDEFINED'


UNDEFINED = _Undefined()


PRIMITIVE_KINDS = frozenset((
    'undefined',
    'null',
    'boolean',
    'number',
    'string',
    'bytes',
))


_FROZEN_TYPES = (tuple, frozenset, range, types.MappingProxyType)


def kind_of(value):
    if value is UNDEFINED:
        return 'undefined'
    elif value is None:
        return 'null'
    # Check bool before numbers: bool is a subclass of int.
    elif isinstance(value, bool):
        return 'boolean'
    elif isinstance(value, numbers.Number):
        return 'number'
    elif isinstance(value, str):
        return 'string'
    elif isinstance(value, bytes):
        return 'bytes'
    elif callable(value):
        return 'function'
    else:
        return 'object'


def is_array(value):
    return isinstance(value, (list, tuple))


def is_number(value):
    return kind_of(value) == 'number'


def is_nan(value):
    if not is_number(value):
        return False
    if isinstance(value, decimal.Decimal):
        return value.is_nan()
    return cmath.isnan(value)


def is_frozen(value):
    """True if ``value`` cannot be modified in place (shallowly)."""
    if kind_of(value) in PRIMITIVE_KINDS:
        return True
    if isinstance(value, _FROZEN_TYPES):
        return True
    params = getattr(type(value), '__dataclass_params__', None)
    return params is not None and params.frozen


def _slot_names(cls):
    for klass in cls.__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots, )
        for name in slots:
            if name not in ('__dict__', '__weakref__'):
                yield name


def own_property_names(value):
    """Return names of properties that ``value`` owns.

    For mappings these are the keys; for other objects these are the
    instance attributes, that is, ``__dict__`` entries and the slots
    that have been assigned.  Class attributes are not owned.
    Exceptions also own their ``args``.
    """
    if isinstance(value, abc.Mapping):
        return list(value)
    names = list(getattr(value, '__dict__', ()))
    if isinstance(value, BaseException) and 'args' not in names:
        names.append('args')
    for name in _slot_names(type(value)):
        if name not in names and hasattr(value, name):
            names.append(name)
    return names


def has_own_property(value, name):
    if isinstance(value, abc.Mapping):
        return name in value
    if kind_of(value) in PRIMITIVE_KINDS:
        return False
    return name in own_property_names(value)


def get_own_property(value, name):
    if isinstance(value, abc.Mapping):
        return value[name]
    return getattr(value, name)


def has_property(value, name):
    """True if ``name`` is visible on ``value``, inherited or not."""
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, abc.Mapping) and name in value:
        return True
    return isinstance(name, str) and hasattr(value, name)


def get_property(value, name):
    if isinstance(value, abc.Mapping) and name in value:
        return value[name]
    return getattr(value, name)
