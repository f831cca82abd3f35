"""Registry of user-defined predicates.

The registry is process-wide: a predicate added at any time is visible
to every node, including nodes created before the predicate was added.

A predicate is a function that takes the node as its first argument,
and either returns the node or calls ``node.fire``:

>>> @xassert.predicate
... def is_a_banana(node):
...     if node.value != 'banana':
...         node.fire('{name} is not a banana')
...     return node
>>> xassert.assert_that('banana').is_a_banana()
"""

__all__ = [
    'Registry',
]

import functools
import logging

from xassert import preconds

LOG = logging.getLogger(__name__)


class Registry:

    def __init__(self, node_type):
        self._node_type = node_type
        self._predicates = {}

    def __contains__(self, name):
        return name in self._predicates

    def get(self, name):
        return self._predicates.get(name)

    def add(self, func, name=None):
        preconds.check_argument(
            callable(func), 'expect a callable predicate, not %r', func
        )
        if name is None:
            name = func.__name__
        preconds.check_argument(
            isinstance(name, str) and name.isidentifier(),
            'expect predicate name be an identifier, not %r', name,
        )
        preconds.check_argument(
            not name.startswith('_'),
            'expect public predicate name, not %r', name,
        )
        preconds.check_argument(
            not hasattr(self._node_type, name),
            'predicate %r shadows a built-in member of %s',
            name, self._node_type.__name__,
        )
        if name in self._predicates:
            LOG.debug('replace predicate: %s', name)
        else:
            LOG.debug('add predicate: %s', name)
        self._predicates[name] = func
        return func

    def predicate(self, func=None, *, name=None):
        """Decorator form of ``add``."""
        if func is None:
            return functools.partial(self.predicate, name=name)
        return self.add(func, name)

    def remove(self, name):
        func = self._predicates.pop(name)
        LOG.debug('remove predicate: %s', name)
        return func

    def add_plugin(self, plugin):
        """Let ``plugin`` add any number of predicates.

        ``plugin`` is called with ``add`` as its only argument.
        """
        preconds.check_argument(
            callable(plugin), 'expect a callable plugin, not %r', plugin
        )
        plugin(self.add)
