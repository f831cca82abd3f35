"""Awaitable subjects.

The awaitable predicates accept an explicit set of types rather than
anything that happens to define ``__await__``:

* ``asyncio.Future`` (including ``asyncio.Task``).
* ``concurrent.futures.Future``, bridged into the running event loop.
* Coroutine objects.

A coroutine may be awaited only once, but a subject may be waited on
by any number of predicates.  So a coroutine is scheduled as a task on
its first wait, and its outcome is copied to a future that later waits
share.
"""

__all__ = [
    'PROMISE_TYPES',
    'is_promise',
    'wait',
]

import asyncio
import concurrent.futures
import functools
import logging
import weakref

LOG = logging.getLogger(__name__)


PROMISE_TYPES = (asyncio.Future, concurrent.futures.Future)


# Maps a coroutine to the future of its outcome.  The future does not
# refer to the coroutine, and so entries go away with their coroutines.
_OUTCOMES = weakref.WeakKeyDictionary()


def is_promise(value):
    return isinstance(value, PROMISE_TYPES) or asyncio.iscoroutine(value)


async def wait(promise):
    """Wait for ``promise`` to settle and return its result."""
    if isinstance(promise, concurrent.futures.Future):
        LOG.debug('bridge concurrent future into event loop: %r', promise)
        promise = asyncio.wrap_future(promise)
    elif asyncio.iscoroutine(promise):
        # Cancelling one waiter must not cancel the shared outcome.
        promise = asyncio.shield(_get_outcome(promise))
    return await promise


def _get_outcome(coro):
    outcome = _OUTCOMES.get(coro)
    if outcome is None:
        LOG.debug('schedule coroutine: %r', coro)
        task = asyncio.ensure_future(coro)
        outcome = task.get_loop().create_future()
        task.add_done_callback(functools.partial(_copy_outcome, outcome))
        _OUTCOMES[coro] = outcome
    return outcome


def _copy_outcome(outcome, task):
    if outcome.cancelled():
        return
    if task.cancelled():
        outcome.cancel()
    elif task.exception() is not None:
        outcome.set_exception(task.exception())
    else:
        outcome.set_result(task.result())
