__all__ = [
    'synchronous',
]

import asyncio
from functools import wraps


def synchronous(coro_method):
    @wraps(coro_method)
    def decorated(self):
        asyncio.run(coro_method(self))
    return decorated
