"""Checks on how predicates are invoked.

A failed check here means the caller wrote a malformed assertion, not
that the subject failed one, and so it is reported with a different
exception type than ``AssertionFault``.
"""

__all__ = [
    'ContractViolation',
    'check_argument',
]


class ContractViolation(TypeError):
    pass


def check_argument(cond, message=None, *message_args):
    if not cond:
        if message is None:
            raise ContractViolation
        else:
            raise ContractViolation(message % message_args)
