"""Configure xassert from command-line arguments.

Register the hooks with a startup dependency graph (the global one by
default), and then resolve it with the parser and argv:

>>> from startup import Startup
>>> s = Startup()
>>> xassert.startups.init(s)
>>> s(xassert.startups.parse_argv)
>>> s.set(xassert.startups.PARSER, argparse.ArgumentParser())
>>> s.set(xassert.startups.ARGV, sys.argv)
>>> s.call()
"""

__all__ = [
    'ARGS',
    'ARGV',
    'PARSE',
    'PARSER',

    'add_arguments',
    'configure',
    'configure_logging',
    'init',
    'parse_argv',
]

import logging

from startup import startup

import xassert
from xassert import preconds


ARGS = 'args'
ARGV = 'argv'
PARSE = 'parse'
PARSER = 'parser'


TRACE = logging.DEBUG - 1

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def add_arguments(parser: PARSER) -> PARSE:
    group = parser.add_argument_group(xassert.__name__)
    group.add_argument(
        '-v', '--verbose', action='count', default=0,
        help='verbose output')
    group.add_argument(
        '--xassert-max-depth', type=int, default=xassert.D['MAX_DEPTH'],
        help="""set maximum nesting depth of deep equality
                (default to %(default)s)
             """)
    group.add_argument(
        '--xassert-repr-limit', type=int, default=xassert.D['REPR_LIMIT'],
        help="""set maximum length of values rendered in messages
                (default to %(default)s)
             """)


def parse_argv(parser: PARSER, argv: ARGV, _: PARSE) -> ARGS:
    return parser.parse_args(argv[1:])


def configure(args: ARGS):
    preconds.check_argument(
        args.xassert_max_depth > 0,
        'expect positive --xassert-max-depth, not %d', args.xassert_max_depth,
    )
    preconds.check_argument(
        args.xassert_repr_limit > 0,
        'expect positive --xassert-repr-limit, not %d',
        args.xassert_repr_limit,
    )
    xassert.D['MAX_DEPTH'] = args.xassert_max_depth
    xassert.D['REPR_LIMIT'] = args.xassert_repr_limit
    if args.verbose == 0:
        level = logging.WARNING
    elif args.verbose == 1:
        level = logging.INFO
    elif args.verbose == 2:
        level = logging.DEBUG
    else:
        level = TRACE
    configure_logging(level)


def configure_logging(level):
    logging.addLevelName(TRACE, 'TRACE')
    logging.basicConfig(level=level, format=LOG_FORMAT)


def init(startup_=startup):
    startup_(add_arguments)
    startup_(configure)
