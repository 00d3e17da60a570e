#!/usr/bin/env python3
#
#  _____     _     _
# |  ___|__ | | __| |___
# | |_ / _ \| |/ _` / __|
# |  _| (_) | | (_| \__ \
# |_|  \___/|_|\__,_|___/
#

"""Script to run list folds over numbers given on the command line"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum
from functools import partial
from typing import Any, Callable, NoReturn, Sequence

from src import cons

logger = logging.getLogger(__name__)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Error Codes                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class ExitCode(IntEnum):
    EMPTY_LIST = 1
    BAD_NUMBER = 2


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Operations                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def duplicate(x: Any) -> cons.List[Any]:
    return cons.of(x, x)


OPERATIONS: dict[str, Callable[[cons.List[Any], argparse.Namespace], Any]] = {
    'sum': lambda l, _: cons.sum(l),
    'sum-left': lambda l, _: cons.sum_left(l),
    'product': lambda l, _: cons.product(l),
    'length': lambda l, _: cons.length(l),
    'reverse': lambda l, _: cons.reverse(l),
    'init': lambda l, _: cons.init(l),
    'tail': lambda l, _: cons.tail(l),
    'drop': lambda l, args: cons.drop(l, args.count),
    'drop-while-even': lambda l, _: cons.drop_while(l, cons.is_even),
    'keep-even': lambda l, _: cons.keep_even(l),
    'add-one': lambda l, _: cons.add_one(l),
    'flatmap-dup': lambda l, _: cons.flatmap(l, duplicate),
    'match': lambda l, _: cons.match_example(l),
}


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                   Core Implementation                    ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def bail(message: str, code: ExitCode) -> NoReturn:
    print(message, file=sys.stderr)
    raise SystemExit(code.value)


def setup_logging(level: int) -> None:
    if not any(h.get_name() == 'folds' for h in logging.root.handlers):
        handler = logging.StreamHandler()
        handler.set_name('folds')
        handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)s %(name)s - %(message)s')
        )
        logging.root.addHandler(handler)
    logging.root.setLevel(level)


def parse_number(text: str, as_float: bool = False) -> int | float:
    try:
        return float(text) if as_float else int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        bail(f'ERROR: {text!r} is not a number', ExitCode.BAD_NUMBER)


def run(operation: str, numbers: Sequence[str], args: argparse.Namespace) -> Any:
    to_number = partial(parse_number, as_float=operation == 'product')
    l = cons.from_sequence(to_number(n) for n in numbers)
    logger.debug('Running %s on %r', operation, l)
    try:
        return OPERATIONS[operation](l, args)
    except cons.EmptyListError as e:
        bail(f'ERROR: {operation} needs more numbers, REASON: {e}', ExitCode.EMPTY_LIST)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='folds',
        description='folds runs list operations over numbers',
    )
    parser.add_argument('operation', choices=OPERATIONS, help='Operation to run')
    parser.add_argument('numbers', nargs='*', help='List elements')
    parser.add_argument(
        '-n', '--count', type=int, default=1, help='Elements to drop (default 1)'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Log debug output to stderr'
    )
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)

    result = run(args.operation, args.numbers, args)
    logger.debug('Result %r', result)
    print(result)

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
