#
#   ____
#  / ___|___  _ __  ___
# | |   / _ \| '_ \/ __|
# | |__| (_) | | | \__ \
#  \____\___/|_| |_|___/
#

"""Persistent singly linked lists and the folds they are built from"""

from __future__ import annotations

from abc import ABC, abstractmethod
from operator import add, mul
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    NoReturn,
    TypeVar,
    assert_never,
)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Types                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛

A = TypeVar('A')
B = TypeVar('B')


class EmptyListError(IndexError):
    """Raised when an operation needs a nonempty list"""


class List(ABC, Generic[A]):
    """Immutable cons list: either the `Nil` singleton or a `Cons` node"""

    __slots__ = ()

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError()

    def map(self, f: Callable[[A], B]) -> List[B]:
        return map(self, f)

    def filter(self, predicate: Callable[[A], bool]) -> List[A]:
        return filter(self, predicate)

    def flatmap(self, f: Callable[[A], List[B]]) -> List[B]:
        return flatmap(self, f)

    def fold_left(self, z: B, f: Callable[[B, A], B]) -> B:
        return fold_left(self, z, f)

    def fold_right(self, z: B, f: Callable[[A, B], B]) -> B:
        return fold_right(self, z, f)

    def __iter__(self) -> Iterator[A]:
        node: List[A] = self
        while isinstance(node, Cons):
            yield node.head
            node = node.rest

    def __len__(self) -> int:
        return length_left(self)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, value: object, /) -> bool:
        if not isinstance(value, List):
            return NotImplemented
        left: List[Any] = self
        right: List[Any] = value
        while isinstance(left, Cons) and isinstance(right, Cons):
            # shared tail, nothing left to compare
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.rest, right.rest
        return left is right

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __repr__(self) -> str:
        return f'List({mk_string(self, ", ", repr)})'


class Empty(List[Any]):
    __slots__ = ()
    _instance: Empty | None = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return True

    def __repr__(self) -> str:
        return 'Nil'


class Cons(List[A]):
    __slots__ = ('_head', '_rest')
    __match_args__ = ('head', 'rest')

    def __init__(self, head: A, rest: List[A]) -> None:
        if not isinstance(rest, List):
            raise TypeError(f'rest must be a List, got {type(rest).__name__}')
        object.__setattr__(self, '_head', head)
        object.__setattr__(self, '_rest', rest)

    def is_empty(self) -> bool:
        return False

    @property
    def head(self) -> A:
        return self._head

    @property
    def rest(self) -> List[A]:
        return self._rest


Nil: List[Any] = Empty()


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                  Functional Utilities                    ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def is_even(n: int) -> bool:
    return n % 2 == 0


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                      Construction                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def empty() -> List[Any]:
    return Nil


def cons(head: A, rest: List[A]) -> List[A]:
    return Cons(head, rest)


def from_sequence(items: Iterable[A]) -> List[A]:
    """Build a list holding `items` in their original order"""
    result: List[A] = Nil
    for item in reversed(tuple(items)):
        result = Cons(item, result)
    return result


def of(*items: A) -> List[A]:
    return from_sequence(items)


def head(l: List[A]) -> A:
    match l:
        case Cons(h, _):
            return h
        case Empty():
            raise EmptyListError('head of empty list')
        case _:
            assert_never(l)


def tail(l: List[A]) -> List[A]:
    match l:
        case Cons(_, rest):
            return rest
        case Empty():
            raise EmptyListError('tail of empty list')
        case _:
            assert_never(l)


def set_head(l: List[A], value: A) -> List[A]:
    match l:
        case Cons(_, rest):
            return Cons(value, rest)
        case Empty():
            raise EmptyListError('set_head of empty list')
        case _:
            assert_never(l)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         Folds                            ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def fold_right(l: List[A], z: B, f: Callable[[A, B], B]) -> B:
    """
    Right associative fold: fold_right([a, b, c], z, f) == f(a, f(b, f(c, z)))

    The heads are buffered and combined from the last one backward, so `f`
    sees exactly the calls the recursive definition makes, in the same
    order, without growing the call stack.
    """
    heads = []
    node = l
    while isinstance(node, Cons):
        heads.append(node.head)
        node = node.rest
    acc = z
    for item in reversed(heads):
        acc = f(item, acc)
    return acc


def fold_left(l: List[A], z: B, f: Callable[[B, A], B]) -> B:
    """Left associative fold: fold_left([a, b, c], z, f) == f(f(f(z, a), b), c)"""
    acc = z
    node = l
    while isinstance(node, Cons):
        acc = f(acc, node.head)
        node = node.rest
    return acc


def run_continuation(steps: List[Callable[[B], B]], z: B) -> B:
    """
    Apply a continuation kept as a chain of steps, first step first.

    `Nil` is the identity continuation and `Cons(step, rest)` is `rest`
    composed after `step`. Applying the chain is a fold_left, so it uses
    constant stack however long the chain is.
    """
    return fold_left(steps, z, lambda b, step: step(b))


def fold_left_via_fold_right(l: List[A], z: B, f: Callable[[B, A], B]) -> B:
    """
    fold_left written with fold_right by folding continuations instead of values.

    Each step puts "combine the current element" in front of the continuation
    built for the remainder, and the finished continuation applied to `z`
    replays f(f(f(z, a), b), c).
    """

    def step(item: A, k: List[Callable[[B], B]]) -> List[Callable[[B], B]]:
        return Cons(lambda b: f(b, item), k)

    return run_continuation(fold_right(l, empty(), step), z)


def fold_right_via_fold_left(l: List[A], z: B, f: Callable[[A, B], B]) -> B:
    """Mirror of fold_left_via_fold_right, replays f(a, f(b, f(c, z)))"""

    def step(k: List[Callable[[B], B]], item: A) -> List[Callable[[B], B]]:
        return Cons(lambda b: f(item, b), k)

    return run_continuation(fold_left(l, empty(), step), z)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                    Derived Operations                    ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def length(l: List[Any]) -> int:
    return fold_right(l, 0, lambda _, acc: acc + 1)


def length_left(l: List[Any]) -> int:
    return fold_left(l, 0, lambda acc, _: acc + 1)


def sum(l: List[int]) -> int:
    return fold_right(l, 0, add)


def sum_left(l: List[int]) -> int:
    return fold_left(l, 0, add)


def product(l: List[float]) -> float:
    """
    Multiply right to left, stopping at the first 0.0.

    Elements after the first zero are never read; the ones before it are
    still multiplied into the 0.0, as x * product(rest) would.
    """
    factors = []
    acc = 1.0
    for d in l:
        if d == 0.0:
            acc = 0.0
            break
        factors.append(d)
    for d in reversed(factors):
        acc = d * acc
    return acc


def product_right(l: List[float]) -> float:
    return fold_right(l, 1.0, mul)


def product_left(l: List[float]) -> float:
    return fold_left(l, 1.0, mul)


def reverse(l: List[A]) -> List[A]:
    return fold_left(l, empty(), lambda acc, item: Cons(item, acc))


def append(a1: List[A], a2: List[A]) -> List[A]:
    """Copy the nodes of `a1` in front of `a2`, sharing `a2` as is"""
    return fold_right(a1, a2, Cons)


def append_left(a1: List[A], a2: List[A]) -> List[A]:
    return fold_left(reverse(a1), a2, lambda acc, item: Cons(item, acc))


def concat(ls: List[List[A]]) -> List[A]:
    return fold_right(ls, empty(), append)


def map(l: List[A], f: Callable[[A], B]) -> List[B]:
    return fold_right(l, empty(), lambda h, t: Cons(f(h), t))


def filter(l: List[A], predicate: Callable[[A], bool]) -> List[A]:
    return fold_right(l, empty(), lambda h, t: Cons(h, t) if predicate(h) else t)


def flatmap(l: List[A], f: Callable[[A], List[B]]) -> List[B]:
    return concat(map(l, f))


def drop(l: List[A], n: int) -> List[A]:
    for _ in range(n):
        l = tail(l)
    return l


def drop_while(l: List[A], predicate: Callable[[A], bool]) -> List[A]:
    while isinstance(l, Cons) and predicate(l.head):
        l = l.rest
    return l


def init(l: List[A]) -> List[A]:
    """Everything but the last element, as a new list"""
    if l.is_empty():
        raise EmptyListError('init of empty list')
    return reverse(tail(reverse(l)))


def add_one(l: List[int]) -> List[int]:
    return fold_right(l, empty(), lambda item, t: Cons(item + 1, t))


def double_to_string(l: List[float]) -> List[str]:
    return fold_right(l, empty(), lambda d, t: Cons(str(d), t))


def keep_even(l: List[int]) -> List[int]:
    return filter(l, is_even)


def mk_string(l: List[Any], sep: str = '', show: Callable[[Any], str] = str) -> str:
    return sep.join(show(item) for item in l)


def match_example(l: List[int]) -> int:
    match l:
        case Cons(x, Cons(2, Cons(4, _))):
            return x
        case Empty():
            return 42
        case Cons(x, Cons(y, Cons(3, Cons(4, _)))):
            return x + y
        case Cons(h, t):
            return h + sum(t)
        case _:
            assert_never(l)
