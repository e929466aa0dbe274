"""
Immutable singly linked lists.

A list is either ``Nil`` or ``Cons(head, tail)``. Every combinator returns a
new list and shares whatever suffix it leaves unchanged; nothing is ever
modified in place.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, List, TypeVar, Union

from .options import stack_guarded

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Nil:
    def __iter__(self) -> Iterator:
        return iter(())

@dataclass(frozen=True, eq=False, repr=False)
class Cons(Generic[A]):
    """
    One list cell.

    Equality, hashing and repr walk the chain in a loop, so they work on
    lists of any length.
    """
    head: A
    tail: MyList[A]

    def __iter__(self) -> Iterator[A]:
        cell = self
        while isinstance(cell, Cons):
            yield cell.head
            cell = cell.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Nil, Cons)):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return isinstance(a, Nil) and isinstance(b, Nil)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        cells = [f"Cons(head={head!r}, tail=" for head in self]
        return "".join(cells) + "Nil()" + ")" * len(cells)

MyList = Union[Nil, Cons[A]]

NIL = Nil()

def _not_a_list(value: object) -> TypeError:
    return TypeError(f"Expected Nil or Cons, got {type(value).__name__}")

# Construction

def from_iterable(items: Iterable[A]) -> MyList[A]:
    result = NIL
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result

def of(*items: A) -> MyList[A]:
    return from_iterable(items)

def to_list(l: MyList[A]) -> List[A]:
    match l:
        case Nil() | Cons():
            return list(l)
        case _:
            raise _not_a_list(l)

# Folds

@stack_guarded
def sum_(ints: MyList[int]) -> int:
    def go(l: MyList[int]) -> int:
        match l:
            case Nil():
                return 0
            case Cons(x, xs):
                return x + go(xs)
            case _:
                raise _not_a_list(l)
    return go(ints)

@stack_guarded
def product(ds: MyList[float]) -> float:
    def go(l: MyList[float]) -> float:
        match l:
            case Nil():
                return 1.0
            case Cons(0.0, _):
                return 0.0
            case Cons(x, xs):
                return x * go(xs)
            case _:
                raise _not_a_list(l)
    return go(ds)

# The unguarded _fold_* helpers let each public operation below carry its
# own stack_guarded name into StackDepthError.

def _fold_right(l: MyList[A], z: B, f: Callable[[A, B], B]) -> B:
    def go(rest: MyList[A]) -> B:
        match rest:
            case Nil():
                return z
            case Cons(x, xs):
                return f(x, go(xs))
            case _:
                raise _not_a_list(rest)
    return go(l)

@stack_guarded
def fold_right(l: MyList[A], z: B, f: Callable[[A, B], B]) -> B:
    """
    Combine right to left: ``f(a1, f(a2, ... f(an, z)))``.

    Recurses once per element, so very long lists raise StackDepthError.
    """
    return _fold_right(l, z, f)

def fold_left(l: MyList[A], z: B, f: Callable[[A, B], B]) -> B:
    acc = z
    while True:
        match l:
            case Cons(head, tail):
                acc = f(head, acc)
                l = tail
            case Nil():
                return acc
            case _:
                raise _not_a_list(l)

def _identity(b: B) -> B:
    return b

def _compose_step(f: Callable[[A, B], B]) -> Callable[[A, Callable[[B], B]], Callable[[B], B]]:
    # g after (b -> f(a, b))
    return lambda a, g: lambda b: g(f(a, b))

@stack_guarded
def fold_left_via_fold_right(l: MyList[A], z: B, f: Callable[[A, B], B]) -> B:
    """
    ``fold_left`` built from ``fold_right``: fold the list into a chain of
    deferred ``B -> B`` steps, then run the chain on ``z``.
    """
    chain = _fold_right(l, _identity, _compose_step(f))
    return chain(z)

def _fold_right_via_fold_left(l: MyList[A], z: B, f: Callable[[A, B], B]) -> B:
    chain = fold_left(l, _identity, _compose_step(f))
    return chain(z)

@stack_guarded
def fold_right_via_fold_left(l: MyList[A], z: B, f: Callable[[A, B], B]) -> B:
    return _fold_right_via_fold_left(l, z, f)

@stack_guarded
def sum2(ns: MyList[int]) -> int:
    return _fold_right(ns, 0, operator.add)

@stack_guarded
def product2(ns: MyList[float]) -> float:
    return _fold_right(ns, 1.0, operator.mul)

def sum3(ns: MyList[int]) -> int:
    return fold_left(ns, 0, operator.add)

def product3(ns: MyList[float]) -> float:
    return fold_left(ns, 1.0, operator.mul)

def length2(l: MyList[A]) -> int:
    return fold_left(l, 0, lambda _, acc: acc + 1)

# Structure

def tail(l: MyList[A]) -> MyList[A]:
    match l:
        case Cons(_, rest):
            return rest
        case Nil():
            return NIL
        case _:
            raise _not_a_list(l)

def set_head(l: MyList[A], h: A) -> MyList[A]:
    match l:
        case Cons(_, rest):
            return Cons(h, rest)
        case Nil():
            return Cons(h, NIL)
        case _:
            raise _not_a_list(l)

def drop(l: MyList[A], n: int) -> MyList[A]:
    if n < 0:
        logger.debug("drop: negative count %d treated as 0", n)
        n = 0
    while True:
        match l:
            case Cons(_, rest) if n > 0:
                l, n = rest, n - 1
            case Nil() | Cons():
                return l
            case _:
                raise _not_a_list(l)

def drop_while(l: MyList[A], p: Callable[[A], bool]) -> MyList[A]:
    while True:
        match l:
            case Cons(head, rest) if p(head):
                l = rest
            case Nil() | Cons():
                return l
            case _:
                raise _not_a_list(l)

@stack_guarded
def init(l: MyList[A]) -> MyList[A]:
    def go(rest: MyList[A]) -> MyList[A]:
        match rest:
            case Nil() | Cons(_, Nil()):
                return NIL
            case Cons(head, more):
                return Cons(head, go(more))
            case _:
                raise _not_a_list(rest)
    return go(l)

def init2(l: MyList[A]) -> MyList[A]:
    acc = NIL
    while True:
        match l:
            case Nil() | Cons(_, Nil()):
                return reverse(acc)
            case Cons(head, rest):
                acc = Cons(head, acc)
                l = rest
            case _:
                raise _not_a_list(l)

def length(l: MyList[A]) -> int:
    count = 0
    while True:
        match l:
            case Cons(_, rest):
                count += 1
                l = rest
            case Nil():
                return count
            case _:
                raise _not_a_list(l)

def reverse(l: MyList[A]) -> MyList[A]:
    return fold_left(l, NIL, Cons)

@stack_guarded
def append(l1: MyList[A], l2: MyList[A]) -> MyList[A]:
    return _fold_right(l1, l2, Cons)

@stack_guarded
def append_one(l: MyList[A], item: A) -> MyList[A]:
    return _fold_right(l, Cons(item, NIL), Cons)

@stack_guarded
def flatten(lists: MyList[MyList[A]]) -> MyList[A]:
    return _fold_right(lists, NIL, lambda bs, acc: _fold_right(bs, acc, Cons))

# Combinators

@stack_guarded
def increment(ints: MyList[int]) -> MyList[int]:
    return _fold_right_via_fold_left(ints, NIL, lambda i, acc: Cons(i + 1, acc))

@stack_guarded
def doubles_to_strings(ds: MyList[float]) -> MyList[str]:
    return _fold_right_via_fold_left(ds, NIL, lambda d, acc: Cons(str(d), acc))

@stack_guarded
def map_(l: MyList[A], f: Callable[[A], B]) -> MyList[B]:
    return _fold_right_via_fold_left(l, NIL, lambda a, acc: Cons(f(a), acc))

@stack_guarded
def filter_(l: MyList[A], p: Callable[[A], bool]) -> MyList[A]:
    return _fold_right_via_fold_left(l, NIL, lambda a, acc: Cons(a, acc) if p(a) else acc)

def _flat_map(l: MyList[A], f: Callable[[A], MyList[B]]) -> MyList[B]:
    return _fold_right_via_fold_left(
        l, NIL, lambda a, acc: _fold_right_via_fold_left(f(a), acc, Cons)
    )

@stack_guarded
def flat_map(l: MyList[A], f: Callable[[A], MyList[B]]) -> MyList[B]:
    return _flat_map(l, f)

@stack_guarded
def filter_via_flat_map(l: MyList[A], p: Callable[[A], bool]) -> MyList[A]:
    return _flat_map(l, lambda a: Cons(a, NIL) if p(a) else NIL)

@stack_guarded
def zip_with(l1: MyList[A], l2: MyList[B], f: Callable[[A, B], C]) -> MyList[C]:
    def go(a: MyList[A], b: MyList[B]) -> MyList[C]:
        match (a, b):
            case (Cons(x, xs), Cons(y, ys)):
                return Cons(f(x, y), go(xs, ys))
            case (Nil() | Cons(), Nil() | Cons()):
                return NIL
            case _:
                raise _not_a_list(a if not isinstance(a, (Nil, Cons)) else b)
    return go(l1, l2)

def add_pairwise(l1: MyList[int], l2: MyList[int]) -> MyList[int]:
    return zip_with(l1, l2, operator.add)

# Search

def _starts_with(l: MyList[A], prefix: MyList[A]) -> bool:
    while True:
        match (l, prefix):
            case (_, Nil()):
                return True
            case (Cons(a, rest), Cons(b, more)) if a == b:
                l, prefix = rest, more
            case _:
                return False

def has_subsequence(sup: MyList[A], sub: MyList[A]) -> bool:
    """
    True when ``sub`` occurs as a contiguous run inside ``sup``.

    Each start position is tried with a plain element-wise match and
    abandoned on the first mismatch.
    """
    for l in (sup, sub):
        if not isinstance(l, (Nil, Cons)):
            raise _not_a_list(l)
    while True:
        if _starts_with(sup, sub):
            return True
        match sup:
            case Cons(_, rest):
                sup = rest
            case Nil():
                return False
            case _:
                raise _not_a_list(sup)
