from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, TypeVar, Union

from .options import stack_guarded

A = TypeVar('A')
B = TypeVar('B')

@dataclass(frozen=True)
class Leaf(Generic[A]):
    value: A

@dataclass(frozen=True)
class Branch(Generic[A]):
    left: Tree[A]
    right: Tree[A]

Tree = Union[Leaf[A], Branch[A]]

def _not_a_tree(value: object) -> TypeError:
    return TypeError(f"Expected Leaf or Branch, got {type(value).__name__}")

def _fold(tree: Tree[A], leaf_fn: Callable[[A], B], branch_fn: Callable[[B, B], B]) -> B:
    def go(t: Tree[A]) -> B:
        match t:
            case Leaf(value):
                return leaf_fn(value)
            case Branch(left, right):
                return branch_fn(go(left), go(right))
            case _:
                raise _not_a_tree(t)
    return go(tree)

@stack_guarded
def fold(tree: Tree[A], leaf_fn: Callable[[A], B], branch_fn: Callable[[B, B], B]) -> B:
    """
    Reduce a tree bottom-up.

    ``leaf_fn`` maps each leaf value; ``branch_fn`` merges the results already
    computed for the left and right subtrees. Every other tree operation here
    is a particular choice of these two functions.
    """
    return _fold(tree, leaf_fn, branch_fn)

@stack_guarded
def size(tree: Tree[A]) -> int:
    return _fold(tree, lambda _: 1, lambda l, r: l + r + 1)

@stack_guarded
def maximum(tree: Tree[int]) -> int:
    return _fold(tree, lambda v: v, max)

@stack_guarded
def depth(tree: Tree[A]) -> int:
    return _fold(tree, lambda _: 1, lambda l, r: max(l, r) + 1)

@stack_guarded
def map_(tree: Tree[A], f: Callable[[A], B]) -> Tree[B]:
    return _fold(tree, lambda v: Leaf(f(v)), Branch)

@stack_guarded
def leaves(tree: Tree[A]) -> List[A]:
    return _fold(tree, lambda v: [v], lambda l, r: l + r)

# Direct recursion, kept as a cross-check for the fold-derived versions.

@stack_guarded
def size2(tree: Tree[A]) -> int:
    def go(t: Tree[A]) -> int:
        match t:
            case Leaf():
                return 1
            case Branch(left, right):
                return go(left) + go(right) + 1
            case _:
                raise _not_a_tree(t)
    return go(tree)

@stack_guarded
def maximum2(tree: Tree[int]) -> int:
    def go(t: Tree[int]) -> int:
        match t:
            case Leaf(value):
                return value
            case Branch(left, right):
                return max(go(left), go(right))
            case _:
                raise _not_a_tree(t)
    return go(tree)

@stack_guarded
def depth2(tree: Tree[A]) -> int:
    def go(t: Tree[A]) -> int:
        match t:
            case Leaf():
                return 1
            case Branch(left, right):
                return max(go(left), go(right)) + 1
            case _:
                raise _not_a_tree(t)
    return go(tree)

@stack_guarded
def map2(tree: Tree[A], f: Callable[[A], B]) -> Tree[B]:
    def go(t: Tree[A]) -> Tree[B]:
        match t:
            case Leaf(value):
                return Leaf(f(value))
            case Branch(left, right):
                return Branch(go(left), go(right))
            case _:
                raise _not_a_tree(t)
    return go(tree)
