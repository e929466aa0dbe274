import logging

from . import mylist, tree
from .mylist import NIL, Cons, MyList, Nil
from .options import (
    FpdataError,
    Options,
    OptionsError,
    StackDepthError,
    configure,
    current_options,
)
from .tree import Branch, Leaf, Tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "mylist",
    "tree",
    "NIL",
    "Nil",
    "Cons",
    "MyList",
    "Leaf",
    "Branch",
    "Tree",
    "Options",
    "configure",
    "current_options",
    "FpdataError",
    "OptionsError",
    "StackDepthError",
]
