"""
Shared pytest configuration.

Puts the 'python' source directory on sys.path so the suite runs without an
install, and provides sample lists and trees used across test modules.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "python"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fpdata import mylist, options  # noqa: E402
from fpdata.tree import Branch, Leaf  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def one_to_five():
    return mylist.of(1, 2, 3, 4, 5)


@pytest.fixture
def sample_tree():
    """Branch(Leaf(3), Branch(Leaf(7), Leaf(5)))"""
    return Branch(Leaf(3), Branch(Leaf(7), Leaf(5)))


@pytest.fixture
def lopsided_tree():
    # depth 4 on the left, 1 on the right
    return Branch(Branch(Branch(Leaf(1), Leaf(2)), Leaf(3)), Leaf(4))


@pytest.fixture
def restore_options():
    """Undo any configure() call and recursion limit change made by a test."""
    saved_limit = sys.getrecursionlimit()
    saved_options = options.current_options()
    yield
    sys.setrecursionlimit(saved_limit)
    options.configure(options.Options(log_level=saved_options.log_level))
