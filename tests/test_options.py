# tests/test_options.py
import logging
import sys

import pytest

from fpdata import mylist, options
from fpdata.options import (
    LOG_LEVEL_ENV,
    FpdataError,
    Options,
    OptionsError,
    StackDepthError,
    configure,
    current_options,
    stack_guarded,
)


def test_default_log_level_comes_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    assert Options().log_level == "DEBUG"

    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert Options().log_level is None


def test_environment_level_is_applied_without_configure(monkeypatch, restore_options):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    opts = options._configure_from_environment()

    assert opts.log_level == "DEBUG"
    assert current_options() is opts
    assert logging.getLogger("fpdata.mylist").getEffectiveLevel() == logging.DEBUG


def test_no_environment_level_leaves_logger_inheriting(monkeypatch, restore_options):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    configure(Options(log_level=None))

    assert logging.getLogger("fpdata").level == logging.NOTSET
    assert options._configure_from_environment().log_level is None
    assert logging.getLogger("fpdata").level == logging.NOTSET


def test_configure_sets_package_logger_level(restore_options):
    opts = configure(Options(log_level="info"))

    assert current_options() is opts
    assert logging.getLogger("fpdata").level == logging.INFO
    assert logging.getLogger("fpdata.mylist").getEffectiveLevel() == logging.INFO


def test_configure_rejects_unknown_level(restore_options):
    before = current_options()
    with pytest.raises(OptionsError):
        configure(Options(log_level="chatty"))
    assert current_options() is before


def test_configure_rejects_non_positive_recursion_limit(restore_options):
    with pytest.raises(OptionsError):
        configure(Options(recursion_limit=0))


def test_raised_recursion_limit_lets_naive_recursion_go_deeper(restore_options):
    n = sys.getrecursionlimit() + 500
    deep = mylist.from_iterable([1] * n)

    with pytest.raises(StackDepthError):
        mylist.sum_(deep)

    configure(Options(recursion_limit=n + 1000))
    assert sys.getrecursionlimit() == n + 1000
    assert mylist.sum_(deep) == n


def test_stack_guarded_keeps_name_and_other_errors():
    @stack_guarded
    def explode():
        raise ValueError("boom")

    assert explode.__name__ == "explode"
    with pytest.raises(ValueError):
        explode()


def test_error_hierarchy():
    err = StackDepthError("fold_right")
    assert isinstance(err, FpdataError)
    assert issubclass(OptionsError, FpdataError)
    assert "fold_right" in str(err)
