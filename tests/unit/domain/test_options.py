"""Tests for servicebase/domain/models/options.py."""

from servicebase.domain.models.options import QueryOptions
from servicebase.domain.models.ordering import OrderBy


def test_defaults_are_empty():
    options = QueryOptions()
    assert options.where is None
    assert options.order_by == ()
    assert options.includes == ()
    assert options.page is None


def test_none_sequences_become_empty_tuples():
    options = QueryOptions(order_by=None, includes=None)
    assert options.order_by == () and options.includes == ()


def test_lists_are_frozen_into_tuples():
    options = QueryOptions(order_by=[OrderBy("name")], includes=["navigation_class"])
    assert isinstance(options.order_by, tuple)
    assert options.includes == ("navigation_class",)


def test_has_ordering_ignores_noop_entries():
    assert QueryOptions(order_by=[OrderBy(""), OrderBy(" ")]).has_ordering is False


def test_has_ordering_true_with_effective_entry():
    assert QueryOptions(order_by=[OrderBy(""), OrderBy("name")]).has_ordering is True
