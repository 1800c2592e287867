"""Tests for servicebase/domain/models/ordering.py."""

import pytest
from sqlalchemy import String, cast, func, type_coerce

from servicebase.domain.errors import ContractViolationError
from servicebase.domain.models.enums import OrderDirection
from servicebase.domain.models.ordering import OrderBy
from servicebase.infrastructure.persistence.models.examples import ExampleClass


# --- String paths ---

def test_string_path_split_on_dots():
    assert OrderBy("navigation_class.name").path == ("navigation_class", "name")


def test_single_segment_path():
    assert OrderBy("name").path == ("name",)


def test_blank_string_is_noop():
    assert OrderBy("").is_noop


def test_whitespace_string_is_noop():
    assert OrderBy("   ").is_noop


def test_none_selector_rejected():
    with pytest.raises(ContractViolationError):
        OrderBy(None)


# --- Direction ---

def test_direction_defaults_to_ascending():
    assert OrderBy("name").direction is OrderDirection.ASCENDING


def test_descending_constructor():
    assert OrderBy.descending("name").is_descending


def test_ascending_constructor():
    assert not OrderBy.ascending("name").is_descending


def test_direction_accepts_string_value():
    assert OrderBy("name", "desc").direction is OrderDirection.DESCENDING


def test_unknown_direction_rejected():
    with pytest.raises(ContractViolationError):
        OrderBy("name", "descending")


# --- Typed accessors ---

def test_mapped_attribute_is_used_directly():
    order = OrderBy(ExampleClass.name)
    assert order.column is ExampleClass.name
    assert order.path is None


def test_label_wrapper_is_unwrapped():
    order = OrderBy(ExampleClass.name.label("sort_name"))
    assert order.column.name == "name"


def test_cast_wrapper_is_unwrapped():
    order = OrderBy(cast(ExampleClass.id, String))
    assert order.column.name == "id"


def test_type_coerce_wrapper_is_unwrapped():
    order = OrderBy(type_coerce(ExampleClass.id, String))
    assert order.column.name == "id"


def test_table_column_accepted():
    assert OrderBy(ExampleClass.__table__.c.name).column is not None


def test_function_expression_rejected():
    with pytest.raises(ContractViolationError, match="Unable to determine operand"):
        OrderBy(func.lower(ExampleClass.name))


def test_arithmetic_expression_rejected():
    with pytest.raises(ContractViolationError):
        OrderBy(ExampleClass.id + 1)


def test_relationship_attribute_rejected():
    with pytest.raises(ContractViolationError):
        OrderBy(ExampleClass.navigation_class)


def test_plain_value_rejected():
    with pytest.raises(ContractViolationError):
        OrderBy(42)


def test_contract_violation_is_value_error():
    with pytest.raises(ValueError):
        OrderBy(func.now())
