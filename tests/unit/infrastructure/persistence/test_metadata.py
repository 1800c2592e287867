"""Tests for servicebase/infrastructure/persistence/metadata.py."""

import pytest

from servicebase.domain.errors import ContractViolationError
from servicebase.infrastructure.persistence.metadata import KeyMetadata, SqlAlchemyKeyMetadata
from servicebase.infrastructure.persistence.models.examples import (
    ExampleClass,
    ExampleTag,
    NavigationClass,
)


def test_single_column_key():
    assert SqlAlchemyKeyMetadata().key_names(ExampleClass) == ("id",)


def test_composite_key_in_declared_order():
    assert SqlAlchemyKeyMetadata().key_names(ExampleTag) == ("example_class_id", "label")


def test_key_names_stable_across_calls():
    meta = SqlAlchemyKeyMetadata()
    assert meta.key_names(NavigationClass) == meta.key_names(NavigationClass)


def test_unmapped_class_is_contract_violation():
    class NotMapped:
        pass

    with pytest.raises(ContractViolationError):
        SqlAlchemyKeyMetadata().key_names(NotMapped)


def test_key_metadata_is_abstract():
    with pytest.raises(TypeError):
        KeyMetadata()  # type: ignore[abstract]
