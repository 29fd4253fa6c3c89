# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for schemakit.testing factories and optional hypothesis strategies."""

import importlib
import sys

import pytest

import schemakit
from schemakit.testing import (
    create_nested_definitions_schema,
    create_test_registry,
    get_sample_definitions,
)


@pytest.fixture
def testing_without_hypothesis(monkeypatch):
    """Fresh import of schemakit.testing with hypothesis unavailable."""
    monkeypatch.setattr(schemakit, "testing", schemakit.testing)
    monkeypatch.delitem(sys.modules, "schemakit.testing")
    monkeypatch.setitem(sys.modules, "hypothesis", None)
    return importlib.import_module("schemakit.testing")


class TestFactories:
    def test_test_registry_adds_predicates(self):
        registry = create_test_registry(triple=lambda v: v % 3 == 0)
        assert "triple?" in registry
        assert "str?" in registry

    def test_sample_definitions_validate(self):
        assert create_nested_definitions_schema()(get_sample_definitions()).success


class TestWithoutHypothesis:
    def test_public_names_defined(self, testing_without_hypothesis):
        """Every exported name exists even when hypothesis is missing."""
        for name in testing_without_hypothesis.__all__:
            assert hasattr(testing_without_hypothesis, name)

    def test_json_value_strategy_raises_with_install_hint(self, testing_without_hypothesis):
        with pytest.raises(ImportError, match="pip install hypothesis"):
            testing_without_hypothesis.json_value_strategy()

    def test_predicate_name_strategy_raises_with_install_hint(self, testing_without_hypothesis):
        with pytest.raises(ImportError, match="pip install hypothesis"):
            testing_without_hypothesis.predicate_name_strategy()

    def test_factories_still_work(self, testing_without_hypothesis):
        schema = testing_without_hypothesis.create_user_schema()
        assert schema({"name": "Ocean", "age": 30}).success
