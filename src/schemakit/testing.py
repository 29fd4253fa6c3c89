# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Testing utilities for schemakit and downstream projects.

Basic usage:
    from schemakit.testing import create_user_schema, create_test_registry

    def test_my_schema():
        schema = create_user_schema()
        assert schema({"name": "Ocean", "age": 30}).success

Property-based testing (requires hypothesis):
    from schemakit.testing import json_value_strategy

    @given(value=json_value_strategy())
    def test_schema_is_idempotent(value):
        ...
"""

from __future__ import annotations

from typing import Any

from .predicates import PredicateRegistry, get_default_registry
from .rules import filled, predicate, required, value
from .validator import Schema, define

__all__ = (
    "create_name_schemas",
    "create_nested_definitions_schema",
    "create_test_registry",
    "create_user_schema",
    "get_sample_definitions",
    "json_value_strategy",
    "predicate_name_strategy",
)


# =============================================================================
# Registry Factories
# =============================================================================


def create_test_registry(**extra: Any) -> PredicateRegistry:
    """Copy of the default registry with extra ``name=fn`` predicates added.

    Names are given without the trailing "?" because keyword arguments cannot
    contain it: ``create_test_registry(even=lambda v: v % 2 == 0)`` registers
    ``even?``.
    """
    registry = get_default_registry().copy()
    for name, fn in extra.items():
        registry.register(f"{name}?", fn, update=True)
    return registry


# =============================================================================
# Schema Factories
# =============================================================================


def create_user_schema(registry: PredicateRegistry | None = None) -> Schema:
    return define(
        required("name", filled("str?")),
        required("age", predicate("int?") & predicate("gt?", 18)),
        registry=registry,
    )


def create_name_schemas() -> tuple[Schema, Schema]:
    """``name`` and ``first_name`` schemas, commonly combined with ``|``."""
    name_schema = define(required("name", filled("str?")))
    first_name_schema = define(required("first_name", filled("str?")))
    return name_schema, first_name_schema


def create_nested_definitions_schema() -> Schema:
    """List of definitions, each either a question or a scale with options."""
    scale_options = define(
        required("value"),
        required("text", filled("str?")),
    )
    scale = define(
        required("type", filled(("eql?", "scale"))),
        required("id", filled("str?")),
        required(
            "options",
            value("array?", ("min_size?", 1)).each(predicate("hash?").schema(scale_options)),
        ),
    )
    question = define(
        required("type", filled(("eql?", "question"))),
        required("id", filled("str?")),
        required("text", filled("str?")),
    )
    return define(
        required(
            "definitions",
            value("array?", ("min_size?", 1)).each(predicate("hash?").schema(question | scale)),
        ),
    )


def get_sample_definitions() -> dict[str, Any]:
    return {
        "definitions": [
            {
                "type": "scale",
                "id": "1",
                "options": [
                    {"text": "No", "value": 1},
                    {"text": "Yes", "value": 2},
                ],
            },
            {"id": "2", "type": "question", "text": "hello"},
        ]
    }


# =============================================================================
# Hypothesis Strategies (optional dependency)
# =============================================================================

try:
    from hypothesis import strategies as st

    def json_value_strategy(max_leaves: int = 10) -> st.SearchStrategy[Any]:
        """Hypothesis strategy for JSON-like values (scalars, lists, str-keyed dicts).

        Example:
            >>> from hypothesis import given
            >>> @given(value=json_value_strategy())
            ... def test_evaluation_is_pure(value):
            ...     assert schema(value) == schema(value)
        """
        scalars = st.one_of(
            st.none(),
            st.booleans(),
            st.integers(min_value=-1000, max_value=1000),
            st.floats(allow_nan=False, allow_infinity=False),
            st.text(max_size=20),
        )
        return st.recursive(
            scalars,
            lambda children: st.one_of(
                st.lists(children, max_size=5),
                st.dictionaries(st.text(min_size=1, max_size=10), children, max_size=5),
            ),
            max_leaves=max_leaves,
        )

    def predicate_name_strategy() -> st.SearchStrategy[str]:
        """Argument-free built-in type predicates."""
        return st.sampled_from(
            ["str?", "int?", "float?", "bool?", "nil?", "array?", "hash?", "filled?", "empty?"]
        )

except ImportError:
    # Hypothesis not installed, provide stub functions
    def json_value_strategy(max_leaves: int = 10):
        """Hypothesis not installed. Install with: pip install hypothesis"""
        raise ImportError(
            "hypothesis is required for property-based testing strategies. "
            "Install with: pip install hypothesis"
        )

    def predicate_name_strategy():
        """Hypothesis not installed. Install with: pip install hypothesis"""
        raise ImportError(
            "hypothesis is required for property-based testing strategies. "
            "Install with: pip install hypothesis"
        )
