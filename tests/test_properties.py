# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Property-based tests for evaluation invariants."""

from hypothesis import given
from hypothesis import strategies as st

from schemakit import define, each, evaluate, predicate, required, value
from schemakit.testing import json_value_strategy, predicate_name_strategy

NESTED = define(
    required("name", predicate("filled?") & predicate("str?")),
    required("tags", value("array?").each(predicate("str?") | predicate("int?"))),
)


@given(v=json_value_strategy(), p=predicate_name_strategy(), q=predicate_name_strategy())
def test_disjunction_succeeds_when_left_holds(v, p, q):
    """If p(v) holds, p | q succeeds with no errors whatever q is."""
    left = evaluate(predicate(p), v)
    combined = evaluate(predicate(p) | predicate(q), v)
    if left.success:
        assert combined.success
        assert combined.errors == {}


@given(v=json_value_strategy(), p=predicate_name_strategy(), q=predicate_name_strategy())
def test_disjunction_is_or_of_sides(v, p, q):
    left = evaluate(predicate(p), v).success
    right = evaluate(predicate(q), v).success
    assert evaluate(predicate(p) | predicate(q), v).success == (left or right)


@given(v=json_value_strategy(), p=predicate_name_strategy(), q=predicate_name_strategy())
def test_conjunction_reports_left_failure(v, p, q):
    left = evaluate(predicate(p), v)
    if left.failure:
        assert evaluate(predicate(p) & predicate(q), v).errors == left.errors


@given(v=json_value_strategy())
def test_evaluation_is_idempotent(v):
    assert NESTED(v) == NESTED(v)
    assert NESTED({"name": "x", "tags": v}) == NESTED({"name": "x", "tags": v})


@given(items=st.lists(st.one_of(st.integers(), st.text(max_size=5)), max_size=20))
def test_each_keys_exactly_failing_indices(items):
    errors = evaluate(each(predicate("int?")), items).errors
    expected = {i for i, item in enumerate(items) if not isinstance(item, int)}
    assert set(errors or {}) == expected
