# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for field declarations and compile_fields."""

import pytest

from schemakit import (
    Conjunction,
    Field,
    FieldSet,
    MalformedRuleError,
    Predicate,
    compile_fields,
    filled,
    optional,
    predicate,
    required,
    value,
)


class TestDeclarations:
    """required()/optional() and predicate helpers."""

    def test_required_field(self):
        f = required("name", predicate("str?"))
        assert f == Field("name", True, Predicate("str?"))

    def test_optional_field(self):
        f = optional("nickname")
        assert f.required is False
        assert f.rule is None

    def test_value_conjoins_left_to_right(self):
        node = value("array?", ("min_size?", 1))
        assert node == Conjunction(Predicate("array?"), Predicate("min_size?", (1,)))

    def test_filled_prefixes_filled_predicate(self):
        node = filled("str?")
        assert node == Conjunction(Predicate("filled?"), Predicate("str?"))

    def test_filled_alone(self):
        assert filled() == Predicate("filled?")

    def test_value_without_predicates(self):
        with pytest.raises(MalformedRuleError):
            value()

    def test_value_rejects_bad_reference(self):
        with pytest.raises(MalformedRuleError):
            value(42)

    def test_rule_must_be_node(self):
        with pytest.raises(MalformedRuleError):
            required("name", "str?")

    def test_name_must_be_string(self):
        with pytest.raises(MalformedRuleError):
            required(1)


class TestCompileFields:
    """compile_fields assembles an ordered, unique FieldSet."""

    def test_preserves_declaration_order(self):
        fs = compile_fields([required("b"), required("a"), optional("c")])
        assert list(fs) == ["b", "a", "c"]

    def test_accepts_triples(self):
        fs = compile_fields(
            [
                ("name", "required", predicate("str?")),
                ("age", "optional", predicate("int?")),
            ]
        )
        assert fs["name"].required is True
        assert fs["age"].required is False
        assert fs["age"].rule == Predicate("int?")

    def test_accepts_boolean_markers(self):
        fs = compile_fields([("name", True), ("nick", False)])
        assert fs.required_names() == ["name"]

    def test_unknown_marker(self):
        with pytest.raises(MalformedRuleError, match="presence marker"):
            compile_fields([("name", "sometimes", predicate("str?"))])

    def test_duplicate_names(self):
        with pytest.raises(MalformedRuleError, match="Duplicate field name"):
            compile_fields([required("name"), optional("name")])

    def test_non_node_rule_in_triple(self):
        with pytest.raises(MalformedRuleError):
            compile_fields([("name", "required", "str?")])

    def test_unknown_declaration(self):
        with pytest.raises(MalformedRuleError):
            compile_fields(["name"])

    def test_recompiling_field_set(self):
        fs = compile_fields([required("name")])
        assert compile_fields(fs) == fs

    def test_compiles_without_evaluating(self):
        """Unregistered predicate names are accepted; nothing runs at compile time."""
        fs = compile_fields([required("x", predicate("not_registered?"))])
        assert fs["x"].rule.name == "not_registered?"


class TestFieldSet:
    def test_mapping_protocol(self):
        fs = FieldSet([required("a"), optional("b")])
        assert len(fs) == 2
        assert "a" in fs
        assert fs["b"].required is False

    def test_equality_and_hash(self):
        a = FieldSet([required("a", predicate("str?"))])
        b = FieldSet([required("a", predicate("str?"))])
        assert a == b
        assert hash(a) == hash(b)

    def test_rejects_non_field(self):
        with pytest.raises(MalformedRuleError):
            FieldSet(["a"])
