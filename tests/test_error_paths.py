# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schemakit exception hierarchy."""

from schemakit.errors import (
    ExistsError,
    MalformedRuleError,
    SchemaKitError,
    UnknownPredicateError,
)


class TestSchemaKitErrorBase:
    def test_default_message(self):
        """Default message is used when none provided."""
        err = SchemaKitError()
        assert err.message == "schemakit error"
        assert str(err) == "schemakit error"

    def test_custom_message(self):
        err = SchemaKitError("custom error message")
        assert err.message == "custom error message"

    def test_details_dict(self):
        details = {"key": "value", "count": 42}
        err = SchemaKitError("test", details=details)
        assert err.details == details

    def test_retryable_default(self):
        assert SchemaKitError().retryable is True

    def test_cause_chaining(self):
        """Cause exception is preserved for traceback."""
        original = ValueError("original error")
        err = SchemaKitError("wrapped error", cause=original)
        assert err.__cause__ is original

    def test_to_dict_serialization(self):
        err = SchemaKitError("test message", details={"key": "value"}, retryable=False)
        data = err.to_dict()
        assert data["error"] == "SchemaKitError"
        assert data["message"] == "test message"
        assert data["retryable"] is False
        assert data["details"] == {"key": "value"}


class TestSpecializedErrors:
    def test_malformed_rule_not_retryable(self):
        err = MalformedRuleError()
        assert err.retryable is False
        assert err.message == "malformed rule"

    def test_malformed_rule_is_value_error(self):
        assert isinstance(MalformedRuleError("bad"), ValueError)

    def test_unknown_predicate(self):
        err = UnknownPredicateError("gt?")
        assert err.name == "gt?"
        assert err.retryable is False
        assert str(err) == "Predicate 'gt?' is not registered"
        assert err.to_dict()["details"] == {"predicate": "gt?"}

    def test_unknown_predicate_is_key_error(self):
        assert isinstance(UnknownPredicateError("x?"), KeyError)

    def test_inheritance_hierarchy(self):
        """All specialized errors inherit from SchemaKitError."""
        errors = [
            MalformedRuleError(),
            UnknownPredicateError("x?"),
            ExistsError(),
        ]
        for err in errors:
            assert isinstance(err, SchemaKitError)
