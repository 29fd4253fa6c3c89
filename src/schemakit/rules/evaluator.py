# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Evaluator - walks a rule tree against a value.

Short-circuit policy is part of the contract:
- Conjunction returns the left failure without touching the right branch
- Disjunction returns on the first succeeding branch; only when both fail
  are both failures kept for message merging

The evaluator holds no per-call state, so one instance can serve
concurrent callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .ast import Conjunction, Disjunction, Each, Predicate, RuleNode, SchemaApplication
from .outcome import (
    SUCCESS,
    DisjunctionFailure,
    EachFailure,
    Missing,
    Outcome,
    PredicateFailure,
    SchemaFailure,
    TypeMismatch,
)

if TYPE_CHECKING:
    from ..predicates import PredicateRegistry
    from .fields import FieldSet

__all__ = ("Evaluator", "is_mapping", "is_sequence")


def is_sequence(value: Any) -> bool:
    """Ordered, indexable collection accepted by Each (strings excluded)."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


class Evaluator:
    """Evaluate rule nodes using predicates from an injected registry.

    Usage:
        evaluator = Evaluator(get_default_registry())
        outcome = evaluator.evaluate(predicate("str?") | predicate("int?"), [])
        outcome.success  # False
    """

    def __init__(self, registry: PredicateRegistry | None = None):
        if registry is None:
            from ..predicates import get_default_registry

            registry = get_default_registry()
        self.registry = registry

    def evaluate(self, node: RuleNode, value: Any) -> Outcome:
        match node:
            case Predicate():
                return self._predicate(node, value)
            case Conjunction():
                left = self.evaluate(node.left, value)
                if left.failure:
                    return left
                return self.evaluate(node.right, value)
            case Disjunction():
                left = self.evaluate(node.left, value)
                if left.success:
                    return SUCCESS
                right = self.evaluate(node.right, value)
                if right.success:
                    return SUCCESS
                return DisjunctionFailure(left, right)
            case Each():
                return self._each(node, value)
            case SchemaApplication():
                return self.evaluate_fields(node.fields, value)
            case _:
                raise TypeError(f"Cannot evaluate {type(node).__name__}, expected a rule node")

    def _predicate(self, node: Predicate, value: Any) -> Outcome:
        entry = self.registry.get(node.name)
        if entry(value, *node.args):
            return SUCCESS
        return PredicateFailure(node.name, node.args, value, arg_names=entry.arg_names)

    def _each(self, node: Each, value: Any) -> Outcome:
        if not is_sequence(value):
            return TypeMismatch("array?", value)

        failures = []
        for i, item in enumerate(value):
            outcome = self.evaluate(node.element_rule, item)
            if outcome.failure:
                failures.append((i, outcome))

        if failures:
            return EachFailure(tuple(failures))
        return SUCCESS

    def evaluate_fields(self, fields: FieldSet, value: Any) -> Outcome:
        """Apply a field set to a mapping; absent required keys are Missing."""
        if not is_mapping(value):
            return TypeMismatch("hash?", value)

        failures = []
        for name, field in fields.items():
            if name not in value:
                if field.required:
                    failures.append((name, Missing(name)))
                continue
            if field.rule is None:
                continue
            outcome = self.evaluate(field.rule, value[name])
            if outcome.failure:
                failures.append((name, outcome))

        if failures:
            return SchemaFailure(tuple(failures))
        return SUCCESS

    def __repr__(self) -> str:
        return f"Evaluator(registry={self.registry!r})"
