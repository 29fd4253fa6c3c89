# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Schema - compiled rule tree bound to a registry and message catalog.

Usage:
    from schemakit import define, filled, predicate, required

    user = define(
        required("name", filled("str?")),
        required("age", predicate("int?") & predicate("gt?", 18)),
    )
    result = user({"name": "", "age": 17})
    result.errors
    # → {"name": ["must be filled"], "age": ["must be greater than 18"]}

    # Schema-level OR fans out to both error trees
    either = name_schema | first_name_schema
    either({"last_name": "John"}).errors
    # → {"or": [{"name": ["is missing"]}, {"first_name": ["is missing"]}]}
"""

from __future__ import annotations

import logging
from typing import Any

from .config import SchemaConfig
from .errors import MalformedRuleError
from .messages import MessageCatalog
from .predicates import PredicateRegistry, get_default_registry
from .result import Result
from .rules.ast import Disjunction, RuleNode, SchemaApplication
from .rules.compiler import compile_fields, validate_rule
from .rules.evaluator import Evaluator
from .rules.fields import Field, FieldSet
from .rules.synthesizer import ErrorSynthesizer

__all__ = ("Schema", "define", "evaluate")

logger = logging.getLogger(__name__)


class Schema:
    """Callable validator built from a FieldSet or a root rule node.

    The rule tree, registry and catalog are fixed at construction; calls
    allocate only their own outcome and Result, so a Schema may be shared
    across threads.
    """

    __slots__ = ("config", "evaluator", "registry", "rule", "synthesizer")

    def __init__(
        self,
        fields: FieldSet | RuleNode | list[Field] | tuple[Field, ...],
        *,
        registry: PredicateRegistry | None = None,
        config: SchemaConfig | None = None,
    ):
        """Bind a rule tree to its collaborators.

        Args:
            fields: FieldSet, field declarations, or a root rule node
            registry: Predicate registry (shared default if None)
            config: Message overrides and compile-time checks

        Raises:
            MalformedRuleError: If the rule tree is structurally invalid
            UnknownPredicateError: If a predicate is not registered and
                ``config.check_predicates`` is set
        """
        if isinstance(fields, RuleNode):
            validate_rule(fields)
            rule = fields
        elif isinstance(fields, (FieldSet, list, tuple)):
            rule = SchemaApplication(compile_fields(fields))
        else:
            raise MalformedRuleError(
                f"Schema expects a FieldSet or a rule node, got {type(fields).__name__}",
                details={"type": type(fields).__name__},
            )

        self.rule: RuleNode = rule
        self.config = config or SchemaConfig()
        self.registry = registry or get_default_registry()
        self.evaluator = Evaluator(self.registry)
        self.synthesizer = ErrorSynthesizer(
            MessageCatalog(self.config.messages),
            or_separator=self.config.or_separator,
        )

        if self.config.check_predicates:
            self.registry.require(self.rule.predicate_names())

    @property
    def fields(self) -> FieldSet | None:
        """Top-level FieldSet, or None when the root is not a single schema."""
        if isinstance(self.rule, SchemaApplication):
            return self.rule.fields
        return None

    def call(self, data: Any) -> Result:
        outcome = self.evaluator.evaluate(self.rule, data)
        errors = self.synthesizer.synthesize(outcome)
        if errors:
            logger.debug(f"Validation failed with {len(errors)} top-level error entries")
        return Result(input=data, errors=errors)

    def __call__(self, data: Any) -> Result:
        return self.call(data)

    def __or__(self, other: Schema | FieldSet | RuleNode) -> Schema:
        """Combine two schemas; on failure both error trees are reported under "or"."""
        return Schema(
            Disjunction(self.rule, _root_rule(other)),
            registry=self.registry,
            config=self.config,
        )

    def __repr__(self) -> str:
        return f"Schema({self.rule!r})"


def _root_rule(other: Any) -> RuleNode:
    if isinstance(other, Schema):
        return other.rule
    if isinstance(other, RuleNode):
        return other
    if isinstance(other, FieldSet):
        return SchemaApplication(other)
    raise MalformedRuleError(
        f"Cannot combine a Schema with {type(other).__name__}",
        details={"type": type(other).__name__},
    )


def define(
    *declarations: Field,
    registry: PredicateRegistry | None = None,
    config: SchemaConfig | None = None,
) -> Schema:
    """Compile field declarations into a Schema."""
    return Schema(declarations, registry=registry, config=config)


def evaluate(
    rule: FieldSet | RuleNode | Schema,
    data: Any,
    registry: PredicateRegistry | None = None,
    config: SchemaConfig | None = None,
) -> Result:
    """Evaluate a FieldSet, rule node or Schema against ``data``."""
    if isinstance(rule, Schema):
        if registry is None and config is None:
            return rule(data)
        rule = rule.rule
    return Schema(rule, registry=registry, config=config)(data)
