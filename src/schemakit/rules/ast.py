# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule tree nodes.

A compiled schema is a tree built from five node shapes:

    Predicate          leaf, named test resolved through the registry
    Conjunction        left & right, first failure wins
    Disjunction        left | right, first success wins
    Each               element rule applied to every item of a sequence
    SchemaApplication  nested field set applied to a mapping

Nodes are frozen and never mutated after construction, so one tree can be
evaluated from many threads at once.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..errors import MalformedRuleError

if TYPE_CHECKING:
    from .fields import FieldSet

__all__ = (
    "Conjunction",
    "Disjunction",
    "Each",
    "Predicate",
    "RuleNode",
    "SchemaApplication",
    "each",
    "predicate",
    "schema",
)


class RuleNode:
    """Base rule node with the combinator surface."""

    __slots__ = ()

    def __and__(self, other: RuleNode) -> Conjunction:
        return Conjunction(self, other)

    def __or__(self, other: RuleNode) -> Disjunction:
        return Disjunction(self, other)

    def each(self, element_rule: RuleNode) -> Conjunction:
        """Guard with this rule, then apply ``element_rule`` to every element."""
        return Conjunction(self, Each(element_rule))

    def schema(self, fields: Any) -> Conjunction:
        """Guard with this rule, then apply a nested field set."""
        return Conjunction(self, schema(fields))

    def children(self) -> tuple[RuleNode, ...]:
        return ()

    def walk(self) -> Iterator[RuleNode]:
        """Depth-first, left-to-right traversal including self."""
        yield self
        for child in self.children():
            yield from child.walk()

    def predicate_names(self) -> set[str]:
        return {node.name for node in self.walk() if isinstance(node, Predicate)}


def _require_node(value: Any, role: str, owner: str) -> None:
    if value is None:
        raise MalformedRuleError(
            f"{owner} is missing its {role}",
            details={"node": owner, "role": role},
        )
    if not isinstance(value, RuleNode):
        raise MalformedRuleError(
            f"{owner} {role} must be a rule node, got {type(value).__name__}",
            details={"node": owner, "role": role, "type": type(value).__name__},
        )


@dataclass(frozen=True, slots=True)
class Predicate(RuleNode):
    """Named predicate with positional arguments.

    Examples:
        Predicate("str?")
        Predicate("gt?", (18,))
    """

    name: str
    args: tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise MalformedRuleError(
                "Predicate name must be a non-empty string",
                details={"node": "Predicate", "name": repr(self.name)},
            )
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    def __repr__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}({', '.join(repr(a) for a in self.args)})"


@dataclass(frozen=True, slots=True)
class Conjunction(RuleNode):
    left: RuleNode
    right: RuleNode

    def __post_init__(self):
        _require_node(self.left, "left branch", "Conjunction")
        _require_node(self.right, "right branch", "Conjunction")

    def children(self) -> tuple[RuleNode, ...]:
        return (self.left, self.right)

    def __repr__(self) -> str:
        return f"({self.left!r} & {self.right!r})"


@dataclass(frozen=True, slots=True)
class Disjunction(RuleNode):
    left: RuleNode
    right: RuleNode

    def __post_init__(self):
        _require_node(self.left, "left branch", "Disjunction")
        _require_node(self.right, "right branch", "Disjunction")

    def children(self) -> tuple[RuleNode, ...]:
        return (self.left, self.right)

    def __repr__(self) -> str:
        return f"({self.left!r} | {self.right!r})"


@dataclass(frozen=True, slots=True)
class Each(RuleNode):
    element_rule: RuleNode

    def __post_init__(self):
        _require_node(self.element_rule, "element rule", "Each")

    def children(self) -> tuple[RuleNode, ...]:
        return (self.element_rule,)

    def __repr__(self) -> str:
        return f"each({self.element_rule!r})"


@dataclass(frozen=True, slots=True)
class SchemaApplication(RuleNode):
    fields: FieldSet

    def __post_init__(self):
        from .fields import FieldSet

        if self.fields is None:
            raise MalformedRuleError(
                "SchemaApplication is missing its field set",
                details={"node": "SchemaApplication", "role": "fields"},
            )
        if not isinstance(self.fields, FieldSet):
            raise MalformedRuleError(
                f"SchemaApplication fields must be a FieldSet, got {type(self.fields).__name__}",
                details={"node": "SchemaApplication", "type": type(self.fields).__name__},
            )
        if not self.fields:
            raise MalformedRuleError(
                "SchemaApplication requires at least one field",
                details={"node": "SchemaApplication", "role": "fields"},
            )

    def children(self) -> tuple[RuleNode, ...]:
        return tuple(f.rule for f in self.fields.values() if f.rule is not None)

    def __repr__(self) -> str:
        return f"schema({self.fields!r})"


def predicate(name: str, *args: Any) -> Predicate:
    """Build a predicate leaf: ``predicate("gt?", 18)``."""
    return Predicate(name, args)


def each(element_rule: RuleNode) -> Each:
    return Each(element_rule)


def schema(fields: Any) -> RuleNode:
    """Build a schema node from a FieldSet, a compiled Schema, or an OR of those.

    Disjunctions whose branches are field sets or schemas are rebuilt with
    every branch lifted to a SchemaApplication, which gives the alternatives
    fan-out on failure.
    """
    from .fields import FieldSet

    if fields is None:
        raise MalformedRuleError(
            "schema() requires a field set",
            details={"node": "SchemaApplication", "role": "fields"},
        )
    if isinstance(fields, FieldSet):
        return SchemaApplication(fields)
    if isinstance(fields, SchemaApplication):
        return fields
    if isinstance(fields, Disjunction):
        return Disjunction(schema(fields.left), schema(fields.right))

    rule = getattr(fields, "rule", None)
    if isinstance(rule, RuleNode):
        return schema(rule)
    raise MalformedRuleError(
        f"schema() expects a FieldSet, Schema or an OR of them, got {type(fields).__name__}",
        details={"node": "SchemaApplication", "type": type(fields).__name__},
    )
