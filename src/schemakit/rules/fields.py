# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Field declarations and the ordered FieldSet they compile into.

Declaration helpers mirror the classic schema macros:

    required("age", filled("int?", ("gt?", 18)))
    optional("tags", value("array?").each(predicate("str?")))
    required("value")  # key presence only
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import MalformedRuleError
from .ast import Conjunction, Disjunction, Predicate, RuleNode, SchemaApplication

__all__ = (
    "Field",
    "FieldSet",
    "filled",
    "optional",
    "required",
    "value",
)

# A predicate reference accepted by value()/filled(): a name, a (name, *args)
# tuple, or an already built node.
PredicateRef = str | tuple | RuleNode


@dataclass(frozen=True, slots=True)
class Field:
    """One declared key: name, presence marker and optional rule."""

    name: str
    required: bool = True
    rule: RuleNode | None = None

    def __repr__(self) -> str:
        marker = "required" if self.required else "optional"
        if self.rule is None:
            return f"{marker}({self.name!r})"
        return f"{marker}({self.name!r}, {self.rule!r})"


class FieldSet(Mapping[str, Field]):
    """Immutable, insertion-ordered mapping of field name to Field.

    Field names are unique. Iteration order is declaration order and drives
    the order of keys in error output.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: tuple[Field, ...] | list[Field] = ()):
        index: dict[str, Field] = {}
        for f in fields:
            if not isinstance(f, Field):
                raise MalformedRuleError(
                    f"FieldSet entries must be Field objects, got {type(f).__name__}",
                    details={"type": type(f).__name__},
                )
            if f.name in index:
                raise MalformedRuleError(
                    f"Duplicate field name: '{f.name}'",
                    details={"field": f.name},
                )
            index[f.name] = f
        object.__setattr__(self, "_fields", index)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("FieldSet is immutable")

    def __getitem__(self, name: str) -> Field:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSet):
            return NotImplemented
        return tuple(self._fields.values()) == tuple(other._fields.values())

    def __hash__(self) -> int:
        return hash(tuple(self._fields.values()))

    def __or__(self, other: Any) -> Disjunction:
        """Schema-level OR: both sides become nested schema applications."""
        from .ast import schema

        return Disjunction(SchemaApplication(self), schema(other))

    def __ror__(self, other: Any) -> Disjunction:
        from .ast import schema

        return Disjunction(schema(other), SchemaApplication(self))

    def required_names(self) -> list[str]:
        return [name for name, f in self._fields.items() if f.required]

    def __repr__(self) -> str:
        return f"FieldSet({', '.join(repr(f) for f in self._fields.values())})"


def _declare(name: str, rule: RuleNode | None, is_required: bool) -> Field:
    if not isinstance(name, str) or not name:
        raise MalformedRuleError(
            f"Field name must be a non-empty string, got {name!r}",
            details={"field": repr(name)},
        )
    if rule is not None and not isinstance(rule, RuleNode):
        raise MalformedRuleError(
            f"Rule for field '{name}' must be a rule node, got {type(rule).__name__}",
            details={"field": name, "type": type(rule).__name__},
        )
    return Field(name=name, required=is_required, rule=rule)


def required(name: str, rule: RuleNode | None = None) -> Field:
    """Declare a key that must be present; absent keys report "is missing"."""
    return _declare(name, rule, True)


def optional(name: str, rule: RuleNode | None = None) -> Field:
    """Declare a key whose rule runs only when the key is present."""
    return _declare(name, rule, False)


def _to_node(ref: PredicateRef) -> RuleNode:
    if isinstance(ref, RuleNode):
        return ref
    if isinstance(ref, str):
        return Predicate(ref)
    if isinstance(ref, tuple) and ref and isinstance(ref[0], str):
        return Predicate(ref[0], tuple(ref[1:]))
    raise MalformedRuleError(
        f"Cannot build a predicate from {ref!r}",
        details={"ref": repr(ref)},
    )


def value(*refs: PredicateRef) -> RuleNode:
    """Conjoin predicate references left to right.

    Example:
        value("array?", ("min_size?", 1))  # array? & min_size?(1)
    """
    if not refs:
        raise MalformedRuleError("value() requires at least one predicate")
    node = _to_node(refs[0])
    for ref in refs[1:]:
        node = Conjunction(node, _to_node(ref))
    return node


def filled(*refs: PredicateRef) -> RuleNode:
    """``filled?`` conjoined with any further predicates."""
    return value("filled?", *refs)
