# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Error synthesis - turns a failing outcome into a path-keyed error tree.

Error tree shape:
    leaf    list[str]                    messages in evaluation order
    node    dict[str | int, ErrorTree]   keyed by field name or element index
    or      {"or": [ErrorTree, ...]}     alternatives that could not be merged

Disjunction merging:
    leaf | leaf                 one message, "<left> or <right>"
    tree | tree                 {"or": [left, right]}, nested alternatives flattened
    leaf | tree, tree | leaf    the tree alone; the input matched its shape
"""

from __future__ import annotations

from typing import Any

from ..messages import MessageCatalog
from .outcome import (
    DisjunctionFailure,
    EachFailure,
    Missing,
    Outcome,
    PredicateFailure,
    SchemaFailure,
    TypeMismatch,
)

__all__ = ("OR_KEY", "ErrorSynthesizer", "ErrorTree")

OR_KEY = "or"

ErrorTree = list[str] | dict[Any, Any]


class ErrorSynthesizer:
    def __init__(self, catalog: MessageCatalog | None = None, or_separator: str = " or "):
        self.catalog = catalog or MessageCatalog()
        self.or_separator = or_separator

    def synthesize(self, outcome: Outcome) -> ErrorTree:
        """Build the error tree for ``outcome``; a success yields ``{}``."""
        if outcome.success:
            return {}

        match outcome:
            case PredicateFailure():
                return [self.catalog.render(outcome.name, outcome.bound_args(), outcome.input)]
            case TypeMismatch():
                return [self.catalog.render(outcome.predicate, input=outcome.input)]
            case Missing():
                return [self.catalog.missing()]
            case DisjunctionFailure():
                return self._merge(self.synthesize(outcome.left), self.synthesize(outcome.right))
            case EachFailure():
                return {index: self.synthesize(o) for index, o in outcome.elements}
            case SchemaFailure():
                return {name: self.synthesize(o) for name, o in outcome.fields}
            case _:
                raise TypeError(f"Cannot synthesize errors for {type(outcome).__name__}")

    def _merge(self, left: ErrorTree, right: ErrorTree) -> ErrorTree:
        if isinstance(left, list) and isinstance(right, list):
            messages: list[str] = []
            for msg in left + right:
                if msg not in messages:
                    messages.append(msg)
            return [self.or_separator.join(messages)]
        if isinstance(left, list):
            return right
        if isinstance(right, list):
            return left
        return {OR_KEY: self._alternatives(left) + self._alternatives(right)}

    @staticmethod
    def _alternatives(tree: dict[Any, Any]) -> list[ErrorTree]:
        if len(tree) == 1 and OR_KEY in tree:
            return list(tree[OR_KEY])
        return [tree]
