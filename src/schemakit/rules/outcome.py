# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Evaluation outcomes.

The evaluator returns one of these per node; the synthesizer turns a
failing outcome into an error tree. Conjunction has no outcome of its own
because it forwards the first failing branch unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = (
    "SUCCESS",
    "DisjunctionFailure",
    "EachFailure",
    "Missing",
    "Outcome",
    "PredicateFailure",
    "SchemaFailure",
    "Success",
    "TypeMismatch",
)


class Outcome:
    __slots__ = ()

    success: bool = False

    @property
    def failure(self) -> bool:
        return not self.success


class Success(Outcome):
    __slots__ = ()

    success = True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Success)

    def __hash__(self) -> int:
        return hash(Success)

    def __repr__(self) -> str:
        return "SUCCESS"


SUCCESS = Success()


@dataclass(frozen=True, slots=True)
class PredicateFailure(Outcome):
    """A predicate returned false for ``input``."""

    name: str
    args: tuple[Any, ...]
    input: Any
    arg_names: tuple[str, ...] = ()

    def bound_args(self) -> dict[str, Any]:
        return dict(zip(self.arg_names, self.args, strict=False))


@dataclass(frozen=True, slots=True)
class TypeMismatch(Outcome):
    """Input shape does not fit Each (sequence) or SchemaApplication (mapping).

    ``predicate`` names the shape check whose message is used, "array?" or "hash?".
    """

    predicate: str
    input: Any


@dataclass(frozen=True, slots=True)
class Missing(Outcome):
    """A required key is absent; the field rule was never run."""

    name: str


@dataclass(frozen=True, slots=True)
class DisjunctionFailure(Outcome):
    left: Outcome
    right: Outcome


@dataclass(frozen=True, slots=True)
class EachFailure(Outcome):
    """Failing elements only, as ``(index, outcome)`` pairs in input order."""

    elements: tuple[tuple[int, Outcome], ...]


@dataclass(frozen=True, slots=True)
class SchemaFailure(Outcome):
    """Failing fields only, as ``(name, outcome)`` pairs in declaration order."""

    fields: tuple[tuple[str, Outcome], ...]
