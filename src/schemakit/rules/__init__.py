# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule trees: nodes, field sets, compiler, evaluator and error synthesis.

Pipeline:
    required()/optional() → compile_fields() → FieldSet
    Evaluator.evaluate(node, value) → Outcome
    ErrorSynthesizer.synthesize(outcome) → ErrorTree
"""

from .ast import (
    Conjunction,
    Disjunction,
    Each,
    Predicate,
    RuleNode,
    SchemaApplication,
    each,
    predicate,
    schema,
)
from .compiler import compile_fields, validate_rule
from .evaluator import Evaluator
from .fields import Field, FieldSet, filled, optional, required, value
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
from .synthesizer import OR_KEY, ErrorSynthesizer, ErrorTree

__all__ = (
    "OR_KEY",
    "SUCCESS",
    "Conjunction",
    "Disjunction",
    "DisjunctionFailure",
    "Each",
    "EachFailure",
    "ErrorSynthesizer",
    "ErrorTree",
    "Evaluator",
    "Field",
    "FieldSet",
    "Missing",
    "Outcome",
    "Predicate",
    "PredicateFailure",
    "RuleNode",
    "SchemaApplication",
    "SchemaFailure",
    "TypeMismatch",
    "compile_fields",
    "each",
    "filled",
    "optional",
    "predicate",
    "required",
    "schema",
    "validate_rule",
    "value",
)
