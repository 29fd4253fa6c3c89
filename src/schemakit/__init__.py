# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .config import SchemaConfig
from .errors import ExistsError, MalformedRuleError, SchemaKitError, UnknownPredicateError
from .messages import DEFAULT_MESSAGES, MessageCatalog
from .predicates import PredicateRegistry, get_default_registry
from .result import Result
from .rules import (
    OR_KEY,
    Conjunction,
    Disjunction,
    Each,
    ErrorSynthesizer,
    Evaluator,
    Field,
    FieldSet,
    Predicate,
    RuleNode,
    SchemaApplication,
    compile_fields,
    each,
    filled,
    optional,
    predicate,
    required,
    schema,
    value,
)
from .validator import Schema, define, evaluate

__version__ = "0.1.0"

__all__ = (
    "DEFAULT_MESSAGES",
    "OR_KEY",
    "Conjunction",
    "Disjunction",
    "Each",
    "ErrorSynthesizer",
    "Evaluator",
    "ExistsError",
    "Field",
    "FieldSet",
    "MalformedRuleError",
    "MessageCatalog",
    "Predicate",
    "PredicateRegistry",
    "Result",
    "RuleNode",
    "Schema",
    "SchemaApplication",
    "SchemaConfig",
    "SchemaKitError",
    "UnknownPredicateError",
    "compile_fields",
    "define",
    "each",
    "evaluate",
    "filled",
    "get_default_registry",
    "optional",
    "predicate",
    "required",
    "schema",
    "value",
)
