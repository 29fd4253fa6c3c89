# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Compile field declarations into an immutable FieldSet.

The compiler only assembles and checks structure; nothing is evaluated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..errors import MalformedRuleError
from .ast import RuleNode
from .fields import Field, FieldSet

__all__ = ("compile_fields", "validate_rule")

logger = logging.getLogger(__name__)

_MARKERS = {"required": True, "optional": False}


def validate_rule(node: Any, path: str = "<root>") -> None:
    """Recursively check that ``node`` is a well-formed rule tree.

    Raises:
        MalformedRuleError: If any node or branch is absent or not a rule node
    """
    if not isinstance(node, RuleNode):
        raise MalformedRuleError(
            f"Expected a rule node at {path}, got {type(node).__name__}",
            details={"path": path, "type": type(node).__name__},
        )
    for i, child in enumerate(node.children()):
        validate_rule(child, f"{path}.{type(node).__name__}[{i}]")


def _to_field(decl: Any) -> Field:
    if isinstance(decl, Field):
        return decl

    if isinstance(decl, tuple) and len(decl) in (2, 3):
        name, marker = decl[0], decl[1]
        rule = decl[2] if len(decl) == 3 else None
        if isinstance(marker, str):
            if marker not in _MARKERS:
                raise MalformedRuleError(
                    f"Unknown presence marker '{marker}' for field '{name}'",
                    details={"field": name, "marker": marker},
                )
            marker = _MARKERS[marker]
        if not isinstance(name, str) or not name:
            raise MalformedRuleError(
                f"Field name must be a non-empty string, got {name!r}",
                details={"field": repr(name)},
            )
        return Field(name=name, required=bool(marker), rule=rule)

    raise MalformedRuleError(
        f"Cannot compile declaration {decl!r}",
        details={"declaration": repr(decl)},
    )


def compile_fields(declarations: Iterable[Any]) -> FieldSet:
    """Compile declarations into a FieldSet.

    Declarations are Field objects from required()/optional(), or
    ``(name, "required" | "optional", rule)`` triples.

    Raises:
        MalformedRuleError: On duplicate names or degenerate rule trees
    """
    if isinstance(declarations, FieldSet):
        declarations = declarations.values()

    fields = []
    for decl in declarations:
        f = _to_field(decl)
        if f.rule is not None:
            validate_rule(f.rule, path=f.name)
        fields.append(f)

    field_set = FieldSet(fields)
    logger.debug(f"Compiled field set with {len(field_set)} fields: {list(field_set)}")
    return field_set
