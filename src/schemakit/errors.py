# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for schemakit.

Only structural problems raise: a malformed rule tree at compile time, or a
predicate name the registry cannot resolve. Failed validations are ordinary
outcomes and never surface as exceptions.
"""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = (
    "ExistsError",
    "MalformedRuleError",
    "SchemaKitError",
    "UnknownPredicateError",
)


class SchemaKitError(Exception):
    """Base error carrying a message, structured details and a retryable flag."""

    default_message: ClassVar[str] = "schemakit error"
    default_retryable: ClassVar[bool] = True

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        retryable: bool | None = None,
        cause: BaseException | None = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.retryable = self.default_retryable if retryable is None else retryable
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Serialize error for logs and API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class MalformedRuleError(SchemaKitError, ValueError):
    """Rule tree is structurally invalid (absent branch, empty field set, ...)."""

    default_message = "malformed rule"
    default_retryable = False


class UnknownPredicateError(SchemaKitError, KeyError):
    """Predicate name is not registered."""

    default_message = "unknown predicate"
    default_retryable = False

    def __init__(self, name: str, **kwargs: Any):
        self.name = name
        details = kwargs.pop("details", None) or {}
        details.setdefault("predicate", name)
        super().__init__(f"Predicate '{name}' is not registered", details=details, **kwargs)


class ExistsError(SchemaKitError):
    """Item already registered."""

    default_message = "item already exists"
    default_retryable = False
