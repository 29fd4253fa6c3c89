# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""English message templates for predicate failures.

Templates use ``str.format`` fields named after the predicate's registered
argument names, plus ``{input}`` for the failing value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ("DEFAULT_MESSAGES", "MISSING_KEY", "MessageCatalog")

MISSING_KEY = "key?"

DEFAULT_MESSAGES: dict[str, str] = {
    "str?": "must be a string",
    "int?": "must be an integer",
    "float?": "must be a float",
    "decimal?": "must be a decimal",
    "number?": "must be a number",
    "bool?": "must be boolean",
    "nil?": "cannot be defined",
    "array?": "must be an array",
    "hash?": "must be a hash",
    "date?": "must be a date",
    "date_time?": "must be a date time",
    "time?": "must be a time",
    "filled?": "must be filled",
    "empty?": "must be empty",
    "key?": "is missing",
    "eql?": "must be equal to {left}",
    "not_eql?": "must not be equal to {left}",
    "gt?": "must be greater than {num}",
    "gteq?": "must be greater than or equal to {num}",
    "lt?": "must be less than {num}",
    "lteq?": "must be less than or equal to {num}",
    "true?": "must be true",
    "false?": "must be false",
    "odd?": "must be odd",
    "even?": "must be even",
    "size?": "size must be {size}",
    "min_size?": "size cannot be less than {num}",
    "max_size?": "size cannot be greater than {num}",
    "included_in?": "must be one of: {list}",
    "excluded_from?": "must not be one of: {list}",
    "format?": "is in invalid format",
}


def _display(value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(str(v) for v in value)
    pattern = getattr(value, "pattern", None)
    if isinstance(pattern, str):
        return pattern
    return str(value)


class MessageCatalog:
    """Resolve predicate names to rendered messages.

    Unknown names fall back to "is invalid" so a custom predicate without a
    template still produces a readable error.
    """

    fallback = "is invalid"

    def __init__(self, overrides: Mapping[str, str] | None = None):
        self._templates: dict[str, str] = {**DEFAULT_MESSAGES, **(overrides or {})}

    def template(self, name: str) -> str:
        return self._templates.get(name, self.fallback)

    def render(self, name: str, args: Mapping[str, Any] | None = None, input: Any = None) -> str:
        params = {k: _display(v) for k, v in (args or {}).items()}
        params.setdefault("input", _display(input))
        try:
            return self.template(name).format(**params)
        except (KeyError, IndexError):
            # template references an argument the predicate did not receive
            return self.template(name)

    def missing(self) -> str:
        return self.render(MISSING_KEY)

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def __repr__(self) -> str:
        return f"MessageCatalog(templates={len(self._templates)})"
