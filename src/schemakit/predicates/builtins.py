# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Built-in predicates.

Every predicate takes the value first, then its positional arguments, and
returns a bool. Predicates do not coerce: ``int?`` on ``"1"`` is false.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from .registry import PredicateRegistry

__all__ = ("BUILTIN_PREDICATES", "register_builtins")


def _is_int(v: Any) -> bool:
    # bool is an int subclass, but True is not an integer here
    return isinstance(v, int) and not isinstance(v, bool)


def _is_number(v: Any) -> bool:
    return _is_int(v) or isinstance(v, (float, Decimal))


def _is_array(v: Any) -> bool:
    return isinstance(v, (list, tuple))


def _is_empty(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, (str, bytes, list, tuple, set, frozenset, Mapping)):
        return len(v) == 0
    return False


def _size(v: Any) -> int:
    return len(v)


def _format(v: Any, pattern: str | re.Pattern) -> bool:
    if not isinstance(v, str):
        return False
    return re.search(pattern, v) is not None


# name -> (function, argument names)
BUILTIN_PREDICATES: dict[str, tuple[Any, tuple[str, ...]]] = {
    # type checks
    "str?": (lambda v: isinstance(v, str), ()),
    "int?": (_is_int, ()),
    "float?": (lambda v: isinstance(v, float), ()),
    "decimal?": (lambda v: isinstance(v, Decimal), ()),
    "number?": (_is_number, ()),
    "bool?": (lambda v: isinstance(v, bool), ()),
    "nil?": (lambda v: v is None, ()),
    "array?": (_is_array, ()),
    "hash?": (lambda v: isinstance(v, Mapping), ()),
    "date?": (lambda v: isinstance(v, date) and not isinstance(v, datetime), ()),
    "date_time?": (lambda v: isinstance(v, datetime), ()),
    "time?": (lambda v: isinstance(v, time), ()),
    # presence
    "filled?": (lambda v: not _is_empty(v), ()),
    "empty?": (_is_empty, ()),
    "key?": (lambda v, name: isinstance(v, Mapping) and name in v, ("name",)),
    # comparison
    "eql?": (lambda v, left: v == left, ("left",)),
    "not_eql?": (lambda v, left: v != left, ("left",)),
    "gt?": (lambda v, num: v > num, ("num",)),
    "gteq?": (lambda v, num: v >= num, ("num",)),
    "lt?": (lambda v, num: v < num, ("num",)),
    "lteq?": (lambda v, num: v <= num, ("num",)),
    "true?": (lambda v: v is True, ()),
    "false?": (lambda v: v is False, ()),
    "odd?": (lambda v: _is_int(v) and v % 2 == 1, ()),
    "even?": (lambda v: _is_int(v) and v % 2 == 0, ()),
    # size
    "size?": (lambda v, size: _size(v) == size, ("size",)),
    "min_size?": (lambda v, num: _size(v) >= num, ("num",)),
    "max_size?": (lambda v, num: _size(v) <= num, ("num",)),
    # membership and format
    "included_in?": (lambda v, items: v in items, ("list",)),
    "excluded_from?": (lambda v, items: v not in items, ("list",)),
    "format?": (_format, ("format",)),
}


def register_builtins(registry: PredicateRegistry, update: bool = False) -> PredicateRegistry:
    for name, (fn, arg_names) in BUILTIN_PREDICATES.items():
        registry.register(name, fn, arg_names=arg_names, update=update)
    return registry
