# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..errors import ExistsError, UnknownPredicateError

__all__ = ("PredicateEntry", "PredicateRegistry", "get_default_registry")

logger = logging.getLogger(__name__)

# (value, *args) -> bool
PredicateFn = Callable[..., bool]


@dataclass(frozen=True, slots=True)
class PredicateEntry:
    """Registered predicate.

    ``arg_names`` name the positional arguments for message templates, so
    ``gt?`` registered with ``("num",)`` renders "must be greater than {num}".
    """

    name: str
    fn: PredicateFn
    arg_names: tuple[str, ...] = ()

    def __call__(self, value: Any, *args: Any) -> bool:
        return bool(self.fn(value, *args))


class PredicateRegistry:
    """Name → predicate mapping injected into the evaluator.

    Usage:
        registry = PredicateRegistry()
        registry.register("even?", lambda v: v % 2 == 0)
        registry.get("even?")(4)  # True
    """

    def __init__(self):
        self._entries: dict[str, PredicateEntry] = {}

    def register(
        self,
        name: str,
        fn: PredicateFn,
        arg_names: tuple[str, ...] | list[str] = (),
        update: bool = False,
    ) -> PredicateEntry:
        if not callable(fn):
            raise TypeError(f"Predicate '{name}' must be callable, got {type(fn).__name__}")
        if name in self._entries:
            if not update:
                raise ExistsError(
                    f"Predicate '{name}' already registered",
                    details={"predicate": name},
                )
            logger.warning(f"Overriding registered predicate '{name}'")

        entry = PredicateEntry(name=name, fn=fn, arg_names=tuple(arg_names))
        self._entries[name] = entry
        return entry

    def predicate(
        self, name: str, arg_names: tuple[str, ...] | list[str] = (), update: bool = False
    ) -> Callable[[PredicateFn], PredicateFn]:
        """Decorator form of register()."""

        def decorator(fn: PredicateFn) -> PredicateFn:
            self.register(name, fn, arg_names=arg_names, update=update)
            return fn

        return decorator

    def unregister(self, name: str) -> PredicateEntry:
        """Remove and return predicate by name."""
        if name not in self._entries:
            raise UnknownPredicateError(name)
        return self._entries.pop(name)

    def get(self, name: str) -> PredicateEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownPredicateError(name) from None

    def require(self, names: set[str] | list[str]) -> None:
        """Raise UnknownPredicateError for the first unregistered name, sorted."""
        for name in sorted(names):
            if name not in self._entries:
                raise UnknownPredicateError(name)

    def copy(self) -> PredicateRegistry:
        clone = PredicateRegistry()
        clone._entries = dict(self._entries)
        return clone

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def list_names(self) -> list[str]:
        """List all registered predicate names."""
        return list(self._entries.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PredicateRegistry(count={len(self)})"


@functools.cache
def get_default_registry() -> PredicateRegistry:
    """Shared registry pre-loaded with the built-in predicates.

    Use ``get_default_registry().copy()`` before registering custom
    predicates to keep the shared instance untouched.
    """
    from .builtins import register_builtins

    registry = PredicateRegistry()
    register_builtins(registry)
    return registry
