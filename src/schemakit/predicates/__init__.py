# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .builtins import BUILTIN_PREDICATES, register_builtins
from .registry import PredicateEntry, PredicateRegistry, get_default_registry

__all__ = (
    "BUILTIN_PREDICATES",
    "PredicateEntry",
    "PredicateRegistry",
    "get_default_registry",
    "register_builtins",
)
