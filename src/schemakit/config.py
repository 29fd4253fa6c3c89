# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("SchemaConfig",)


class SchemaConfig(BaseModel):
    """Per-schema settings for message rendering and compile-time checks.

    Usage:
        config = SchemaConfig(messages={"str?": "should be text"})
        schema = define(required("name", filled("str?")), config=config)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    messages: dict[str, str] = Field(
        default_factory=dict,
        description="Message template overrides keyed by predicate name",
    )
    or_separator: str = Field(
        default=" or ",
        description="Text placed between alternatives of a failed disjunction",
    )
    check_predicates: bool = Field(
        default=True,
        description="Resolve every predicate name against the registry when the schema is built",
    )
