# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .rules.synthesizer import OR_KEY

__all__ = ("Result",)


class Result(BaseModel):
    """Outcome of one schema call, owned by the caller.

    ``errors`` is empty on success. On failure it is either a list of
    messages (the input itself failed, e.g. not a hash) or a dict keyed by
    field name, element index or ``"or"``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    input: Any = None
    errors: list[str] | dict[Any, Any] = Field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def failure(self) -> bool:
        return not self.success

    def messages(self) -> list[tuple[tuple[Any, ...], str]]:
        """Flatten errors into ``(path, message)`` pairs in evaluation order.

        Alternatives contribute ``("or", position)`` to the path.
        """
        flat: list[tuple[tuple[Any, ...], str]] = []
        _flatten(self.errors, (), flat)
        return flat

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "errors": self.errors}

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return "Result(success=True)"
        return f"Result(success=False, errors={self.errors!r})"


def _flatten(tree: Any, path: tuple[Any, ...], out: list[tuple[tuple[Any, ...], str]]) -> None:
    if isinstance(tree, list):
        for msg in tree:
            out.append((path, msg))
        return
    for key, sub in tree.items():
        if key == OR_KEY and isinstance(sub, list) and all(isinstance(s, dict) for s in sub):
            for i, alt in enumerate(sub):
                _flatten(alt, (*path, OR_KEY, i), out)
        else:
            _flatten(sub, (*path, key), out)
