# ifthen/core/validate/scope.py
"""
Error Scope: transactional view over a model's error state.

On enter the current errors are snapshotted and cleared, so validators run
against a private, empty error collection. On exit:
- discard() was called: the snapshot is restored exactly
- an exception escaped: the snapshot is restored exactly
- otherwise (commit): the snapshot is merged back into the new errors

Usage:
    with ErrorScope(model) as scope:
        validator.validate(model)
        if model.has_errors("type"):
            scope.discard()
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .model import ErrorHost


def union_errors(
    base: Dict[str, List[str]],
    extra: Dict[str, List[str]],
) -> Dict[str, List[str]]:
    """
    Union of two error mappings.

    Messages of `base` come first; messages of `extra` are appended unless the
    attribute already carries the same message.
    """
    merged = {k: list(v) for k, v in base.items()}
    for attribute, messages in extra.items():
        bucket = merged.setdefault(attribute, [])
        for message in messages:
            if message not in bucket:
                bucket.append(message)
    return {k: v for k, v in merged.items() if v}


class ErrorScope:
    """Snapshot / restore / merge primitive for one validation pass"""

    def __init__(self, model: ErrorHost):
        self.model = model
        self.snapshot: Optional[Dict[str, List[str]]] = None
        self._discarded = False

    @property
    def discarded(self) -> bool:
        return self._discarded

    def __enter__(self) -> "ErrorScope":
        self.snapshot = {
            k: list(v) for k, v in self.model.get_errors().items()
        }
        self.model.clear_errors()
        return self

    def discard(self) -> None:
        """Throw away everything recorded inside the scope"""
        self._discarded = True

    def __exit__(self, exc_type, exc, tb) -> None:
        snapshot = self.snapshot or {}
        if self._discarded or exc_type is not None:
            self.model.clear_errors()
            self.model.add_errors(snapshot)
            return None

        current = self.model.get_errors()
        self.model.clear_errors()
        self.model.add_errors(union_errors(snapshot, current))
        return None


__all__ = ["ErrorScope", "union_errors"]
