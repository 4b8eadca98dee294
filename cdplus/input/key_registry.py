"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

S = TypeVar("S")
R = TypeVar("R")


@dataclass(frozen=True)
class KeyComboBinding(Generic[S, R]):
    """Mapping from one or more key tokens to a single action."""

    combos: tuple[str, ...]
    handler: Callable[[S], R]


class KeyComboRegistry(Generic[S, R]):
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[S], R]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        return key

    def register_binding(self, binding: KeyComboBinding[S, R]) -> KeyComboRegistry[S, R]:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[S, R]) -> KeyComboRegistry[S, R]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str, subject: S) -> R | None:
        """Invoke the handler bound to ``key`` with ``subject``; ``None`` when unbound."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler(subject)
