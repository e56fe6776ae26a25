"""
Field error aggregation for vouch.

A FieldErrors value maps field names to the ordered messages reported
against them. It is immutable; merging always builds a new value.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class FieldErrors(Mapping[str, tuple[str, ...]]):
    """
    Immutable mapping of field name -> ordered error messages.

    Invariants:
        - every field present has at least one message
        - message order is insertion order, extended (never reordered) on merge

    Messages are stored as tuples. Equality against any other mapping
    compares message sequences, so `FieldErrors.create("f", ["a"]) == {"f": ["a"]}`.

    Usage:
        e1 = FieldErrors.create("age", ["'age' must be positive"])
        e2 = FieldErrors.create("name", ["'name' must not be empty"])
        both = e1.merge(e2)          # or e1 + e2
        both.to_map()                # {"age": [...], "name": [...]}
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: Mapping[str, Iterable[str]] | None = None) -> None:
        self._errors: dict[str, tuple[str, ...]] = {}
        for field, messages in (errors or {}).items():
            if isinstance(messages, str):
                raise TypeError(
                    f"Messages for {field!r} must be a list of strings, not a single str"
                )
            messages = tuple(messages)
            if messages:
                self._errors[field] = messages

    @classmethod
    def create(cls, field: str, messages: Iterable[str]) -> FieldErrors:
        """Errors for a single field. An empty message list yields empty()."""
        return cls({field: messages})

    @classmethod
    def empty(cls) -> FieldErrors:
        """The identity for merge."""
        return cls()

    @classmethod
    def collect(cls, errors: Iterable[FieldErrors]) -> FieldErrors:
        """Left fold of merge over errors, preserving their order."""
        combined: dict[str, tuple[str, ...]] = {}
        for e in errors:
            for field, messages in e._errors.items():
                combined[field] = combined.get(field, ()) + messages
        return cls(combined)

    def merge(self, other: FieldErrors) -> FieldErrors:
        """Key union; shared fields concatenate as self[k] + other[k]."""
        return FieldErrors.collect((self, other))

    def __add__(self, other: object) -> FieldErrors:
        if not isinstance(other, FieldErrors):
            return NotImplemented
        return self.merge(other)

    def to_map(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def to_list(self) -> list[str]:
        """All messages, field by field in insertion order."""
        return [m for messages in self._errors.values() for m in messages]

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._errors)

    def messages_for(self, field: str) -> list[str]:
        return list(self._errors.get(field, ()))

    def __getitem__(self, field: str) -> tuple[str, ...]:
        return self._errors[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldErrors):
            return self._errors == other._errors
        if isinstance(other, Mapping):
            return self._errors == {
                field: (messages,) if isinstance(messages, str) else tuple(messages)
                for field, messages in other.items()
            }
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._errors.items()))

    def __repr__(self) -> str:
        return f"FieldErrors({self.to_map()!r})"


class ValidationFailed(Exception):
    """Raised when a Failure is unwrapped."""

    def __init__(self, errors: FieldErrors):
        self.errors = errors
        super().__init__("; ".join(errors.to_list()) or "validation failed")
