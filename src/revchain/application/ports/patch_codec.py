"""Patch codec port - reversible text deltas."""

from typing import Protocol


class Delta(Protocol):
    """Opaque edit script produced by a PatchCodec."""

    @property
    def is_empty(self) -> bool: ...


class PatchCodec(Protocol):
    """Port for computing, serializing, reversing and applying text deltas."""

    def diff(self, old_text: str, new_text: str) -> Delta: ...

    def to_patch(self, delta: Delta) -> bytes: ...

    def from_patch(self, blob: bytes) -> Delta: ...

    def reverse(self, delta: Delta) -> Delta: ...

    def apply(self, delta: Delta, text: str) -> str: ...
