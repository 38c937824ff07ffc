from __future__ import annotations

"""Programmer-facing errors raised by the Hangul domain layer."""


class UnknownJamo(ValueError):
    """Raised when a symbol is not a member of the alphabet it was looked up in."""

    def __init__(self, jamo: object, alphabet: str) -> None:
        super().__init__("Unknown %s jamo: %r" % (alphabet, jamo))
        self.jamo = jamo
        self.alphabet = alphabet


class InternalInvariantViolation(RuntimeError):
    """Raised when the jamo tables or the composer state are inconsistent."""
