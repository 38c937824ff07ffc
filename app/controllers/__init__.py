"""
Controller package exports.

This file exists to make controller modules discoverable to static analysis
and to provide a stable import surface.
"""

from .keyboard_session import KeyboardSession  # noqa: F401

__all__ = [
    "KeyboardSession",
]
