"""Narrow text-generation capability used by the content producer."""

from __future__ import annotations

from typing import Protocol


class TextGenerator(Protocol):
    def generate(self, prompt: str, model: str) -> str:
        """Return generated text for ``prompt``; raise ``GenerationError`` on failure."""
        ...
