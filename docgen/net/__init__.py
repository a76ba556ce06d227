"""Networking utilities for resilient HTTP access."""

from .http import get_text, retry_session

__all__ = ["get_text", "retry_session"]
