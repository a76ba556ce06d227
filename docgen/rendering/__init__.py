"""Outline and prompt rendering."""
