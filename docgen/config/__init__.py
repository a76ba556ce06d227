"""Content plan loading and defaults."""
