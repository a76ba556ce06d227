"""Generate a Markdown documentation set from a YAML content plan and an OpenAPI document."""

__version__ = "0.1.0"
