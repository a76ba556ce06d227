"""Error kinds raised by the documentation generator."""


class DocGenError(Exception):
    """Base class for every failure that aborts a generation run."""


class ConfigError(DocGenError):
    """Content plan is missing or malformed."""


class SpecError(DocGenError):
    """OpenAPI document is unreachable or invalid."""


class GenerationError(DocGenError):
    """Text generation failed or returned nothing usable."""


class WriteError(DocGenError):
    """Filesystem failure while creating directories or writing files."""
