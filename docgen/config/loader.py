"""Load and validate the YAML content plan."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from docgen.errors import ConfigError
from docgen.models import DocSetConfig
from docgen.utils import get_logger, validate_config

logger = get_logger(__name__)


def _check_unique_filenames(config: DocSetConfig) -> None:
    groups = [("<root>", config.content.topics)]
    groups += [(section.directory, section.topics) for section in config.content.sections]

    seen = {}
    for directory, topics in groups:
        names = seen.setdefault(directory, set())
        for topic in topics:
            if topic.filename in names:
                raise ConfigError(f"duplicate filename {topic.filename!r} in {directory}")
            names.add(topic.filename)


def load_config(path: Union[str, Path]) -> DocSetConfig:
    """Read the content plan at ``path`` and return it as a ``DocSetConfig``.

    Raises:
        ConfigError: if the file is missing, is not well-formed YAML, does not
            match the config schema, or repeats a filename within a directory.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"config not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e

    try:
        cfg = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"config is not valid YAML: {e}") from e

    if not isinstance(cfg, dict):
        raise ConfigError(f"config must be a mapping, got {type(cfg).__name__}")

    validate_config(cfg)

    try:
        config = DocSetConfig.model_validate(cfg)
    except ValidationError as e:
        raise ConfigError(f"Config validation error: {e}") from e

    _check_unique_filenames(config)
    logger.info(
        "config loaded path=%s root_topics=%d sections=%d",
        path,
        len(config.content.topics),
        len(config.content.sections),
    )
    return config
