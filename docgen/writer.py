"""Create the output tree and persist produced files."""

from __future__ import annotations

from pathlib import Path

from docgen.errors import WriteError
from docgen.models import DocSetConfig, Job
from docgen.utils import get_logger

logger = get_logger(__name__)


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"cannot create directory {path}: {e}") from e


def create_directory_structure(config: DocSetConfig, output_dir: Path) -> None:
    """Create the output root and every section directory, filtered or not."""
    output_dir = Path(output_dir)
    _mkdir(output_dir)
    for section in config.content.sections:
        _mkdir(output_dir / section.directory)


def write_job(job: Job, content: str) -> Path:
    """Write ``content`` for ``job``, replacing any existing file."""
    _mkdir(job.output_dir)
    path = job.output_path
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"cannot write {path}: {e}") from e
    logger.info("File written: %s", path)
    return path
