"""Compile the content plan into an ordered list of jobs.

Ordering: root topics in config order, then each section in config order with
its topics in config order. Placeholders are resolved on copies of the topics,
so compiling the same config twice yields the same jobs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from docgen.config.constants import DATE_PLACEHOLDER, POSITION_PLACEHOLDER
from docgen.models import DocSetConfig, Job, Section, Topic
from docgen.settings import RunSettings
from docgen.utils import get_logger, today_iso

logger = get_logger(__name__)


def resolve_position(front_matter: Dict[str, Any], position: int) -> Dict[str, Any]:
    """Replace every value that is exactly the position placeholder with ``position``."""
    return {
        key: position if value == POSITION_PLACEHOLDER else value
        for key, value in front_matter.items()
    }


def resolve_date(front_matter: Dict[str, Any], today: str) -> Dict[str, Any]:
    """Substitute the first date placeholder of each string value.

    One pass replaces one occurrence: a value holding the marker twice keeps
    the second copy.
    """
    return {
        key: value.replace(DATE_PLACEHOLDER, today, 1) if isinstance(value, str) else value
        for key, value in front_matter.items()
    }


def _make_job(
    topic: Topic,
    output_dir: Path,
    identity: str,
    today: str,
    section: Optional[Section] = None,
    position: Optional[int] = None,
) -> Job:
    front_matter = dict(topic.front_matter)
    if position is not None:
        front_matter = resolve_position(front_matter, position)
    front_matter = resolve_date(front_matter, today)
    resolved = topic.model_copy(update={"front_matter": front_matter})
    return Job(topic=resolved, output_dir=output_dir, section=section, identity=identity)


def compile_plan(config: DocSetConfig, settings: RunSettings, today: Optional[str] = None) -> List[Job]:
    """Expand ``config`` into the jobs to run, honouring test-mode filtering."""
    today = today or today_iso()
    root = Path(settings.output_dir)
    jobs: List[Job] = []

    root_topics = [t for t in config.content.topics if settings.is_selected(t.filename)]
    logger.info("Generating %d root topics...", len(root_topics))
    for topic in root_topics:
        jobs.append(_make_job(topic, root, topic.filename, today))

    for section in config.content.sections:
        section_dir = root / section.directory
        planned = 0
        for index, topic in enumerate(section.topics):
            identity = f"{section.directory}/{topic.filename}"
            if not settings.is_selected(identity):
                continue
            jobs.append(_make_job(topic, section_dir, identity, today, section=section, position=index + 1))
            planned += 1
        logger.info("Generating %d topics for section: %s...", planned, section.title or section.directory)

    return jobs
