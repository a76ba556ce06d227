"""Render outline templates for topics that are not AI generated."""

import datetime as dt
import json
from typing import Any, Dict, List

from docgen.models import Job


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    return str(value)


def render_front_matter(front_matter: Dict[str, Any]) -> str:
    """Serialize front matter between ``---`` lines, keeping key order."""
    lines: List[str] = ["---"]
    for key, value in front_matter.items():
        lines.append(f"{key}: {_format_value(value)}")
    lines.append("---")
    return "\n".join(lines) + "\n"


def render_outline(job: Job) -> str:
    """Render a deterministic outline document for ``job``.

    Args:
        job: Planned job whose front matter has already been resolved.

    Returns:
        Markdown with front matter, a title heading, the outline marker and
        one heading per sub-section declared by the job's section.
    """
    topic = job.topic
    lines: List[str] = [
        render_front_matter(topic.front_matter),
        f"# {topic.title}",
        "",
        f"*This is an outline template for {topic.filename}*",
        "",
    ]

    if job.section is not None and job.section.topic_sections:
        for name in job.section.topic_sections:
            lines.append(f"## {name}")
            lines.append("")
            lines.append(f"*Add content for {name} here*")
            lines.append("")

    return "\n".join(lines)
