# docgen/rendering/prompt_loader.py
import os
import yaml
from jinja2 import Environment

from docgen.models import Job, OpenApiIndex

DEFAULT_PROMPT_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "prompts", "file_prompt.yaml")


def render_prompt(prompt_file: str, **context) -> str:
    with open(prompt_file, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
    task_t = env.from_string(data.get("task", ""))
    return task_t.render(**context).strip() + "\n"


def build_prompt(job: Job, base_prompt: str, index: OpenApiIndex, prompt_file: str = DEFAULT_PROMPT_FILE) -> str:
    endpoints = [
        {"path": path, "operations": index.operations(path)}
        for path in job.topic.api_endpoints
    ]
    return render_prompt(
        prompt_file,
        base_prompt=(base_prompt or "").rstrip(),
        topic=job.topic,
        section=job.section,
        endpoints=endpoints,
    )
