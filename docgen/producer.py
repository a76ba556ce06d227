from __future__ import annotations

from docgen.llm.base import TextGenerator
from docgen.models import DocSetConfig, GenerationMode, Job, OpenApiIndex
from docgen.rendering.outline import render_outline
from docgen.rendering.prompt_loader import build_prompt
from docgen.utils import get_logger

logger = get_logger(__name__)


def produce(job: Job, config: DocSetConfig, index: OpenApiIndex, generator: TextGenerator) -> str:
    """Return the file content for ``job``.

    Templated jobs never reach the generator; generated jobs return its text
    verbatim and let ``GenerationError`` propagate.
    """
    if job.mode is GenerationMode.TEMPLATED:
        logger.info("outline template file=%s", job.identity)
        return render_outline(job)

    prompt = build_prompt(job, config.global_.ai_prompt, index)
    return generator.generate(prompt, config.global_.ai_model)
