
import time
import uuid
from pathlib import Path
from typing import List, Optional

from docgen.config.loader import load_config
from docgen.llm.adapters import ProviderGenerator
from docgen.llm.base import TextGenerator
from docgen.models import DocSetConfig
from docgen.openapi.fetcher import fetch_openapi_index
from docgen.planner import compile_plan
from docgen.producer import produce
from docgen.settings import RunSettings
from docgen.utils import get_logger
from docgen.writer import create_directory_structure, write_job

logger = get_logger(__name__)


def _default_generator(config: DocSetConfig, settings: RunSettings) -> TextGenerator:
    # RunSettings only carries the Anthropic credential; other providers read their own env vars
    api_key = settings.api_key if config.global_.ai_provider == "anthropic" else None
    return ProviderGenerator(config.global_, api_key=api_key)


def _execute_pipeline(config: DocSetConfig, settings: RunSettings, generator: Optional[TextGenerator]) -> List[Path]:
    """Fetch the API description, plan the jobs and produce them one at a time."""
    logger.info("Fetching OpenAPI specification...")
    t0 = time.monotonic()
    index = fetch_openapi_index(config.global_.api_spec)
    logger.info("fetched paths=%d took_ms=%d", len(index.paths), int((time.monotonic()-t0)*1000))

    logger.info("Creating directory structure...")
    create_directory_structure(config, settings.output_dir)

    logger.info("Generating documentation files...")
    jobs = compile_plan(config, settings)
    generator = generator or _default_generator(config, settings)

    written: List[Path] = []
    for job in jobs:
        logger.info("Generating file: %s mode=%s", job.identity, job.mode.value)
        t1 = time.monotonic()
        content = produce(job, config, index, generator)
        written.append(write_job(job, content))
        logger.info("done file=%s took_ms=%d", job.identity, int((time.monotonic()-t1)*1000))
    return written


def run_once(settings: RunSettings, generator: Optional[TextGenerator] = None) -> List[Path]:
    """Execute one generation run and return the written file paths."""
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s ===", run_id)
    logger.info("Running in %s", settings.mode_label)

    try:
        logger.info("Loading configuration...")
        config = load_config(settings.config_path)
        written = _execute_pipeline(config, settings, generator)
        logger.info("Documentation generation complete! files=%d", len(written))
        return written
    except Exception as e:
        logger.error("Error in documentation generation: %s", e)
        raise
    finally:
        logger.info("=== run end id=%s ===", run_id)
