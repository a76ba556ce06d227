import os
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "_logs"))

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from docgen.models import DocSetConfig, GenerationMode, Job, OpenApiIndex, Section, Topic


def test_topic_properties_from_front_matter():
    topic = Topic.model_validate(
        {
            "filename": "a.md",
            "frontMatter": {"title": "A", "description": None, "api_endpoints": "/tasks"},
        }
    )
    assert topic.title == "A"
    assert topic.description == ""
    assert topic.api_endpoints == ["/tasks"]
    assert topic.ai_generated is True


def test_front_matter_keeps_insertion_order():
    topic = Topic.model_validate({"filename": "a.md", "frontMatter": {"z": 1, "a": 2, "m": 3}})
    assert list(topic.front_matter) == ["z", "a", "m"]


def test_job_mode_and_output_path():
    job = Job(
        topic=Topic(filename="x.md", front_matter={"ai-generated": False}),
        output_dir=Path("docs/guides"),
        section=Section(directory="guides"),
        identity="guides/x.md",
    )
    assert job.mode is GenerationMode.TEMPLATED
    assert job.output_path == Path("docs/guides/x.md")


def test_config_requires_global_block():
    with pytest.raises(ValidationError):
        DocSetConfig.model_validate({"content": {}})


def test_global_settings_keep_unknown_keys():
    config = DocSetConfig.model_validate({"global": {"apiSpec": "x", "siteName": "Docs"}})
    assert config.global_.model_extra == {"siteName": "Docs"}


def test_job_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        Job(topic=Topic(filename="x.md"), output_dir=Path("."), identity="x.md", extra=1)


def test_openapi_index_operations_returns_copy():
    index = OpenApiIndex(paths={"/a": [("GET", "Get a")]})
    ops = index.operations("/a")
    ops.append(("POST", ""))
    assert index.operations("/a") == [("GET", "Get a")]


@pytest.mark.parametrize(
    "value, declared",
    [([], True), (["/a"], True), ("/a", True), (None, False), ("", False)],
)
def test_declares_api_endpoints(value, declared):
    topic = Topic(filename="a.md", front_matter={"api_endpoints": value})
    assert topic.declares_api_endpoints is declared
    assert Topic(filename="a.md").declares_api_endpoints is False
