"""Process-level run settings, passed explicitly to the planner and producer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Optional

from docgen.config.constants import DEFAULT_CONFIG_PATH, DEFAULT_OUTPUT_DIR, DEFAULT_TOPICS_TO_TEST


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() == "true"


@dataclass(frozen=True)
class RunSettings:
    config_path: Path = Path(DEFAULT_CONFIG_PATH)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    test_mode: bool = False
    topics_to_test: frozenset = field(default_factory=lambda: frozenset(DEFAULT_TOPICS_TO_TEST))
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "RunSettings":
        return cls(
            config_path=Path(os.getenv("DOC_CONFIG_PATH", DEFAULT_CONFIG_PATH)),
            output_dir=Path(os.getenv("DOCS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            test_mode=_env_flag("TEST_MODE"),
            api_key=os.getenv("ANTHROPIC_API_KEY") or None,
        )

    def with_overrides(
        self,
        *,
        config_path: Optional[str] = None,
        output_dir: Optional[str] = None,
        test_mode: Optional[bool] = None,
        include: Optional[Iterable[str]] = None,
    ) -> "RunSettings":
        """Return a copy with every non-None override applied."""
        changes = {}
        if config_path is not None:
            changes["config_path"] = Path(config_path)
        if output_dir is not None:
            changes["output_dir"] = Path(output_dir)
        if test_mode is not None:
            changes["test_mode"] = test_mode
        if include:
            changes["topics_to_test"] = frozenset(include)
        return replace(self, **changes)

    @property
    def mode_label(self) -> str:
        return "TEST MODE" if self.test_mode else "FULL GENERATION MODE"

    def is_selected(self, identity: str) -> bool:
        return not self.test_mode or identity in self.topics_to_test
