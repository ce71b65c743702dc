# infrastructure/config/harness_config.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from application.hooks.hook_registry import DEFAULT_HOOK_NAMES

DEFAULT_BUNDLE_PATH = "dist/main.py"


class HarnessConfig(BaseModel):
    """Harness settings, read from harness.yaml / harness.json"""
    bundle_path: str = Field(
        default=DEFAULT_BUNDLE_PATH,
        description="Built test bundle; relative paths resolve against the config directory",
    )
    hooks: List[str] = Field(
        default_factory=lambda: list(DEFAULT_HOOK_NAMES),
        description="Hook names in initialization order",
    )
    step_timeout_sec: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-step wait limit. None waits indefinitely.",
    )
    required_export: Optional[str] = Field(
        default=None,
        description="Attribute the loaded bundle must define",
    )
    environment: Dict[str, Any] = Field(
        default_factory=dict,
        description="Published to the bundle as harness_environment",
    )
    log_level: str = Field(default="INFO")

    def resolve_bundle_path(self, base_dir: Path) -> Path:
        path = Path(self.bundle_path)
        if path.is_absolute():
            return path
        return (base_dir / path).resolve()
