# domain/run.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import List, Optional


@dataclass
class RunContext:
    run_id: str = ""

    bundle_path: Optional[Path] = None
    completed_steps: List[str] = field(default_factory=list)
    module: Optional[ModuleType] = None
