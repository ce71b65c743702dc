# infrastructure/config/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from domain.exceptions import ConfigLoadError
from infrastructure.config.base_loader import ConfigLoaderBase


class JsonConfigLoader(ConfigLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            try:
                return json.load(handle)
            except json.JSONDecodeError as exc:
                raise ConfigLoadError(f"Config file is not valid JSON: {path}: {exc}") from exc
