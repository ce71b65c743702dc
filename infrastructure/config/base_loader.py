# infrastructure/config/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from domain.exceptions import ConfigLoadError
from infrastructure.config.harness_config import HarnessConfig


class ConfigLoaderBase(ABC):
    def load_from_file(self, path: Path) -> HarnessConfig:
        p = Path(path)
        if not p.is_file():
            raise ConfigLoadError(f"Config file not found: {path}")

        data = self._load_file(p)

        if data is None:
            raise ConfigLoadError(f"Config file is empty: {path}")
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config file is invalid: {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> HarnessConfig:
        try:
            return HarnessConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid harness config: {exc}") from exc

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
