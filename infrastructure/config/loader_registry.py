# infrastructure/config/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from domain.exceptions import ConfigLoadError
from infrastructure.config.base_loader import ConfigLoaderBase
from infrastructure.config.json_loader import JsonConfigLoader
from infrastructure.config.yaml_loader import YamlConfigLoader


class ConfigLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, ConfigLoaderBase] = {
            ".yaml": YamlConfigLoader(),
            ".yml": YamlConfigLoader(),
            ".json": JsonConfigLoader(),
        }

    def get_loader(self, path: Path) -> ConfigLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ConfigLoadError(f"Unsupported config format: {ext}")
        return loader
