from infrastructure.config.base_loader import ConfigLoaderBase
from infrastructure.config.file_finder import ConfigFileFinder
from infrastructure.config.harness_config import DEFAULT_BUNDLE_PATH, HarnessConfig
from infrastructure.config.json_loader import JsonConfigLoader
from infrastructure.config.loader_registry import ConfigLoaderRegistry
from infrastructure.config.yaml_loader import YamlConfigLoader

__all__ = [
    "ConfigFileFinder",
    "ConfigLoaderBase",
    "ConfigLoaderRegistry",
    "DEFAULT_BUNDLE_PATH",
    "HarnessConfig",
    "JsonConfigLoader",
    "YamlConfigLoader",
]
