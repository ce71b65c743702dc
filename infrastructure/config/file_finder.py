"""Find the harness config file next to the adapter."""
from pathlib import Path
from typing import Optional


class ConfigFileFinder:
    """Look up a config file by base name in a single directory."""

    PRIORITY = (".json", ".yaml", ".yml")

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def find_by_name(self, name: str) -> Optional[Path]:
        """
        Find ``<name>.json``, ``<name>.yaml`` or ``<name>.yml``.

        Returns:
            The first existing file in that order, otherwise None.
        """
        for ext in self.PRIORITY:
            candidate = self.base_dir / f"{name}{ext}"
            if candidate.is_file():
                return candidate
        return None
