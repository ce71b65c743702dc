# application/ports/artifact_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping, Optional


class ArtifactLoaderPort(ABC):
    @abstractmethod
    async def load(
        self,
        path: Path,
        namespace: Optional[Mapping[str, Any]] = None,
    ) -> ModuleType:
        """
        Load the built bundle at ``path`` and return the executed module.

        ``namespace`` entries are published as module globals before the
        bundle body runs. Raises ArtifactLoadError when the file is missing
        or cannot be executed.
        """
        ...
