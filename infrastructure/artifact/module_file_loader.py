# infrastructure/artifact/module_file_loader.py
"""Load a built test bundle from a ``.py`` file path."""
from __future__ import annotations

import asyncio
import importlib.util
import sys
import uuid
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, Mapping, Optional

from application.ports.artifact_loader import ArtifactLoaderPort
from domain.exceptions import ArtifactLoadError


class ModuleFileArtifactLoader(ArtifactLoaderPort):
    def __init__(self, module_prefix: str = "harness_bundle"):
        self._module_prefix = module_prefix

    async def load(
        self,
        path: Path,
        namespace: Optional[Mapping[str, Any]] = None,
    ) -> ModuleType:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._load_sync, Path(path), dict(namespace or {}))

    def _load_sync(self, path: Path, namespace: Dict[str, Any]) -> ModuleType:
        if not path.is_file():
            raise ArtifactLoadError(str(path), "file not found")

        module_name = f"{self._module_prefix}_{uuid.uuid4().hex}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ArtifactLoadError(str(path), "not a loadable Python module")

        module = importlib.util.module_from_spec(spec)
        module.__dict__.update(namespace)
        # registered only while the body runs; repeated runs must not pile up entries
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise ArtifactLoadError(str(path), f"{type(exc).__name__}: {exc}") from exc
        finally:
            sys.modules.pop(module_name, None)
        return module
