# application/services/harness_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace

from application.ports.artifact_loader import ArtifactLoaderPort
from application.ports.logger import LoggerPort


@dataclass(frozen=True)
class HarnessDeps:
    logger: LoggerPort
    artifact_loader: ArtifactLoaderPort

    def with_logger(self, logger: LoggerPort) -> "HarnessDeps":
        return replace(self, logger=logger)
