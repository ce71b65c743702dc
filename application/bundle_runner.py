# application/bundle_runner.py
from __future__ import annotations

import uuid
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, Mapping, Optional, Sequence

from application.executor.sequential_initializer import SequentialInitializer
from application.hooks.hook_registry import DEFAULT_HOOK_NAMES, HookRegistry
from application.services.harness_deps import HarnessDeps
from domain.exceptions import ArtifactLoadError
from domain.run import RunContext


class BundleRunner:
    """Initialize the hooks in order, then load the test bundle and check it."""

    def __init__(
        self,
        registry: HookRegistry,
        initializer: SequentialInitializer,
        hook_names: Sequence[str] = DEFAULT_HOOK_NAMES,
        required_export: Optional[str] = None,
        environment: Optional[Mapping[str, Any]] = None,
    ):
        self._registry = registry
        self._initializer = initializer
        self._hook_names = tuple(hook_names)
        self._required_export = required_export
        self._environment: Dict[str, Any] = dict(environment or {})

    async def run_tests(
        self,
        bundle_path: Path,
        deps: HarnessDeps,
        ctx: Optional[RunContext] = None,
    ) -> bool:
        ctx = ctx or RunContext()
        if not ctx.run_id:
            ctx.run_id = uuid.uuid4().hex
        ctx.bundle_path = bundle_path

        deps = deps.with_logger(deps.logger.bind(run_id=ctx.run_id))
        logger = deps.logger
        logger.info("bundle.path", path=str(bundle_path))

        try:
            # fresh hooks every run; nothing carries over between runs
            hooks = self._registry.build(self._hook_names, logger)
            logger.info("init.start", hooks=[h.name for h in hooks])
            await self._initializer.run([h.as_step() for h in hooks], ctx, deps)

            logger.info("bundle.loading", path=str(bundle_path))
            module = await deps.artifact_loader.load(
                bundle_path,
                namespace={
                    "harness_environment": dict(self._environment),
                    "harness_hooks": {h.name: h for h in hooks},
                },
            )
            self._check_module(module, bundle_path)
            ctx.module = module
            logger.info("bundle.loaded", path=str(bundle_path), module=module.__name__)
            return True
        except Exception as exc:
            logger.error("run.failed", error=str(exc), error_type=type(exc).__name__)
            raise

    def _check_module(self, module: Optional[ModuleType], bundle_path: Path) -> None:
        if module is None:
            raise ArtifactLoadError(str(bundle_path), "loader returned no module")
        if self._required_export and not hasattr(module, self._required_export):
            raise ArtifactLoadError(
                str(bundle_path),
                f"missing export: {self._required_export}",
            )
