from __future__ import annotations

import asyncio
import types
from pathlib import Path

import pytest

from application.bundle_runner import BundleRunner
from application.executor.sequential_initializer import SequentialInitializer
from application.hooks.callback_hook import CallbackHook
from application.hooks.hook_registry import HookRegistry
from application.services.harness_deps import HarnessDeps
from domain.exceptions import ArtifactLoadError, HookSignalError
from domain.run import RunContext
from tests.mock_logger import MockLogger


class FakeArtifactLoader:
    def __init__(self, module=None, error=None):
        self.module = module if module is not None else types.ModuleType("fake_bundle")
        self.error = error
        self.calls = []

    async def load(self, path, namespace=None):
        self.calls.append((path, dict(namespace or {})))
        if self.error is not None:
            raise self.error
        return self.module


class NoneArtifactLoader:
    async def load(self, path, namespace=None):
        return None


def failing_registry(order):
    def factory(name, fail=False):
        def build(logger):
            hook = CallbackHook(name=name, title=name, logger=logger)
            original = hook.init

            def init(callback):
                order.append(name)
                if fail:
                    raise RuntimeError(f"{name} failed")
                original(callback)

            hook.init = init
            return hook

        return build

    return HookRegistry({
        "A": factory("A"),
        "B": factory("B", fail=True),
        "C": factory("C"),
    })


def run(runner, loader, logger=None, ctx=None):
    deps = HarnessDeps(logger=logger or MockLogger(), artifact_loader=loader)
    return asyncio.run(runner.run_tests(Path("/bundles/main.py"), deps, ctx))


def test_run_tests_initializes_hooks_then_loads_bundle() -> None:
    logger = MockLogger()
    loader = FakeArtifactLoader()
    runner = BundleRunner(HookRegistry.default(), SequentialInitializer(), environment={"module_kind": "esm"})
    ctx = RunContext()

    result = run(runner, loader, logger, ctx)

    assert result is True
    assert ctx.completed_steps == ["com", "test_bridge", "test_adapter", "test_runner"]
    assert ctx.module is loader.module
    assert ctx.bundle_path == Path("/bundles/main.py")

    path, namespace = loader.calls[0]
    assert path == Path("/bundles/main.py")
    assert namespace["harness_environment"] == {"module_kind": "esm"}
    assert sorted(namespace["harness_hooks"]) == ["com", "test_adapter", "test_bridge", "test_runner"]

    events = logger.events()
    assert events[0] == "bundle.path"
    assert events.index("init.completed") < events.index("bundle.loading")
    assert events[-1] == "bundle.loaded"


def test_step_failure_skips_later_hooks_and_bundle_load() -> None:
    order = []
    logger = MockLogger()
    loader = FakeArtifactLoader()
    runner = BundleRunner(failing_registry(order), SequentialInitializer(), hook_names=["A", "B", "C"])

    with pytest.raises(RuntimeError, match="B failed"):
        run(runner, loader, logger)

    assert order == ["A", "B"]
    assert loader.calls == []
    assert logger.records[-1]["event"] == "run.failed"
    assert logger.records[-1]["error"] == "B failed"


def test_artifact_failure_fails_run_after_successful_init() -> None:
    logger = MockLogger()
    loader = FakeArtifactLoader(error=ArtifactLoadError("/bundles/main.py", "file not found"))
    runner = BundleRunner(HookRegistry.default(), SequentialInitializer())
    ctx = RunContext()

    with pytest.raises(ArtifactLoadError, match="file not found"):
        run(runner, loader, logger, ctx)

    assert len(ctx.completed_steps) == 4
    assert ctx.module is None
    assert "run.failed" in logger.events("error")


def test_loader_returning_nothing_fails() -> None:
    runner = BundleRunner(HookRegistry.default(), SequentialInitializer())

    with pytest.raises(ArtifactLoadError, match="no module"):
        run(runner, NoneArtifactLoader())


def test_required_export_is_checked() -> None:
    runner = BundleRunner(HookRegistry.default(), SequentialInitializer(), required_export="main")

    with pytest.raises(ArtifactLoadError, match="missing export: main"):
        run(runner, FakeArtifactLoader())

    module = types.ModuleType("with_main")
    module.main = lambda: None
    assert run(runner, FakeArtifactLoader(module=module)) is True


def test_empty_hook_list_still_loads_bundle() -> None:
    loader = FakeArtifactLoader()
    runner = BundleRunner(HookRegistry.default(), SequentialInitializer(), hook_names=[])

    assert run(runner, loader) is True
    assert len(loader.calls) == 1


def test_hook_error_channel_fails_run_with_message() -> None:
    order = []

    def hook(name, signals_error=False):
        def build(logger):
            built = CallbackHook(name=name, title=name, logger=logger)

            def init(callback):
                order.append(name)
                if signals_error:
                    built.error("bridge handshake failed")
                callback()

            built.init = init
            return built

        return build

    registry = HookRegistry({
        "com": hook("com"),
        "test_bridge": hook("test_bridge", signals_error=True),
        "test_runner": hook("test_runner"),
    })
    logger = MockLogger()
    loader = FakeArtifactLoader()
    runner = BundleRunner(registry, SequentialInitializer(), hook_names=["com", "test_bridge", "test_runner"])

    with pytest.raises(HookSignalError) as excinfo:
        run(runner, loader, logger)

    assert excinfo.value.hook == "test_bridge"
    assert excinfo.value.message == "bridge handshake failed"
    assert str(excinfo.value) == "bridge handshake failed"
    assert order == ["com", "test_bridge"]
    assert loader.calls == []
    assert logger.events("error") == ["hook.error", "step.failed", "run.failed"]
