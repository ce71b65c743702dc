#!/usr/bin/env python3
"""
Test bundle harness

Runs the initialization hooks in order, then loads the built test bundle.
Exits 0 when the bundle loaded, 1 on any failure.

Usage:
  python scripts/run_harness.py [--config <path>] [--bundle <path>]
                                [--step-timeout <sec>] [--log-level <level>]

Examples:
  python scripts/run_harness.py
  python scripts/run_harness.py --config harness.yaml
  python scripts/run_harness.py --bundle dist/main.py --step-timeout 30
"""
from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

from application.bundle_runner import BundleRunner
from application.executor.sequential_initializer import SequentialInitializer
from application.hooks.hook_registry import HookRegistry
from application.services.harness_deps import HarnessDeps
from infrastructure.artifact.module_file_loader import ModuleFileArtifactLoader
from infrastructure.config.file_finder import ConfigFileFinder
from infrastructure.config.harness_config import HarnessConfig
from infrastructure.config.loader_registry import ConfigLoaderRegistry
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging


ADAPTER_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_NAME = "harness"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Initialize the test environment and load the test bundle")
    parser.add_argument("--config", type=str, default=os.environ.get("HARNESS_CONFIG"))
    parser.add_argument("--bundle", type=str)
    parser.add_argument("--step-timeout", type=float)
    parser.add_argument("--log-level", type=str, default=os.environ.get("HARNESS_LOG_LEVEL"))
    return parser


def load_config(config_path: str | None) -> Tuple[HarnessConfig, Path]:
    """Return the config and the directory its relative paths resolve against."""
    if config_path:
        path = Path(config_path)
    else:
        path = ConfigFileFinder(ADAPTER_ROOT).find_by_name(DEFAULT_CONFIG_NAME)
        if path is None:
            return HarnessConfig(), ADAPTER_ROOT

    loader = ConfigLoaderRegistry().get_loader(path)
    return loader.load_from_file(path), path.resolve().parent


def _apply_overrides(config: HarnessConfig, args: argparse.Namespace) -> HarnessConfig:
    updates = {}
    if args.bundle:
        updates["bundle_path"] = str(Path(args.bundle).resolve())
    if args.step_timeout is not None:
        if args.step_timeout <= 0:
            raise ValueError(f"--step-timeout must be positive: {args.step_timeout}")
        updates["step_timeout_sec"] = args.step_timeout
    if args.log_level:
        updates["log_level"] = args.log_level.upper()
    return config.model_copy(update=updates) if updates else config


def build_runner(config: HarnessConfig) -> BundleRunner:
    return BundleRunner(
        registry=HookRegistry.default(),
        initializer=SequentialInitializer(step_timeout_sec=config.step_timeout_sec),
        hook_names=config.hooks,
        required_export=config.required_export,
        environment=config.environment,
    )


def build_deps() -> HarnessDeps:
    return HarnessDeps(
        logger=ConsoleLogger(),
        artifact_loader=ModuleFileArtifactLoader(),
    )


async def run_tests(config: HarnessConfig, base_dir: Path = ADAPTER_ROOT) -> bool:
    runner = build_runner(config)
    return await runner.run_tests(config.resolve_bundle_path(base_dir), build_deps())


def main() -> None:
    args = _build_parser().parse_args()

    try:
        config, base_dir = load_config(args.config)
        config = _apply_overrides(config, args)
        setup_console_logging(level=config.log_level)

        print(f"Bundle: {config.resolve_bundle_path(base_dir)}")
        print(f"Hooks: {', '.join(config.hooks)}")
        print("\n=== Running ===\n")
        ok = asyncio.run(run_tests(config, base_dir))
    except Exception as exc:
        print(f"ERROR: Test execution failed: {exc}", file=sys.stderr)
        sys.exit(1)

    print("\n=== Result ===")
    print(f"Success: {ok}")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
