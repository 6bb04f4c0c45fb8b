"""Command-line options for the demo window."""
from __future__ import annotations

import argparse

from spring_animation.config import SpringPresetRegistry, default_preset_registry, load_spring_presets


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spring animation demo")
    parser.add_argument("--preset", default="smooth", help="spring preset name")
    parser.add_argument("--presets-file", help="JSON file with extra spring presets")
    parser.add_argument("--debug", action="store_true", help="trace every animation step")
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def parse_args(argv=None, presets: SpringPresetRegistry | None = None) -> argparse.Namespace:
    """Parse ``argv`` and resolve ``--preset`` into ``args.config``.

    An unreadable presets file or an unknown preset name exits with a usage
    error listing the available presets.
    """
    registry = presets or default_preset_registry
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.presets_file:
        try:
            load_spring_presets(args.presets_file, registry)
        except (OSError, ValueError) as exc:
            parser.error(f"cannot load presets from {args.presets_file}: {exc}")
    if not registry.has(args.preset):
        parser.error(
            f"unknown preset '{args.preset}' (choose from: {', '.join(registry.names())})"
        )
    args.config = registry.get(args.preset)
    return args
