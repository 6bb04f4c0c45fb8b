from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping

from spring_animation.constants import DEFAULT_EPSILON
from spring_animation.physics.spring import SpringConfig


class SpringPresetRegistry:
    """In-memory collection of named spring configurations."""

    def __init__(self) -> None:
        self._presets: dict[str, SpringConfig] = {}

    def register(self, name: str, config: SpringConfig, *, replace: bool = False) -> None:
        if name in self._presets and not replace:
            raise ValueError(f"Spring preset '{name}' already registered")
        self._presets[name] = config

    def get(self, name: str) -> SpringConfig:
        try:
            return self._presets[name]
        except KeyError as exc:
            raise KeyError(f"Spring preset '{name}' is not registered") from exc

    def has(self, name: str) -> bool:
        return name in self._presets

    def names(self) -> Iterable[str]:
        return tuple(self._presets)


default_preset_registry = SpringPresetRegistry()


def ensure_default_presets_registered(registry: SpringPresetRegistry | None = None) -> None:
    target = registry or default_preset_registry
    defaults = {
        "smooth": SpringConfig(),
        "snappy": SpringConfig(duration=0.5, damping_ratio=0.85),
        "bouncy": SpringConfig(duration=0.5, damping_ratio=0.7),
    }
    for name, config in defaults.items():
        if not target.has(name):
            target.register(name, config)


def spring_config_from_mapping(data: Mapping[str, object]) -> SpringConfig:
    """Build a ``SpringConfig`` from either response or coefficient keys."""
    epsilon = data.get("epsilon", DEFAULT_EPSILON)
    if "stiffness" in data:
        return SpringConfig.from_coefficients(
            stiffness=data["stiffness"],
            damping=data.get("damping", 0.0),
            epsilon=epsilon,
        )
    defaults = SpringConfig()
    return SpringConfig(
        duration=data.get("duration", defaults.duration),
        damping_ratio=data.get("damping_ratio", defaults.damping_ratio),
        epsilon=epsilon,
    )


def load_spring_presets(
    path: str | Path,
    registry: SpringPresetRegistry | None = None,
) -> list[str]:
    """Register every preset described in a JSON file and return their names.

    The file maps preset names to objects holding ``duration``,
    ``damping_ratio`` and ``epsilon`` (or ``stiffness``/``damping``). Entries
    replace presets already registered under the same name.
    """
    target = registry or default_preset_registry
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Spring preset file {path} must contain a JSON object")
    loaded: list[str] = []
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Spring preset '{name}' must be a JSON object")
        target.register(name, spring_config_from_mapping(entry), replace=True)
        loaded.append(name)
    return loaded


ensure_default_presets_registered()
