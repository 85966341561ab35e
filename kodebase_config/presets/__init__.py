# Kodebase Configuration Presets
# Named, fully specified configurations for different team sizes

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from kodebase_config.presets.default import DEFAULT_PRESET
from kodebase_config.presets.enterprise import ENTERPRISE_PRESET
from kodebase_config.presets.small_team import SMALL_TEAM_PRESET
from kodebase_config.presets.solo import SOLO_PRESET
from kodebase_config.utils.frozen import thaw

PRESETS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        "solo": SOLO_PRESET,
        "small_team": SMALL_TEAM_PRESET,
        "enterprise": ENTERPRISE_PRESET,
        "default": DEFAULT_PRESET,
    }
)

PRESET_DESCRIPTIONS: dict[str, str] = {
    "solo": "Direct commits, no draft PRs, non-blocking hooks, relaxed validation",
    "small_team": "Auto-merging cascade PRs, draft PRs, schema and state-machine checks",
    "enterprise": "Manual-approval cascade PRs, blocking hooks, strict validation, batched cascades",
    "default": "Baseline configuration used when no settings file exists",
}


def list_presets() -> list[str]:
    """Return the available preset names."""
    return list(PRESETS)


def get_preset(name: str) -> dict[str, Any]:
    """
    Get a private copy of a named preset.

    Args:
        name: Preset name (solo, small_team, enterprise, default).

    Returns:
        Plain dict copy of the read-only preset, safe to modify.

    Raises:
        KeyError: If the preset doesn't exist.
    """
    if name not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available presets: {', '.join(PRESETS)}")
    return thaw(PRESETS[name])


__all__ = [
    "PRESETS",
    "PRESET_DESCRIPTIONS",
    "DEFAULT_PRESET",
    "SOLO_PRESET",
    "SMALL_TEAM_PRESET",
    "ENTERPRISE_PRESET",
    "get_preset",
    "list_presets",
]
