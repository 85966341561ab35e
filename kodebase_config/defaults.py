# Kodebase Default Configuration
# Zero-config baseline and YAML generator for presets

import yaml

from kodebase_config.presets import get_preset
from kodebase_config.schema import KodebaseConfig
from kodebase_config.validation import validate_config

_YAML_HEADER = """# Kodebase Configuration
# Preset: {preset}
#
# Post-merge strategies:
#   - cascade_pr: Open a PR for each cascade
#   - direct_commit: Commit cascades straight to the branch
#   - manual: Leave cascades to the user
#
# Cascade modes:
#   - immediate: Run cascades as soon as a merge is detected
#   - batched: Collect cascades and run them after batch_delay_seconds
#   - manual: Only run cascades on request
#
# Platforms: github, gitlab, bitbucket

"""


def get_default_config() -> KodebaseConfig:
    """Return a fresh copy of the baseline configuration.

    Every call builds a new object, so callers may modify the result freely.
    """
    return validate_config(get_preset("default"))


def generate_config_yaml(preset: str = "default") -> str:
    """Generate a preset as a YAML string with an explanatory header."""
    data = get_preset(preset)
    return _YAML_HEADER.format(preset=preset) + yaml.dump(
        data, default_flow_style=False, sort_keys=False, allow_unicode=True
    )
