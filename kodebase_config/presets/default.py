# Kodebase Default Preset
# Baseline configuration used when no settings file exists

from collections.abc import Mapping
from typing import Any

from kodebase_config.utils.frozen import freeze

DEFAULT_PRESET: Mapping[str, Any] = freeze(
    {
        "version": "1.0",
        "artifactsDir": ".kodebase/artifacts",
        "gitOps": {
            "post_merge": {
                "strategy": "cascade_pr",
            },
            "post_checkout": {
                "create_draft_pr": True,
            },
            "hooks": {
                "enabled": True,
                "non_blocking": True,
            },
            "platform": {
                "type": "github",
                "auth_strategy": "auto",
            },
        },
    }
)
