# Kodebase Solo Preset
# Fast, low-ceremony workflow for a single developer:
# direct commits pushed immediately, no draft PRs, non-blocking hooks,
# relaxed validation.

from collections.abc import Mapping
from typing import Any

from kodebase_config.utils.frozen import freeze

SOLO_PRESET: Mapping[str, Any] = freeze(
    {
        "version": "1.0",
        "artifactsDir": ".kodebase/artifacts",
        "gitOps": {
            "post_merge": {
                "strategy": "direct_commit",
                "direct_commit": {
                    "commit_prefix": "chore(cascade): ",
                    "push_immediately": True,
                },
            },
            "post_checkout": {
                "create_draft_pr": False,
                "auto_assign": False,
                "auto_add_labels": False,
                "notify_team": False,
            },
            "hooks": {
                "enabled": True,
                "non_blocking": True,
                "log_errors": True,
                "log_level": "warn",
            },
            "platform": {
                "type": "github",
                "auth_strategy": "auto",
            },
            "cascades": {
                "mode": "immediate",
                "parallel_execution": True,
                "max_parallelism": 5,
                "dry_run": False,
                "require_confirmation": False,
            },
            "validation": {
                "enforce_schema": True,
                "enforce_state_machine": False,
                "enforce_dependencies": False,
                "warn_missing_fields": False,
                "error_on_warnings": False,
                "allow_wip_commits": True,
                "allow_cross_milestone_deps": True,
            },
            "branches": {
                "delete_after_merge": True,
                "delete_cascade_branches": True,
                "require_pr_for_main": False,
            },
            "commits": {
                "format": "simple",
                "add_coauthor": False,
            },
        },
    }
)
