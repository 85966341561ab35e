# Kodebase Small Team Preset
# Balanced workflow for 2-10 developers: cascade PRs that auto-merge once
# checks pass, draft PRs with labels and assignment, schema and state-machine
# checks before commit.

from collections.abc import Mapping
from typing import Any

from kodebase_config.utils.frozen import freeze

SMALL_TEAM_PRESET: Mapping[str, Any] = freeze(
    {
        "version": "1.0",
        "artifactsDir": ".kodebase/artifacts",
        "gitOps": {
            "post_merge": {
                "strategy": "cascade_pr",
                "cascade_pr": {
                    "auto_merge": True,
                    "require_checks": True,
                    "labels": ["cascade", "automated"],
                    "branch_prefix": "cascade/",
                    "delete_branch": True,
                },
            },
            "post_checkout": {
                "create_draft_pr": True,
                "pr_template": "default",
                "auto_assign": True,
                "auto_add_labels": True,
                "notify_team": False,
            },
            "hooks": {
                "enabled": True,
                "non_blocking": True,
                "log_errors": True,
                "log_level": "info",
                "pre_commit": {
                    "enabled": True,
                    "validate_schema": True,
                    "validate_state_machine": True,
                    "validate_dependencies": False,
                },
                "pre_push": {
                    "enabled": True,
                    "warn_wip_artifacts": True,
                    "warn_non_artifact_branches": False,
                },
            },
            "platform": {
                "type": "github",
                "auth_strategy": "auto",
            },
            "pr_creation": {
                "auto_assign": True,
                "auto_add_labels": True,
                "auto_request_reviewers": False,
                "link_milestone": True,
                "add_to_project": False,
            },
            "cascades": {
                "mode": "immediate",
                "parallel_execution": True,
                "max_parallelism": 3,
                "dry_run": False,
                "require_confirmation": False,
            },
            "validation": {
                "enforce_schema": True,
                "enforce_state_machine": True,
                "enforce_dependencies": False,
                "warn_missing_fields": True,
                "error_on_warnings": False,
                "allow_wip_commits": True,
                "allow_cross_milestone_deps": False,
            },
            "branches": {
                "delete_after_merge": True,
                "delete_cascade_branches": True,
                "require_pr_for_main": True,
            },
            "commits": {
                "format": "conventional",
                "conventional": {
                    "type_prefix": "feat",
                    "breaking_change_marker": "!",
                },
                "add_coauthor": True,
            },
        },
    }
)
