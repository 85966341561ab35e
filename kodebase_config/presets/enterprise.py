# Kodebase Enterprise Preset
# Strict controls for large teams: cascade PRs need human approval,
# every hook blocks, all validation is enforced and cascades run batched
# and sequentially.

from collections.abc import Mapping
from typing import Any

from kodebase_config.utils.frozen import freeze

ENTERPRISE_PRESET: Mapping[str, Any] = freeze(
    {
        "version": "1.0",
        "artifactsDir": ".kodebase/artifacts",
        "gitOps": {
            "post_merge": {
                "strategy": "cascade_pr",
                "cascade_pr": {
                    "auto_merge": False,
                    "require_checks": True,
                    "labels": ["cascade", "automated", "requires-review"],
                    "branch_prefix": "cascade/",
                    "delete_branch": True,
                },
            },
            "post_checkout": {
                "create_draft_pr": True,
                "pr_template": "default",
                "auto_assign": True,
                "auto_add_labels": True,
                "notify_team": True,
            },
            "hooks": {
                "enabled": True,
                "non_blocking": False,
                "log_errors": True,
                "log_level": "info",
                "pre_commit": {
                    "enabled": True,
                    "non_blocking": False,
                    "validate_schema": True,
                    "validate_state_machine": True,
                    "validate_dependencies": True,
                },
                "pre_push": {
                    "enabled": True,
                    "non_blocking": False,
                    "warn_wip_artifacts": True,
                    "warn_non_artifact_branches": True,
                },
            },
            "platform": {
                "type": "github",
                "auth_strategy": "auto",
            },
            "pr_creation": {
                "auto_assign": True,
                "auto_add_labels": True,
                "auto_request_reviewers": True,
                "link_milestone": True,
                "add_to_project": True,
            },
            "cascades": {
                "mode": "batched",
                "batch_delay_seconds": 60,
                "max_batch_size": 10,
                "parallel_execution": False,
                "max_parallelism": 1,
                "dry_run": False,
                "require_confirmation": True,
            },
            "validation": {
                "enforce_schema": True,
                "enforce_state_machine": True,
                "enforce_dependencies": True,
                "warn_missing_fields": True,
                "error_on_warnings": True,
                "allow_wip_commits": False,
                "allow_cross_milestone_deps": False,
                "warn_draft_artifacts": True,
                "warn_blocked_artifacts": True,
            },
            "branches": {
                "delete_after_merge": True,
                "delete_cascade_branches": True,
                "require_pr_for_main": True,
                "allowed_direct_branches": [],
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
