# Kodebase Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum
from typing import Annotated, Any, Optional, TypeVar

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Reject strings that are not absolute URLs, keeping the original text."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Invalid url") from None
    return value


ApiUrl = Annotated[StrictStr, AfterValidator(_check_url)]

T = TypeVar("T")


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError("null_value", "Input should not be null")
    return value


# May be left out of the document, but an explicit null is rejected
Omittable = Annotated[Optional[T], BeforeValidator(_reject_null)]


class PostMergeStrategy(str, Enum):
    """Strategy for handling post-merge cascades."""

    CASCADE_PR = "cascade_pr"
    DIRECT_COMMIT = "direct_commit"
    MANUAL = "manual"


class PlatformType(str, Enum):
    """Git hosting platform."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"


class AuthStrategy(str, Enum):
    """Platform authentication strategy."""

    AUTO = "auto"
    TOKEN = "token"
    CLI = "cli"


class CascadeMode(str, Enum):
    """Cascade execution mode."""

    IMMEDIATE = "immediate"
    BATCHED = "batched"
    MANUAL = "manual"


class CommitFormat(str, Enum):
    """Commit message format."""

    CONVENTIONAL = "conventional"
    SIMPLE = "simple"
    CUSTOM = "custom"


class LogLevel(str, Enum):
    """Logging level for hook operations."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


# Post-merge


class CascadePRConfig(BaseModel):
    """Configuration for cascade PR strategy."""

    auto_merge: StrictBool = Field(default=True, description="Auto-merge PRs when checks pass")
    require_checks: StrictBool = Field(default=True, description="Require checks to pass before merge")
    labels: list[StrictStr] = Field(
        default_factory=lambda: ["cascade", "automated"], description="Labels to add to cascade PRs"
    )
    branch_prefix: StrictStr = Field(default="cascade/", description="Branch prefix for cascade PRs")
    delete_branch: StrictBool = Field(default=True, description="Delete branch after merge")


class DirectCommitConfig(BaseModel):
    """Configuration for direct commit strategy."""

    commit_prefix: StrictStr = Field(default="chore(cascade): ", description="Prefix for cascade commits")
    push_immediately: StrictBool = Field(default=True, description="Push immediately after commit")


class PostMergeConfig(BaseModel):
    """Post-merge behavior configuration."""

    strategy: PostMergeStrategy = Field(
        default=PostMergeStrategy.CASCADE_PR, description="Strategy for handling post-merge cascades"
    )
    cascade_pr: Omittable[CascadePRConfig] = Field(default=None, description="Settings for cascade_pr strategy")
    direct_commit: Omittable[DirectCommitConfig] = Field(
        default=None, description="Settings for direct_commit strategy"
    )


# Post-checkout


class PostCheckoutConfig(BaseModel):
    """Post-checkout behavior configuration."""

    create_draft_pr: StrictBool = Field(default=True, description="Create draft PR automatically")
    pr_template: StrictStr = Field(
        default="default", description="PR template to use (default, minimal, detailed, or custom path)"
    )
    auto_assign: StrictBool = Field(default=True, description="Auto-assign PR to artifact assignee")
    auto_add_labels: StrictBool = Field(default=True, description="Auto-add labels from artifact")
    notify_team: StrictBool = Field(default=False, description="Notify team members")


# Hooks


class HookConfig(BaseModel):
    """Base fields shared by every git hook."""

    enabled: Omittable[StrictBool] = Field(default=None, description="Whether the hook is enabled")
    non_blocking: Omittable[StrictBool] = Field(default=None, description="Whether hook should be non-blocking")
    script: Omittable[StrictStr] = Field(default=None, description="Custom script to run")


class PreCommitConfig(HookConfig):
    """Pre-commit hook: base hook fields plus artifact checks."""

    validate_schema: StrictBool = Field(default=True, description="Validate artifact schema")
    validate_state_machine: StrictBool = Field(default=True, description="Validate state machine transitions")
    validate_dependencies: StrictBool = Field(default=True, description="Validate dependency relationships")


class PrePushConfig(HookConfig):
    """Pre-push hook: base hook fields plus push warnings."""

    warn_wip_artifacts: StrictBool = Field(default=True, description="Warn about WIP artifacts")
    warn_non_artifact_branches: StrictBool = Field(default=False, description="Warn about non-artifact branches")


class HooksConfig(BaseModel):
    """Git hooks configuration."""

    enabled: StrictBool = Field(default=True, description="Master switch for all hooks")
    non_blocking: StrictBool = Field(default=True, description="Default non-blocking behavior")
    log_errors: StrictBool = Field(default=True, description="Log errors from hooks")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level for hook operations")
    post_checkout: Omittable[HookConfig] = Field(default=None, description="Post-checkout hook")
    post_merge: Omittable[HookConfig] = Field(default=None, description="Post-merge hook")
    pre_commit: Omittable[PreCommitConfig] = Field(default=None, description="Pre-commit hook")
    pre_push: Omittable[PrePushConfig] = Field(default=None, description="Pre-push hook")


# Platform


class GitHubConfig(BaseModel):
    """GitHub-specific configuration."""

    api_url: ApiUrl = Field(default="https://api.github.com", description="GitHub API URL")
    token_env_var: StrictStr = Field(default="GITHUB_TOKEN", description="Environment variable for token")


class GitLabConfig(BaseModel):
    """GitLab-specific configuration."""

    api_url: ApiUrl = Field(default="https://gitlab.com/api/v4", description="GitLab API URL")
    token_env_var: StrictStr = Field(default="GITLAB_TOKEN", description="Environment variable for token")


class BitbucketConfig(BaseModel):
    """Bitbucket-specific configuration."""

    api_url: ApiUrl = Field(default="https://api.bitbucket.org/2.0", description="Bitbucket API URL")
    token_env_var: StrictStr = Field(default="BITBUCKET_TOKEN", description="Environment variable for token")


class PlatformConfig(BaseModel):
    """Platform configuration."""

    type: PlatformType = Field(default=PlatformType.GITHUB, description="Git platform type")
    auth_strategy: AuthStrategy = Field(default=AuthStrategy.AUTO, description="Platform authentication strategy")
    github: Omittable[GitHubConfig] = Field(default=None, description="GitHub-specific configuration")
    gitlab: Omittable[GitLabConfig] = Field(default=None, description="GitLab-specific configuration")
    bitbucket: Omittable[BitbucketConfig] = Field(default=None, description="Bitbucket-specific configuration")

    def get_platform_settings(self) -> GitHubConfig | GitLabConfig | BitbucketConfig | None:
        """Return the settings block matching the selected platform type, if present."""
        return getattr(self, self.type.value)


# PR creation


class PRCreationConfig(BaseModel):
    """PR creation settings."""

    title_template: StrictStr = Field(default="{artifact_id}: {title}", description="PR title template")
    body_template: StrictStr = Field(
        default="## Summary\n{summary}\n\n## Acceptance Criteria\n{acceptance_criteria}",
        description="PR body template",
    )
    auto_assign: StrictBool = Field(default=True, description="Auto-assign PR to artifact assignee")
    auto_add_labels: StrictBool = Field(default=True, description="Auto-add labels from artifact")
    auto_request_reviewers: StrictBool = Field(default=False, description="Auto-request reviewers")
    additional_labels: list[StrictStr] = Field(default_factory=list, description="Additional labels to add")
    default_reviewers: list[StrictStr] = Field(default_factory=list, description="Default reviewers")
    link_milestone: StrictBool = Field(default=True, description="Link milestone to PR")
    add_to_project: StrictBool = Field(default=False, description="Add PR to project")
    project_id: Omittable[StrictStr] = Field(default=None, description="Project ID for adding PRs")


# Cascades


class CascadesConfig(BaseModel):
    """Cascade execution settings."""

    mode: CascadeMode = Field(default=CascadeMode.IMMEDIATE, description="Cascade execution mode")
    batch_delay_seconds: StrictInt = Field(
        default=30, gt=0, description="Batch delay in seconds (for batched mode)"
    )
    max_batch_size: StrictInt = Field(default=10, gt=0, description="Maximum batch size (for batched mode)")
    parallel_execution: StrictBool = Field(default=True, description="Enable parallel execution")
    max_parallelism: StrictInt = Field(default=5, ge=1, description="Maximum parallelism")
    dry_run: StrictBool = Field(default=False, description="Dry run mode (no actual changes)")
    require_confirmation: StrictBool = Field(default=False, description="Require confirmation before executing")


# Validation policy


class ValidationConfig(BaseModel):
    """Validation settings."""

    enforce_schema: StrictBool = Field(default=True, description="Enforce schema validation")
    enforce_state_machine: StrictBool = Field(default=True, description="Enforce state machine validation")
    enforce_dependencies: StrictBool = Field(default=True, description="Enforce dependency validation")
    warn_missing_fields: StrictBool = Field(default=True, description="Warn about missing optional fields")
    error_on_warnings: StrictBool = Field(default=False, description="Treat warnings as errors")
    allow_wip_commits: StrictBool = Field(default=True, description="Allow WIP commits")
    allow_cross_milestone_deps: StrictBool = Field(default=False, description="Allow cross-milestone dependencies")
    warn_draft_artifacts: StrictBool = Field(default=True, description="Warn about draft artifacts on push")
    warn_blocked_artifacts: StrictBool = Field(default=True, description="Warn about blocked artifacts on push")


# Branches


class BranchesConfig(BaseModel):
    """Branch management settings."""

    artifact_branch_format: StrictStr = Field(default="{artifact_id}", description="Artifact branch naming format")
    cascade_branch_format: StrictStr = Field(
        default="cascade/{artifact_id}", description="Cascade branch naming format"
    )
    delete_after_merge: StrictBool = Field(default=True, description="Delete branch after merge")
    delete_cascade_branches: StrictBool = Field(default=True, description="Delete cascade branches after merge")
    require_pr_for_main: StrictBool = Field(default=True, description="Require PR for main branch")
    allowed_direct_branches: list[StrictStr] = Field(
        default_factory=list, description="Branches allowed for direct commits"
    )


# Commits


class ConventionalCommitsConfig(BaseModel):
    """Conventional commits configuration."""

    type_prefix: StrictStr = Field(default="feat", description="Type prefix (e.g., 'feat', 'fix')")
    scope: Omittable[StrictStr] = Field(default=None, description="Scope for commits")
    breaking_change_marker: StrictStr = Field(default="!", description="Breaking change marker")


class CommitsConfig(BaseModel):
    """Commit message formatting settings."""

    format: CommitFormat = Field(default=CommitFormat.CONVENTIONAL, description="Commit message format")
    conventional: Omittable[ConventionalCommitsConfig] = Field(
        default=None, description="Conventional commits configuration"
    )
    custom_template: Omittable[StrictStr] = Field(default=None, description="Custom template for commit messages")
    cascade_prefix: StrictStr = Field(default="chore(cascade): ", description="Prefix for cascade commits")
    validation_prefix: StrictStr = Field(default="chore(validation): ", description="Prefix for validation commits")
    add_coauthor: StrictBool = Field(default=True, description="Add co-author to commits")
    agent_email_format: StrictStr = Field(
        default="cascade@kodebase.ai", description="Agent email format for co-authorship"
    )


# Root


class GitOpsConfig(BaseModel):
    """Git operations configuration.

    Every block is optional. A block missing from the input stays ``None``;
    a block that is present, even empty, has all of its defaults filled in.
    """

    post_merge: Omittable[PostMergeConfig] = Field(default=None, description="Post-merge behavior")
    post_checkout: Omittable[PostCheckoutConfig] = Field(default=None, description="Post-checkout behavior")
    hooks: Omittable[HooksConfig] = Field(default=None, description="Git hooks configuration")
    platform: Omittable[PlatformConfig] = Field(default=None, description="Platform configuration")
    pr_creation: Omittable[PRCreationConfig] = Field(default=None, description="PR creation settings")
    cascades: Omittable[CascadesConfig] = Field(default=None, description="Cascade execution settings")
    validation: Omittable[ValidationConfig] = Field(default=None, description="Validation settings")
    branches: Omittable[BranchesConfig] = Field(default=None, description="Branch management settings")
    commits: Omittable[CommitsConfig] = Field(default=None, description="Commit message formatting")


class KodebaseConfig(BaseModel):
    """Root configuration model for Kodebase."""

    version: StrictStr = Field(default="1.0", description="Configuration version")
    artifacts_dir: StrictStr = Field(
        default=".kodebase/artifacts", alias="artifactsDir", description="Base directory for artifacts"
    )
    git_ops: Omittable[GitOpsConfig] = Field(default=None, alias="gitOps", description="Git operations configuration")

    def to_dict(self) -> dict[str, Any]:
        """Dump to a plain document using the on-disk key names, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
